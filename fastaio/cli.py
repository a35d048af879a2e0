"""Command-line interface for fastaio."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from .config import SUMMARY_DEFAULTS, WRAP_DEFAULTS, collect_runtime_config
from .io import FormatError, read_fasta_records, write_fasta_records
from .io.paths import require_file
from .logging_utils import configure_logging, get_logger
from .summary import write_summary

Handler = Callable[[argparse.Namespace], int]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastaio",
        description="fastaio - read, rewrap and summarize FASTA files.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_rewrap_parser(subparsers)
    _add_summary_parser(subparsers)
    return parser


def _add_rewrap_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("rewrap", help="Re-encode a FASTA file at a new line width.")
    parser.add_argument(
        "--in-fasta",
        type=Path,
        required=True,
        help="Input FASTA file path.",
    )
    parser.add_argument(
        "--out-fasta",
        type=Path,
        default=WRAP_DEFAULTS.out_path,
        help=f"Output FASTA file path (default: {WRAP_DEFAULTS.out_path}).",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help=f"Residues per line (default: $FASTAIO_WIDTH or {WRAP_DEFAULTS.width}; 0 means 1).",
    )
    parser.set_defaults(handler=_handle_rewrap)


def _add_summary_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("summary", help="Tabulate record names and lengths.")
    parser.add_argument(
        "--in-fasta",
        type=Path,
        required=True,
        help="Input FASTA file path.",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=SUMMARY_DEFAULTS.out_dir,
        help="Directory for summary outputs.",
    )
    parser.set_defaults(handler=_handle_summary)


def _handle_rewrap(args: argparse.Namespace) -> int:
    logger = get_logger()
    in_fasta = require_file(args.in_fasta)
    width = collect_runtime_config().resolved_width(args.width)

    counter = _Counter()
    written = write_fasta_records(args.out_fasta, counter.track(read_fasta_records(in_fasta)), width=width)
    logger.info("Rewrapped %s records at width %s (%s bytes)", counter.count, width, written)
    logger.info("FASTA written to %s", args.out_fasta)
    return 0


def _handle_summary(args: argparse.Namespace) -> int:
    logger = get_logger()
    paths = write_summary(args.in_fasta, args.out_dir)
    logger.info("Summary table -> %s", paths.table_csv)
    logger.info("Summary manifest -> %s", paths.manifest_json)
    return 0


class _Counter:
    def __init__(self) -> None:
        self.count = 0

    def track(self, records):
        for record in records:
            self.count += 1
            yield record


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)
    logger = get_logger()
    handler: Handler = args.handler

    try:
        return handler(args)
    except FileNotFoundError as exc:
        logger.error(str(exc))
        return 1
    except FormatError as exc:
        logger.error("Malformed FASTA input: %s", exc)
        return 1
    except (OSError, ValueError) as exc:
        logger.error(str(exc))
        return 1
    except Exception:  # pragma: no cover - safety net
        logger.exception("Unexpected error")
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
