"""Per-record length tables for FASTA files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd

from .io.fasta import read_fasta_records
from .io.paths import ensure_dir, now_iso, require_file, write_json
from .logging_utils import get_logger
from .record import SequenceLike

logger = get_logger("summary")

SUMMARY_COLUMNS = ["index", "name", "length"]


@dataclass
class SummaryPaths:
    table_csv: Path
    manifest_json: Path


def summarize_records(records: Iterable[SequenceLike]) -> pd.DataFrame:
    """Build a table with one row per record, in input order."""
    rows = [
        {"index": idx, "name": record.name, "length": len(record.data)}
        for idx, record in enumerate(records)
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def write_summary(fasta_path: Path, out_dir: Path) -> SummaryPaths:
    """Summarize a FASTA file into a CSV table plus a JSON manifest."""
    fasta_path = require_file(fasta_path)
    out_dir = ensure_dir(out_dir)

    logger.info("Reading records from %s", fasta_path)
    table = summarize_records(read_fasta_records(fasta_path))

    table_path = out_dir / "record_summary.csv"
    table.to_csv(table_path, index=False)

    lengths = table["length"]
    manifest_path = out_dir / "summary_manifest.json"
    write_json(
        manifest_path,
        {
            "timestamp": now_iso(),
            "inputs": {"fasta": str(fasta_path)},
            "outputs": {"table": str(table_path)},
            "records": int(len(table)),
            "total_residues": int(lengths.sum()),
            "min_length": int(lengths.min()) if len(table) else None,
            "max_length": int(lengths.max()) if len(table) else None,
        },
    )

    if table.empty:
        logger.warning("No records found in %s; summary is empty.", fasta_path)
    else:
        logger.info("Summarized %s records (%s residues)", len(table), int(lengths.sum()))
    return SummaryPaths(table_csv=table_path, manifest_json=manifest_path)
