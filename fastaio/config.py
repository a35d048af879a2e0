"""Central location for default paths and settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

# Residues per line when nothing else is requested
DEFAULT_WIDTH = 60
DEFAULT_OUT_DIR = Path("data")
DEFAULT_SUMMARY_DIR = DEFAULT_OUT_DIR / "summary"

WIDTH_ENV_VAR = "FASTAIO_WIDTH"

PathLike = Union[str, Path]


@dataclass(slots=True)
class WrapDefaults:
    """Options surfaced on the CLI rewrap command."""

    width: int = DEFAULT_WIDTH
    out_path: Path = DEFAULT_OUT_DIR / "rewrapped.fasta"


@dataclass(slots=True)
class SummaryDefaults:
    """Default values for summary command arguments."""

    out_dir: Path = DEFAULT_SUMMARY_DIR


@dataclass
class RuntimeConfig:
    """Settings picked up from the environment (and any .env file)."""

    width: Optional[int] = None

    def resolved_width(self, cli_value: Optional[int] = None) -> int:
        if cli_value is not None:
            return cli_value
        if self.width is not None:
            return self.width
        return DEFAULT_WIDTH


def collect_runtime_config(start_path: Optional[PathLike] = None) -> RuntimeConfig:
    """Source the closest .env file without overriding existing variables."""
    env_path = _find_env_file(start_path)
    if env_path:
        load_dotenv(env_path, override=False)
    return RuntimeConfig(width=_parse_width(os.environ.get(WIDTH_ENV_VAR)))


def _find_env_file(start_path: Optional[PathLike]) -> Optional[Path]:
    if start_path is None:
        found = find_dotenv(usecwd=True)
        return Path(found) if found else None
    current = Path(start_path).resolve()
    for candidate_dir in (current, *current.parents):
        candidate = candidate_dir / ".env"
        if candidate.exists():
            return candidate
    return None


def _parse_width(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{WIDTH_ENV_VAR} must be an integer, got {raw!r}") from exc


WRAP_DEFAULTS = WrapDefaults()
SUMMARY_DEFAULTS = SummaryDefaults()
