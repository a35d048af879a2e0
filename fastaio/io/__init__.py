"""Reading and writing FASTA streams."""

from .fasta import (
    EndOfStream,
    FormatError,
    Reader,
    WriteError,
    Writer,
    read_fasta_records,
    write_fasta_records,
)
from .paths import ensure_dir, now_iso, write_json

__all__ = [
    "EndOfStream",
    "FormatError",
    "Reader",
    "WriteError",
    "Writer",
    "read_fasta_records",
    "write_fasta_records",
    "ensure_dir",
    "now_iso",
    "write_json",
]
