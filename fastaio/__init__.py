"""Streaming FASTA decoding and encoding."""

from .io.fasta import (
    EndOfStream,
    FormatError,
    Reader,
    WriteError,
    Writer,
    read_fasta_records,
    write_fasta_records,
)
from .record import Record, SequenceLike

__version__ = "0.1.0"

__all__ = [
    "EndOfStream",
    "FormatError",
    "Reader",
    "Record",
    "SequenceLike",
    "WriteError",
    "Writer",
    "read_fasta_records",
    "write_fasta_records",
    "__version__",
]
