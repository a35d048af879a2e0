"""Record type shared by the FASTA reader and writer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class SequenceLike(Protocol):
    """Anything that can be written as a FASTA record."""

    name: str
    data: bytes


@dataclass(frozen=True, slots=True)
class Record:
    """A named sequence decoded from (or destined for) FASTA text."""

    name: str
    data: bytes = b""


__all__ = ["Record", "SequenceLike"]
