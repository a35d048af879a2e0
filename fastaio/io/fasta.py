"""Streaming FASTA reader and writer."""

from __future__ import annotations

import errno
import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional

from ..config import DEFAULT_WIDTH
from ..record import Record, SequenceLike

HEADER_MARKER = b">"
NEWLINE = b"\n"
SEQUENCE_BEFORE_HEADER = "fasta: format error: sequence before header"


class FormatError(ValueError):
    """Raised when the input does not follow the FASTA layout."""


class EndOfStream(EOFError):
    """Raised by Reader.read once every record has been returned."""


class WriteError(OSError):
    """Raised when the sink fails mid-record; ``written`` holds the partial count."""

    def __init__(self, written: int, cause: OSError) -> None:
        if cause.errno is None:
            super().__init__(str(cause))
        else:
            super().__init__(cause.errno, cause.strerror)
        self.written = written


class Reader:
    """Pull FASTA records one at a time from a binary stream.

    The stream only needs ``readline()``. Lines are trimmed before they are
    interpreted and blank lines are ignored. ``read`` returns a sealed record
    or raises: ``EndOfStream`` once the input is exhausted (and on every call
    after that), ``FormatError`` when sequence data shows up before the first
    header, and any ``OSError`` from the stream as-is.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._name: Optional[str] = None
        self._data = bytearray()
        self._ended = False
        self._error: Optional[FormatError] = None

    def read(self) -> Record:
        if self._error is not None:
            raise self._error
        if self._ended:
            raise EndOfStream("fasta: end of stream")

        while True:
            raw = self._stream.readline()
            if not raw:
                # readline() returns an unterminated last line like any other, so it
                # was interpreted on the previous pass: a trailing ">name" is a header.
                self._ended = True
                record = self._seal()
                if record is None:
                    raise EndOfStream("fasta: end of stream")
                return record

            line = raw.strip()
            if not line:
                continue

            if line.startswith(HEADER_MARKER):
                previous = self._seal()
                self._name = line[1:].decode("utf-8", errors="surrogateescape")
                if previous is not None:
                    return previous
                continue

            if self._name is None:
                self._error = FormatError(SEQUENCE_BEFORE_HEADER)
                raise self._error
            self._data += line

    def _seal(self) -> Optional[Record]:
        if self._name is None:
            return None
        record = Record(name=self._name, data=bytes(self._data))
        self._name = None
        self._data = bytearray()
        return record

    def __iter__(self) -> "Reader":
        return self

    def __next__(self) -> Record:
        try:
            return self.read()
        except EndOfStream:
            raise StopIteration from None


class Writer:
    """Write records as FASTA, wrapping the sequence every ``width`` residues.

    A width of 0 (or None) is treated as 1.
    """

    def __init__(self, sink: BinaryIO, width: Optional[int] = 0) -> None:
        if not width:
            width = 1
        if width < 0:
            raise ValueError(f"width must be positive, got {width}")
        self._sink = sink
        self.width = width

    def write(self, seq: SequenceLike) -> int:
        """Write one record and return the number of bytes placed on the sink."""

        written = 0
        try:
            for chunk in self._chunks(seq):
                while chunk:
                    count = self._sink.write(chunk)
                    if not count:
                        raise BlockingIOError(errno.EAGAIN, "sink accepted no bytes")
                    written += count
                    chunk = chunk[count:]
        except OSError as exc:
            raise WriteError(written, exc) from exc
        return written

    def _chunks(self, seq: SequenceLike) -> Iterator[bytes]:
        data = _as_bytes(seq.data)
        yield HEADER_MARKER + seq.name.encode("utf-8", errors="surrogateescape")
        if not data:
            yield NEWLINE
        # A line break precedes every width-th residue, starting at 0.
        for start in range(0, len(data), self.width):
            yield NEWLINE + data[start : start + self.width]
        yield NEWLINE


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogateescape")
    return bytes(data)


def read_fasta_records(path: Path) -> Iterator[Record]:
    """Yield records from a FASTA file."""

    with Path(path).open("rb") as handle:
        yield from Reader(handle)


def write_fasta_records(path: Path, records: Iterable[SequenceLike], width: int = DEFAULT_WIDTH) -> int:
    """Write records to a FASTA file and return the total byte count.

    Records go to a temporary file next to ``path`` that replaces it only once
    every record is written, so ``records`` may be read lazily from ``path``
    itself and a failure leaves any existing file untouched.
    """

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    total = 0
    try:
        with os.fdopen(fd, "wb") as handle:
            writer = Writer(handle, width)
            for record in records:
                total += writer.write(record)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return total


__all__ = [
    "EndOfStream",
    "FormatError",
    "Reader",
    "WriteError",
    "Writer",
    "read_fasta_records",
    "write_fasta_records",
]
