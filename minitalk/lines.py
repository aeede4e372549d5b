"""Reading a file descriptor or binary stream one line at a time."""

from __future__ import annotations

import os
from typing import BinaryIO, Iterator, Optional, Tuple, Union

BUFFER_SIZE = 1

Source = Union[int, BinaryIO]
Chunk = Union[str, bytes]


def find_newline(text: Optional[Chunk]) -> Optional[int]:
    """Return the index of the first newline in ``text``, or None."""
    if not text:
        return None
    newline = "\n" if isinstance(text, str) else b"\n"
    index = text.find(newline)
    return None if index < 0 else index


def extract_line(buffer: Chunk) -> Tuple[Chunk, Chunk]:
    """Split ``buffer`` into its first line, newline included, and the rest."""
    index = find_newline(buffer)
    if index is None:
        return buffer, buffer[:0]
    return buffer[:index + 1], buffer[index + 1:]


class LineReader:
    """Returns successive lines read from a file descriptor or binary stream.

    Data is read ``buffer_size`` bytes at a time; a NUL byte ends the chunk
    it is in. Lines keep their trailing newline; the last line may lack one.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, int) and source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        self._source = source
        self._buffer_size = buffer_size
        self._buffer = b""

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size) or b""

    def _fill(self) -> None:
        while find_newline(self._buffer) is None:
            try:
                chunk = self._read_chunk()
            except OSError:
                self._buffer = b""
                raise
            if not chunk:
                break
            self._buffer += chunk.split(b"\0", 1)[0]

    def next_line(self) -> Optional[bytes]:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._buffer:
            return None
        line, self._buffer = extract_line(self._buffer)
        return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line