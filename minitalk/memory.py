"""Byte-buffer primitives: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_count(count: int, *buffers: Buffer) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def memset(buffer: MutableBuffer, value: int, count: int) -> MutableBuffer:
    """Fill the first ``count`` bytes with ``value`` (as an unsigned byte)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: MutableBuffer, count: int) -> None:
    """Set the first ``count`` bytes to zero."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the total size does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes is too large")
    return bytearray(total)


def memcpy(dest: MutableBuffer, src: Buffer, count: int) -> MutableBuffer:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(
    buffer: MutableBuffer, dest_offset: int, src_offset: int, count: int
) -> MutableBuffer:
    """Copy ``count`` bytes within one buffer; the regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count)
    if max(dest_offset, src_offset) + count > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest_offset:dest_offset + count] = bytes(
        buffer[src_offset:src_offset + count]
    )
    return buffer


def memchr(buffer: Buffer, value: int, count: int) -> Optional[int]:
    """Return the index of ``value`` within the first ``count`` bytes, or None."""
    _check_count(count, buffer)
    index = bytes(buffer[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Buffer, second: Buffer, count: int) -> int:
    """Compare ``count`` bytes; return the difference at the first mismatch."""
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0