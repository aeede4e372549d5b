"""Bit-level wire protocol: a message is sent one bit per signal.

Each byte travels least significant bit first, eight signals per byte, and a
NUL byte ends the message. The receiving side rebuilds bytes from bits and
messages from bytes, keeping at most ``BUFFER_SIZE - 1`` bytes per message.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

BUFFER_SIZE = 100000
BITS_PER_BYTE = 8
TERMINATOR = 0


def encode_byte(value: int) -> List[int]:
    """Return the eight bits of ``value``, least significant first."""
    value = int(value) & 0xFF
    return [(value >> bit) & 1 for bit in range(BITS_PER_BYTE)]


def encode_message(message: Union[str, bytes, bytearray]) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of the NUL terminator.

    Text is encoded as UTF-8. Anything from an embedded NUL on is not sent.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data + bytes([TERMINATOR]):
        yield from encode_byte(byte)


class ByteAssembler:
    """Collects bits, least significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def push(self, bit: Union[int, bool]) -> Optional[int]:
        """Add one bit; return the byte once eight bits have arrived."""
        if bit:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self._value = 0
        self._count = 0
        return value


class MessageAssembler:
    """Collects bytes into a message that a NUL byte completes.

    Bytes beyond ``limit - 1`` are dropped silently.
    """

    def __init__(self, limit: int = BUFFER_SIZE) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self._limit = limit
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes of the message received so far."""
        return bytes(self._buffer)

    def push(self, value: int) -> Optional[bytes]:
        """Add one byte; return the whole message when ``value`` is NUL."""
        value = int(value) & 0xFF
        if value == TERMINATOR:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        if len(self._buffer) < self._limit - 1:
            self._buffer.append(value)
        return None


class Receiver:
    """Turns a stream of bits into complete messages."""

    def __init__(self, limit: int = BUFFER_SIZE) -> None:
        self._bytes = ByteAssembler()
        self._messages = MessageAssembler(limit)

    def push(self, bit: Union[int, bool]) -> Optional[bytes]:
        """Add one bit; return the message when its terminator completes."""
        value = self._bytes.push(bit)
        if value is None:
            return None
        return self._messages.push(value)