"""Formatted output: a small printf and helpers that write numbers and text."""

from __future__ import annotations

import os
import sys
from typing import Any, Optional, TextIO, Union

CharLike = Union[str, int]

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_CONVERSIONS = frozenset("cspdiuxX%")
_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = (1 << 64) - 1


def _int32(number: int) -> int:
    number = int(number) & _UINT32_MASK
    return number - (1 << 32) if number & 0x80000000 else number


def _uint32(number: int) -> int:
    return int(number) & _UINT32_MASK


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _hex(number: int, digits: str) -> str:
    if number == 0:
        return digits[0]
    out = []
    while number:
        number, rest = divmod(number, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def _text(text: Optional[str]) -> str:
    return "(null)" if text is None else str(text)


def _pointer(address: Optional[int]) -> str:
    if not address:
        return "(nil)"
    return "0x" + _hex(int(address) & _POINTER_MASK, _HEX_LOWER)


def _convert(conversion: str, args: list) -> str:
    if conversion == "%":
        return "%"
    if not args:
        raise TypeError(f"not enough arguments for %{conversion}")
    value: Any = args.pop(0)
    if conversion == "c":
        return _char(value)
    if conversion in "di":
        return str(_int32(value))
    if conversion == "s":
        return _text(value)
    if conversion == "u":
        return str(_uint32(value))
    if conversion == "x":
        return _hex(_uint32(value), _HEX_LOWER)
    if conversion == "X":
        return _hex(_uint32(value), _HEX_UPPER)
    return _pointer(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with the conversions %c %s %p %d %i %u %x %X and %%.

    A '%' not followed by a known conversion is kept as it is. Integers
    follow 32-bit C semantics; ``None`` prints as "(null)" for %s and
    "(nil)" for %p. Too few arguments raise TypeError.
    """
    pending = list(args)
    pieces = []
    chars = iter(enumerate(fmt))
    for index, char in chars:
        following = fmt[index + 1] if index + 1 < len(fmt) else ""
        if char == "%" and following in _CONVERSIONS and following:
            pieces.append(_convert(following, pending))
            next(chars, None)
        else:
            pieces.append(char)
    return "".join(pieces)


class Writer:
    """Writes characters, numbers and formatted text to a text stream.

    Every method returns the number of characters written. Without a stream
    the current ``sys.stdout`` is used.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, text: str) -> int:
        self.stream.write(text)
        return len(text)

    def putchar(self, c: CharLike) -> int:
        return self._emit(_char(c))

    def putstr(self, text: Optional[str]) -> int:
        return self._emit(_text(text))

    def putnbr(self, number: int) -> int:
        return self._emit(str(_int32(number)))

    def put_unsigned(self, number: int) -> int:
        return self._emit(str(_uint32(number)))

    def puthex(self, number: int, lowercase: bool) -> int:
        digits = _HEX_LOWER if lowercase else _HEX_UPPER
        return self._emit(_hex(_uint32(number), digits))

    def putptr(self, address: Optional[int]) -> int:
        return self._emit(_pointer(address))

    def printf(self, fmt: str, *args: Any) -> int:
        return self._emit(format_printf(fmt, *args))


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to a file descriptor."""
    os.write(fd, _char(c).encode("utf-8"))


def putstr_fd(text: Optional[str], fd: int) -> None:
    """Write ``text`` to a file descriptor; ``None`` writes nothing."""
    if text is None:
        return
    os.write(fd, text.encode("utf-8"))


def putendl_fd(text: Optional[str], fd: int) -> None:
    """Write ``text`` and a newline; ``None`` writes nothing."""
    if text is None:
        return
    putstr_fd(text, fd)
    putchar_fd("\n", fd)


def putnbr_fd(number: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to a file descriptor."""
    putstr_fd(str(_int32(number)), fd)