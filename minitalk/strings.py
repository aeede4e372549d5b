"""C-style string helpers: length, bounded copy, search, comparison and slicing.

Text is treated as a C string: anything from the first NUL character on is
ignored. Positions are returned as indices, and ``None`` stands for "not found".
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

Text = Union[str, bytes, bytearray]
CharLike = Union[str, int]


def _terminated(text: Text) -> Text:
    """Return ``text`` cut at its first NUL."""
    terminator = "\0" if isinstance(text, str) else b"\0"
    index = text.find(terminator)
    return text if index < 0 else text[:index]


def _as_bytes(data: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _check_size(size: int, dest: bytearray) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer length {len(dest)}")


def strlen(text: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(text))


def strlcpy(dest: bytearray, src: Union[str, bytes, bytearray], size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dest`` and terminate it.

    Nothing is written when ``size`` is 0. Returns the length of ``src``,
    the length of the string it tried to create.
    """
    _check_size(size, dest)
    source = _terminated(_as_bytes(src))
    if size > 0:
        count = min(len(source), size - 1)
        dest[:count] = source[:count]
        dest[count] = 0
    return len(source)


def strlcat(dest: bytearray, src: Union[str, bytes, bytearray], size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest``.

    The result, terminator included, never goes past ``size`` bytes. Returns
    the length of the string it tried to create; when ``dest`` holds no NUL
    within ``size`` bytes nothing is written and ``size + len(src)`` is
    returned.
    """
    _check_size(size, dest)
    source = _terminated(_as_bytes(src))
    dest_len = bytes(dest[:size]).find(b"\0")
    if dest_len < 0:
        dest_len = size
    if size <= dest_len:
        return dest_len + len(source)
    count = min(len(source), size - 1 - dest_len)
    dest[dest_len:dest_len + count] = source[:count]
    dest[dest_len + count] = 0
    return dest_len + len(source)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    body = _terminated(text)
    code = _code(c)
    if code == 0:
        return len(body)
    index = body.find(chr(code))
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    body = _terminated(text)
    code = _code(c)
    if code == 0:
        return len(body)
    index = body.rfind(chr(code))
    return None if index < 0 else index


def strnstr(big: str, small: str, limit: int) -> Optional[int]:
    """Return where ``small`` first occurs wholly within ``big[:limit]``, or None.

    An empty ``small`` is found at index 0.
    """
    needle = _terminated(small)
    if not needle:
        return 0
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    haystack = _terminated(big)[:limit]
    index = haystack.find(needle)
    return None if index < 0 else index


def strncmp(first: Text, second: Text, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch, or 0
    when the strings agree up to ``n`` characters or up to their end.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    a_text = _terminated(first)
    b_text = _terminated(second)
    a_codes = [_code(ch) for ch in a_text[:n]] if isinstance(a_text, str) else list(a_text[:n])
    b_codes = [_code(ch) for ch in b_text[:n]] if isinstance(b_text, str) else list(b_text[:n])
    for index in range(min(n, max(len(a_codes), len(b_codes)) + 1)):
        a = a_codes[index] if index < len(a_codes) else 0
        b = b_codes[index] if index < len(b_codes) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strdup(text: str) -> str:
    """Return a copy of ``text`` up to its first NUL."""
    return str(_terminated(text))


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = _terminated(text)
    if start >= len(body):
        return ""
    return body[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _terminated(first) + _terminated(second)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return _terminated(text).strip(_terminated(charset))


def split(text: str, delimiter: CharLike) -> List[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces."""
    code = _code(delimiter)
    body = _terminated(text)
    if code == 0:
        return [body] if body else []
    return [word for word in body.split(chr(code)) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(_terminated(text)))


def striteri(chars: List[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each character of a mutable character list.

    A non-None result replaces the character in place. Iteration stops at the
    first NUL character.
    """
    for index, char in enumerate(chars):
        if char == "\0":
            break
        result = func(index, char)
        if result is not None:
            chars[index] = result