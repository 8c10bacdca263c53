"""String helpers with C-string semantics: searching, comparing, copying, splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, TypeVar

T = TypeVar("T")


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; code 0 stands for the terminator."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c)


def _require_str(*values: object) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected a str, got {type(value).__name__}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    _require_str(s)
    return len(s)


def strchr(s: str, c: int | str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator ``"\\0"`` is found at ``len(s)``."""
    _require_str(s)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator ``"\\0"`` is found at ``len(s)``."""
    _require_str(s)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference at the first position where the strings
    differ or either one ends, and 0 if the first ``n`` characters match.
    """
    _require_str(s1, s2)
    for i in range(max(n, 0)):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0 or b == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly in the first ``n`` characters of ``big``.

    An empty ``little`` is found at 0.
    """
    _require_str(big, little)
    if not little:
        return 0
    index = big[:max(n, 0)].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters, empty when
    ``size`` is 0) and the full length of ``src``.
    """
    _require_str(src)
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length it tried to create. When
    ``size`` does not exceed ``len(dst)``, ``dst`` is unchanged and the
    length reported is ``size + len(src)``.
    """
    _require_str(dst, src)
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    _require_str(s)
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _require_str(s)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    _require_str(s1, s2)
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    _require_str(s, charset)
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _require_str(s)
    delimiter = _char(sep)
    return [word for word in s.split(delimiter) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string of ``f(index, char)`` for each character of ``s``."""
    _require_str(s)
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` on each item of ``s`` in place.

    A value returned by ``f`` replaces the item; ``None`` leaves it as it is.
    """
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement