"""A small printf: the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _wrap_signed(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def format_hex(x: int, spec: str) -> str:
    """Hexadecimal text of ``x``: lower case for ``"x"``, upper case for ``"X"``.

    Any other ``spec`` gives an empty string.
    """
    x = _as_int(x)
    if x < 0:
        raise ValueError(f"expected an unsigned value, got {x}")
    if spec == "x":
        return f"{x:x}"
    if spec == "X":
        return f"{x:X}"
    return ""


def format_uint(x: int) -> str:
    """Decimal text of the unsigned value ``x``."""
    x = _as_int(x)
    if x < 0:
        raise ValueError(f"expected an unsigned value, got {x}")
    return str(x)


def format_int(n: int) -> str:
    """Decimal text of ``n``."""
    return str(_as_int(n))


def format_str(s: Optional[str]) -> str:
    """``s`` itself, or ``"(null)"`` for None."""
    return "(null)" if s is None else str(s)


def format_address(ptr: Any) -> str:
    """``0x`` and the lower-case hex address of ``ptr``; ``"(nil)"`` for None or 0.

    An int is taken as the address itself; any other object is shown by its id.
    """
    if ptr is None or (isinstance(ptr, int) and not isinstance(ptr, bool) and ptr == 0):
        return "(nil)"
    address = ptr if isinstance(ptr, int) and not isinstance(ptr, bool) else id(ptr)
    return "0x" + format_hex(address, "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX" or not spec:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return format_str(value)
    if spec == "p":
        return format_address(value)
    if spec in "di":
        return format_int(_wrap_signed(_as_int(value)))
    if spec == "u":
        return format_uint(_as_int(value) & _UINT_MASK)
    return format_hex(_as_int(value) & _UINT_MASK, spec)


def printf_format(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    Unknown conversions and a lone trailing ``%`` produce nothing and take
    no argument. Text after a NUL character is ignored.
    """
    fmt = fmt.split("\0", 1)[0]
    arguments = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            pieces.append(_convert(next(chars, ""), arguments))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = printf_format(fmt, *args)
    sys.stdout.write(text)
    return len(text)