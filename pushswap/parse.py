"""Reading command-line arguments into number tokens and validating them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.chars import atoi, is_digit
from pushswap.strings import split

INT_MIN = -2147483648
INT_MAX = 2147483647


class InputError(ValueError):
    """Raised when the arguments are not distinct integers within int range."""


def read_tokens(args: Iterable[str]) -> list[str]:
    """Turn arguments into tokens, splitting any argument that holds a space."""
    tokens: list[str] = []
    for arg in args:
        if " " in arg:
            tokens.extend(split(arg, " "))
        else:
            tokens.append(arg)
    return tokens


def check_digits(token: str) -> bool:
    """True if ``token`` is digits with an optional leading sign that is not alone."""
    for position, ch in enumerate(token):
        if is_digit(ch):
            continue
        if position > 0 or ch not in "+-" or len(token) == 1:
            return False
    return True


def check_range(token: str) -> bool:
    """True if the signed number written in ``token`` fits a 32-bit int."""
    negative = token.startswith("-")
    digits = token[1:] if token[:1] in ("-", "+") else token
    value = 0
    for ch in digits:
        value = value * 10 + (ord(ch) - ord("0"))
    if negative:
        value = -value
    return INT_MIN <= value <= INT_MAX


def check_int_range(token: str) -> bool:
    """True if a well-formed ``token`` fits a 32-bit int, deciding by length first."""
    length = len(token)
    signed = token[:1] in ("-", "+")
    if length < 10:
        return True
    if length == 10 and signed:
        return True
    if length > 11:
        return False
    if length == 11 and not signed:
        return False
    return check_range(token)


def check_dups(tokens: Sequence[str], index: int) -> bool:
    """True if the token at ``index`` has no equal value among the tokens before it."""
    value = atoi(tokens[index])
    return all(atoi(earlier) != value for earlier in tokens[:index])


def check_valid(tokens: Sequence[str]) -> None:
    """Raise InputError unless every token is a distinct integer within int range."""
    for index, token in enumerate(tokens):
        if not check_digits(token):
            raise InputError(f"not a number: {token!r}")
        if not check_int_range(token):
            raise InputError(f"out of int range: {token!r}")
        if not check_dups(tokens, index):
            raise InputError(f"duplicate number: {token!r}")