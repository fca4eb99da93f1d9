"""Turning command-line arguments into the numbers to sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")
_WHITESPACE = frozenset(" \t\n\v\f\r")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_args(args: Iterable[str]) -> list[str]:
    """Split every argument on spaces and return all tokens in order.

    An argument that is empty or holds nothing but spaces is an error.
    """
    tokens: list[str] = []
    for arg in args:
        if not arg.strip(" "):
            raise ParseError()
        tokens.extend(part for part in arg.split(" ") if part)
    return tokens


def is_well_formed(token: str) -> bool:
    """Whether the token is an optional sign followed by ASCII digits only."""
    body = token
    if token[:1] in _SIGNS and token:
        body = token[1:]
        if not body:
            return False
    return all(char in _DIGITS for char in body)


def _scan(token: str) -> tuple[int, str]:
    """Skip leading whitespace and a sign; return the sign and what follows."""
    rest = token.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in _SIGNS and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    return sign, rest


def _leading_digits(text: str) -> str:
    for position, char in enumerate(text):
        if char not in _DIGITS:
            return text[:position]
    return text


def overflows(token: str) -> bool:
    """Whether the number at the start of the token leaves the 32-bit range."""
    sign, rest = _scan(token)
    result = 0
    for char in _leading_digits(rest):
        result = result * 10 + int(char)
        if not INT_MIN <= result * sign <= INT_MAX:
            return True
    return False


def to_int(token: str) -> int:
    """Read the number at the start of the token as a 32-bit signed integer.

    Leading whitespace and one sign are accepted; reading stops at the first
    character that is not a digit. Values outside the range wrap around.
    """
    sign, rest = _scan(token)
    digits = _leading_digits(rest)
    value = sign * int(digits) if digits else 0
    return (value - INT_MIN) % 2**32 + INT_MIN


def has_duplicates(tokens: Sequence[str]) -> bool:
    """Whether two tokens read as the same integer."""
    seen: set[int] = set()
    for token in tokens:
        value = to_int(token)
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_args(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into the list of integers to sort.

    Raises ParseError for blank arguments, malformed numbers, duplicates and
    numbers outside the 32-bit signed range.
    """
    tokens = split_args(args)
    if not all(is_well_formed(token) for token in tokens):
        raise ParseError()
    if has_duplicates(tokens):
        raise ParseError()
    if any(overflows(token) for token in tokens):
        raise ParseError()
    return [to_int(token) for token in tokens]


def index_values(values: Iterable[int]) -> list[int]:
    """Rank each value: the largest gets ``len - 1``, the smallest ``0``.

    The smallest 32-bit integer is always given rank 1 and the others are
    ranked above it, so when it is present two values share rank 1.
    Equal values keep their order: the earlier one ranks higher.
    """
    values = list(values)
    indexes = [1 if value == INT_MIN else 0 for value in values]
    ranked = sorted(
        (position for position, value in enumerate(values) if value > INT_MIN),
        key=lambda position: -values[position],
    )
    for rank, position in zip(range(len(values) - 1, -1, -1), ranked):
        indexes[position] = rank
    return indexes