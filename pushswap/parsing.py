"""Turning command-line arguments into the integers to be sorted."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def atoi(text: str) -> int:
    """Read a leading integer the lenient way: skip whitespace, one sign, digits.

    Anything after the digits is ignored; no digits at all gives 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    negative = False
    if stripped[:1] in ("+", "-"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    number = int("".join(digits)) if digits else 0
    return -number if negative else number


def is_valid_integer(text: str) -> bool:
    """Return True if text is an optional sign followed by one or more digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all("0" <= char <= "9" for char in body)


def has_duplicates(tokens: Iterable[str]) -> bool:
    """Return True if two tokens denote the same integer."""
    seen: set[int] = set()
    for token in tokens:
        value = atoi(token)
        if value in seen:
            return True
        seen.add(value)
    return False


def is_blank(text: str) -> bool:
    """Return True if text is empty or made only of space characters."""
    return all(char == " " for char in text)


def check_tokens(tokens: Sequence[str]) -> None:
    """Raise InputError unless every token is a distinct 32-bit integer."""
    for token in tokens:
        if not is_valid_integer(token) or not INT_MIN <= atoi(token) <= INT_MAX:
            raise InputError()
    if has_duplicates(tokens):
        raise InputError()


def split_arguments(args: Sequence[str]) -> list[str]:
    """Split the arguments on spaces into individual tokens."""
    joined = args[0] if len(args) == 1 else " ".join(args)
    return [token for token in joined.split(" ") if token]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Return the integers named by the arguments, in the order given.

    Raises InputError if any token is malformed, out of range or repeated.
    """
    tokens = split_arguments(args)
    check_tokens(tokens)
    return [atoi(token) for token in tokens]