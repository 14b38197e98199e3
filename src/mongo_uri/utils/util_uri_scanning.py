# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Escape-aware scanning primitives for connection strings.

The connection string grammar reuses ``,``, ``/``, ``?``, ``:``, ``@``, ``&``
and ``=`` as separators. A backslash marks the following character as
escaped so that it is not treated as a separator. Escapes are recognized but
never decoded: the backslash stays in every captured substring.

Example:
    >>> scan_to_char(r"us\\@er@host", "@")
    6
    >>> split_unescaped("a=1&b=2&", "&")
    ['a=1', 'b=2']
"""

from __future__ import annotations

from mongo_uri.types import INT32_MAX, INT32_MIN

ESCAPE_CHAR = "\\"

_ASCII_DIGITS = frozenset("0123456789")

_INT32_DIGITS = len(str(INT32_MAX))


def is_ascii_digit(char: str) -> bool:
    """Return True if ``char`` is a single ASCII decimal digit."""
    return char in _ASCII_DIGITS


def scan_to_char(text: str, stop: str, start: int = 0) -> int | None:
    """Find the first unescaped occurrence of ``stop`` in ``text``.

    Scanning proceeds one character at a time from ``start``. A backslash
    causes the next character to be skipped unconditionally.

    Args:
        text: The string to scan.
        stop: The single separator character to look for.
        start: Offset to start scanning at.

    Returns:
        The index of the separator, or None when the end of the string is
        reached first or the string ends with an unterminated escape.
    """
    return scan_to_any(text, stop, start)


def scan_to_any(text: str, stops: str, start: int = 0) -> int | None:
    """Find the first unescaped occurrence of any character in ``stops``.

    Same escape rules as scan_to_char().
    """
    index = start
    length = len(text)
    while index < length:
        char = text[index]
        if char in stops:
            return index
        if char == ESCAPE_CHAR:
            index += 1
            if index >= length:
                return None
        index += 1
    return None


def split_unescaped(text: str, sep: str) -> list[str]:
    """Split ``text`` on unescaped ``sep`` characters.

    Every segment terminated by a separator is returned, including empty
    ones. The unterminated remainder is returned only when non-empty, so a
    trailing separator does not produce an empty final segment.

    Args:
        text: The string to split.
        sep: The single separator character.

    Returns:
        The segments in order, escapes left in place.
    """
    segments: list[str] = []
    position = 0
    while True:
        end = scan_to_char(text, sep, position)
        if end is None:
            break
        segments.append(text[position:end])
        position = end + 1
    if position < len(text):
        segments.append(text[position:])
    return segments


def leading_digits(text: str) -> str:
    """Return the run of ASCII digits at the start of ``text``."""
    end = 0
    while end < len(text) and text[end] in _ASCII_DIGITS:
        end += 1
    return text[:end]


def significant_digits(digits: str) -> str:
    """Strip leading zeros from a digit run, keeping ``"0"`` for all-zero input.

    The result's length bounds the magnitude of the number, so callers can
    reject or clamp oversized values without converting them.
    """
    stripped = digits.lstrip("0")
    if not stripped and digits:
        return "0"
    return stripped


def parse_leading_int(text: str) -> int:
    """Parse a decimal integer prefix the way C's ``strtol`` does.

    Leading whitespace and a single ``+`` or ``-`` sign are accepted, then the
    longest run of digits is read; anything after it is ignored. Text with no
    digits yields 0. The result is clamped to the signed 32-bit range.

    Example:
        >>> parse_leading_int("1500ms")
        1500
        >>> parse_leading_int("-1")
        -1
        >>> parse_leading_int("abc")
        0
    """
    body = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]

    digits = significant_digits(leading_digits(body))
    if not digits:
        return 0

    # Anything longer than INT32_MAX's ten digits is out of range.
    if len(digits) > _INT32_DIGITS:
        return INT32_MIN if sign < 0 else INT32_MAX

    return max(INT32_MIN, min(INT32_MAX, sign * int(digits)))


__all__: list[str] = [
    "ESCAPE_CHAR",
    "is_ascii_digit",
    "leading_digits",
    "parse_leading_int",
    "scan_to_any",
    "scan_to_char",
    "significant_digits",
    "split_unescaped",
]
