# SPDX-License-Identifier: MIT
"""Scanner for the SemVer 2.0.0 grammar.

The scanner walks the input once, left to right, and never backtracks more
than a single separator character, so matching time is linear in the length
of the input no matter how it is crafted:

    version     := major "." minor "." patch ["-" pre-release] ["+" build]
    number      := "0" | positive-digit digit*
    pre-release := identifier ("." identifier)*
    build       := identifier ("." identifier)*
    identifier  := [0-9A-Za-z-]+

Numeric pre-release identifiers must not carry a leading zero. Build
identifiers may.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional

from .errors import ParseError

DIGITS = frozenset(string.digits)
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")


@dataclass(frozen=True, slots=True)
class VersionToken:
    """A version token found by :func:`scan_version`.

    Attributes:
        core: The numeric components that were present (one to three)
        prerelease: Pre-release identifiers, empty when absent
        build: Build metadata identifiers, empty when absent
        start: Index of the first character of the token
        end: Index just past the last character of the token
    """

    core: tuple[int, ...]
    prerelease: tuple[str, ...]
    build: tuple[str, ...]
    start: int
    end: int


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the identifier consists of ASCII digits only."""
    return bool(identifier) and all(char in DIGITS for char in identifier)


def _scan_number(text: str, pos: int) -> tuple[Optional[int], int]:
    end = pos
    while end < len(text) and text[end] in DIGITS:
        end += 1
    if end == pos:
        return None, pos

    digits = text[pos:end]
    if len(digits) > 1 and digits[0] == "0":
        raise ParseError(text, f"Numeric component {digits!r} has a leading zero in {text!r}")
    try:
        return int(digits), end
    except ValueError as exc:
        # int() refuses absurdly long digit strings
        raise ParseError(text, f"Numeric component is too large in {text!r}") from exc


def _scan_identifiers(text: str, pos: int, allow_leading_zero: bool) -> tuple[tuple[str, ...], int]:
    """Scan dot-separated identifiers starting at ``pos``.

    A trailing separator with no identifier after it is left unconsumed, so
    the returned end points at that separator. When not even one identifier
    is present, the result is empty and the end is ``pos``.
    """
    identifiers: list[str] = []
    end = pos
    while True:
        start = end
        while end < len(text) and text[end] in IDENTIFIER_CHARS:
            end += 1
        if end == start:
            return tuple(identifiers), (start - 1 if identifiers else pos)

        identifier = text[start:end]
        if not allow_leading_zero and len(identifier) > 1 and identifier[0] == "0":
            if is_numeric_identifier(identifier):
                raise ParseError(
                    text, f"Numeric identifier {identifier!r} has a leading zero in {text!r}"
                )
        identifiers.append(identifier)

        if end < len(text) and text[end] == ".":
            end += 1
            continue
        return tuple(identifiers), end


def scan_version(text: str, pos: int = 0) -> Optional[VersionToken]:
    """Scan the longest version token starting at ``pos``.

    Args:
        text: The text to scan
        pos: Index to start scanning from

    Returns:
        The token found, or None if ``text`` has no number at ``pos``.
        The caller decides whether a short core (``1`` or ``1.2``) or
        content left after ``token.end`` is acceptable.

    Raises:
        ParseError: If a numeric component or numeric pre-release identifier
            has a leading zero
    """
    major, end = _scan_number(text, pos)
    if major is None:
        return None

    core = [major]
    while len(core) < 3 and end < len(text) and text[end] == ".":
        number, after = _scan_number(text, end + 1)
        if number is None:
            break
        core.append(number)
        end = after

    prerelease: tuple[str, ...] = ()
    if end < len(text) and text[end] == "-":
        identifiers, after = _scan_identifiers(text, end + 1, allow_leading_zero=False)
        if identifiers:
            prerelease, end = identifiers, after

    build: tuple[str, ...] = ()
    if end < len(text) and text[end] == "+":
        identifiers, after = _scan_identifiers(text, end + 1, allow_leading_zero=True)
        if identifiers:
            build, end = identifiers, after

    return VersionToken(core=tuple(core), prerelease=prerelease, build=build, start=pos, end=end)


def split_identifiers(value: str, allow_leading_zero: bool) -> tuple[str, ...]:
    """Split and validate a dot-joined pre-release or build string.

    Raises:
        ParseError: If any identifier is empty, contains a character outside
            ``[0-9A-Za-z-]``, or is numeric with a disallowed leading zero
    """
    if not value:
        return ()
    identifiers, end = _scan_identifiers(value, 0, allow_leading_zero)
    if not identifiers or end != len(value):
        raise ParseError(value, f"Invalid identifiers: {value!r}")
    return identifiers


def compare_identifiers(left: str, right: str) -> int:
    """Compare two pre-release identifiers by SemVer precedence.

    Numeric identifiers compare numerically, alphanumeric identifiers compare
    in ASCII order, and a numeric identifier is always lower than an
    alphanumeric one.
    """
    left_numeric = is_numeric_identifier(left)
    right_numeric = is_numeric_identifier(right)

    if left_numeric and right_numeric:
        # No leading zeros, so the longer digit string is the larger number
        n1, n2 = (len(left), left), (len(right), right)
        if n1 != n2:
            return -1 if n1 < n2 else 1
        return 0
    if left_numeric:
        return -1
    if right_numeric:
        return 1
    if left != right:
        return -1 if left < right else 1
    return 0


def compare_prerelease(left: tuple[str, ...], right: tuple[str, ...]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right

    An empty sequence means "no pre-release" and ranks above any pre-release
    (1.0.0 > 1.0.0-alpha).
    """
    if not left and not right:
        return 0
    if not left:
        return 1
    if not right:
        return -1

    for p1, p2 in zip(left, right):
        result = compare_identifiers(p1, p2)
        if result:
            return result

    # All compared parts equal - the shorter sequence is lower
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    return 0


def identifier_key(identifier: str) -> tuple:
    """Return a sort key for a single pre-release identifier."""
    if is_numeric_identifier(identifier):
        return (0, len(identifier), identifier)
    return (1, identifier)
