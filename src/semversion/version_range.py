# SPDX-License-Identifier: MIT
"""Contiguous version ranges.

A range covers every version from an inclusive lower bound up to an
exclusive upper bound, or without an upper bound at all::

    [1.2.3-1.2.4]   1.2.3 <= v < 1.2.4
    [0.0.0]         0.0.0 <= v

A range parsed from a single version gets its upper bound from
:func:`next_breaking_boundary`.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional, Union

from .errors import ParseError, RangeError
from .grammar import scan_version
from .semver import Version, version_from_token


def next_breaking_boundary(version: Version) -> Optional[Version]:
    """Return the next version at which compatibility is not guaranteed.

    The lowest non-zero component of the core is incremented:

    - patch > 0: ``M.m.(p+1)``
    - minor > 0: ``M.(m+1).0``
    - major > 0: ``(M+1).0.0``
    - ``0.0.0``: None, no boundary exists above it

    Pre-release and build metadata are not carried over to the boundary.

    Examples:
        >>> str(next_breaking_boundary(Version(1, 2, 3)))
        '1.2.4'
        >>> str(next_breaking_boundary(Version(0, 4, 0, "beta")))
        '0.5.0'
        >>> next_breaking_boundary(Version(0, 0, 0)) is None
        True
    """
    if version.patch > 0:
        return Version(version.major, version.minor, version.patch + 1)
    if version.minor > 0:
        return Version(version.major, version.minor + 1, 0)
    if version.major > 0:
        return Version(version.major + 1, 0, 0)
    return None


@dataclass(frozen=True, slots=True)
class VersionRange:
    """A contiguous range of versions.

    Attributes:
        lower: Inclusive lower bound
        upper: Exclusive upper bound, None for a range without one

    Raises:
        RangeError: If ``lower`` is greater than ``upper``
    """

    lower: Version
    upper: Optional[Version] = None

    def __post_init__(self) -> None:
        if self.upper is not None and self.lower > self.upper:
            raise RangeError(self.lower, self.upper, bound="lower")

    @classmethod
    def parse(cls, range_string: str) -> "VersionRange":
        """Parse a range string. See :func:`parse_range`."""
        return parse_range(range_string)

    def __str__(self) -> str:
        if self.upper is None:
            return f"[{self.lower}]"
        return f"[{self.lower}-{self.upper}]"

    @property
    def is_bounded(self) -> bool:
        """Return True if the range has an upper bound."""
        return self.upper is not None

    def contains(self, item: Union[Version, "VersionRange"]) -> bool:
        """Check whether a version or a whole range falls inside this range.

        A version is contained when ``lower <= version < upper``.

        A range is contained when its lower bound is contained and its upper
        bound is contained too. A range without an upper bound is only
        contained in another range without one.
        """
        if isinstance(item, VersionRange):
            if item.upper is None:
                return self.upper is None and self.contains(item.lower)
            return self.contains(item.lower) and self.contains(item.upper)

        if item < self.lower:
            return False
        return self.upper is None or item < self.upper

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (Version, VersionRange)):
            return False
        return self.contains(item)


_WHITESPACE = frozenset(string.whitespace)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def parse_range(range_string: str) -> VersionRange:
    """Parse the version at the head of a string into a range.

    The version may be preceded by ``[`` and ``>=``, each optionally
    surrounded by whitespace. Missing minor and patch components default to
    0. Anything after the version is ignored.

    Args:
        range_string: Text such as ``"1.2.3"``, ``"[>= 1.4"`` or ``"[2.0.0]"``

    Returns:
        A range from the parsed version up to its next breaking boundary

    Raises:
        ParseError: If no version can be read at the head of the string

    Examples:
        >>> str(parse_range("1.2.3"))
        '[1.2.3-1.2.4]'
        >>> str(parse_range("[>= 0.0.0]"))
        '[0.0.0]'
    """
    if not isinstance(range_string, str):
        raise ParseError(
            str(range_string), f"Range must be a string, got {type(range_string).__name__}"
        )

    pos = _skip_whitespace(range_string, 0)
    if range_string.startswith("[", pos):
        pos = _skip_whitespace(range_string, pos + 1)
    if range_string.startswith(">=", pos):
        pos = _skip_whitespace(range_string, pos + 2)

    token = scan_version(range_string, pos)
    if token is None:
        raise ParseError(range_string, f"Invalid range: {range_string!r}")

    lower = version_from_token(token)
    return VersionRange(lower, next_breaking_boundary(lower))
