# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101

Strict parsing (the default) follows the SemVer 2.0.0 grammar exactly.
Non-strict parsing also accepts a shortened core such as ``1`` or ``1.2``,
with the omitted components defaulting to zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ParseError
from .grammar import VersionToken, compare_prerelease, scan_version, split_identifiers


def _check_number(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(str(value), f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ParseError(str(value), f"{name} must not be negative, got {value}")


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Versions are ordered by SemVer precedence. Build metadata takes no part
    in equality, hashing or ordering.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers joined by dots (e.g., "alpha.1"),
            empty for a release
        build: Build metadata joined by dots (e.g., "build.123"), empty when absent

    Raises:
        ParseError: If any component is invalid
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    build: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        _check_number("major", self.major)
        _check_number("minor", self.minor)
        _check_number("patch", self.patch)
        split_identifiers(self.prerelease, allow_leading_zero=False)
        split_identifiers(self.build, allow_leading_zero=True)

    @classmethod
    def parse(cls, version_string: str, strict: bool = True) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string, strict=strict)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        return tuple(self.prerelease.split(".")) if self.prerelease else ()

    @property
    def build_identifiers(self) -> tuple[str, ...]:
        return tuple(self.build.split(".")) if self.build else ()

    def compare(self, other: "Version") -> int:
        """Compare with another version by SemVer precedence.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other
        """
        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        if self.core != other.core:
            return -1 if self.core < other.core else 1
        return compare_prerelease(self.prerelease_identifiers, other.prerelease_identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def version_from_token(token: VersionToken) -> Version:
    """Build a Version from a scanned token, padding a short core with zeros."""
    major, minor, patch = token.core + (0,) * (3 - len(token.core))
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=".".join(token.prerelease),
        build=".".join(token.build),
    )


def parse_version(version_string: str, strict: bool = True) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        strict: Require all three numeric components. When False, ``1`` and
            ``1.2`` are accepted and the missing components default to 0.

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string does not follow semantic versioning, or a
            major, minor or patch component is longer than the interpreter's
            integer string conversion limit (4300 digits by default)

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build='')

        >>> parse_version("2.1", strict=False)
        Version(major=2, minor=1, patch=0, prerelease='', build='')
    """
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise ParseError(version_string, "Version string cannot be empty")

    token = scan_version(version_string)
    if token is None or token.end != len(version_string):
        raise ParseError(version_string)
    if strict and len(token.core) < 3:
        raise ParseError(
            version_string, f"Version must have major, minor and patch components: {version_string!r}"
        )

    return version_from_token(token)


def is_valid_semver(version_string: str, strict: bool = True) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        strict: Passed through to :func:`parse_version`

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0", strict=False)
        True
    """
    try:
        parse_version(version_string, strict=strict)
    except ParseError:
        return False
    return True
