# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: numeric identifiers compare numerically, alphanumeric
identifiers compare in ASCII order, numeric < alphanumeric, and a release
ranks above all of its pre-releases.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Union

from .grammar import identifier_key
from .semver import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    if isinstance(version, str):
        return parse_version(version)
    if not isinstance(version, Version):
        raise TypeError(f"Expected a version string or Version, got {type(version).__name__}")
    return version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by SemVer precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid
        TypeError: If either argument is neither a string nor a Version

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return _coerce(version1).compare(_coerce(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that orders exactly like :meth:`Version.compare`

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Pre-release key: a release becomes (1,) to sort after its pre-releases
    # Pre-release identifiers become (0, (identifier keys...))
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(identifier_key(part) for part in v.prerelease_identifiers))

    return (v.major, v.minor, v.patch, prerelease_key)
