# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and ranges.

This package provides utilities for parsing and comparing semantic versions
following the SemVer 2.0.0 specification, and a contiguous range type that
covers every version up to the next breaking boundary.

Example:
    >>> from semversion import parse_version, parse_range, compare_versions
    >>> 
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> 
    >>> compare_versions("1.0.0-alpha", "1.0.0")
    -1
    >>> 
    >>> parse_range("1.2.3").contains(parse_version("1.2.3-beta"))
    False
    >>> str(parse_range("[>= 1.4"))
    '[1.4.0-1.5.0]'
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    ParseError,
    RangeError,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
)
from .compare import (
    compare_versions,
    version_key,
)
from .version_range import (
    VersionRange,
    parse_range,
    next_breaking_boundary,
)

__all__ = [
    # Errors
    "VersionError",
    "ParseError",
    "RangeError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    # Version comparison
    "compare_versions",
    "version_key",
    # Ranges
    "VersionRange",
    "parse_range",
    "next_breaking_boundary",
]
