# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing versions and building ranges."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .semver import Version


class VersionError(Exception):
    """Base class for all semversion errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ParseError(VersionError):
    """Raised when text does not follow the semantic versioning grammar."""

    def __init__(self, text: str, message: str = ""):
        self.text = text
        super().__init__(message or f"Invalid semantic version: {text!r}")


class RangeError(VersionError):
    """Raised when a range is built with its lower bound above its upper bound."""

    def __init__(
        self,
        lower: "Version",
        upper: Optional["Version"],
        bound: str = "lower",
        message: str = "",
    ):
        self.lower = lower
        self.upper = upper
        self.bound = bound
        super().__init__(
            message or f"Invalid {bound} bound: {lower} is greater than {upper}"
        )
