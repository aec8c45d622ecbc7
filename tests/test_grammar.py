# SPDX-License-Identifier: MIT
"""Unit tests for the version grammar scanner."""

import pytest

from semversion import ParseError
from semversion.grammar import (
    compare_identifiers,
    compare_prerelease,
    is_numeric_identifier,
    scan_version,
    split_identifiers,
)


class TestScanVersion:
    """Tests for scan_version function."""

    def test_full_token(self):
        """Test scanning a complete version."""
        token = scan_version("1.2.3-rc.1+b.7")
        assert token.core == (1, 2, 3)
        assert token.prerelease == ("rc", "1")
        assert token.build == ("b", "7")
        assert (token.start, token.end) == (0, 14)

    def test_short_core(self):
        """Test that scanning stops after a short core."""
        token = scan_version("4.5")
        assert token.core == (4, 5)
        assert token.end == 3

    def test_start_offset(self):
        """Test scanning from the middle of a string."""
        token = scan_version("[>=2.0.0]", 3)
        assert token.core == (2, 0, 0)
        assert (token.start, token.end) == (3, 8)

    def test_no_number(self):
        """Test that text without a leading number yields None."""
        assert scan_version("v1.0.0") is None
        assert scan_version("") is None
        assert scan_version("1.0.0", 5) is None

    def test_stops_at_fourth_component(self):
        """Test that only three numeric components are taken."""
        assert scan_version("1.2.3.4").end == 5

    def test_dangling_dot_not_consumed(self):
        """Test that a trailing dot is left out of the token."""
        assert scan_version("1.").end == 1
        assert scan_version("1.0.0-a.").end == 7
        assert scan_version("1.0.0+").end == 5

    def test_leading_zero_core(self):
        """Test that a leading zero in the core raises."""
        with pytest.raises(ParseError):
            scan_version("1.00.0")

    def test_leading_zero_prerelease(self):
        """Test that a leading zero in a numeric pre-release identifier raises."""
        with pytest.raises(ParseError):
            scan_version("1.0.0-alpha.007")

    def test_leading_zero_build(self):
        """Test that build identifiers may start with zero."""
        assert scan_version("1.0.0+007").build == ("007",)


class TestSplitIdentifiers:
    """Tests for split_identifiers function."""

    def test_empty(self):
        """Test that an empty string has no identifiers."""
        assert split_identifiers("", allow_leading_zero=False) == ()

    def test_split(self):
        """Test splitting on dots."""
        assert split_identifiers("a.b-c.1", allow_leading_zero=False) == ("a", "b-c", "1")

    @pytest.mark.parametrize("value", [".", "a.", ".a", "a..b", "a b", "a+b"])
    def test_malformed(self, value):
        """Test that malformed identifier strings raise."""
        with pytest.raises(ParseError):
            split_identifiers(value, allow_leading_zero=True)


class TestIdentifierComparison:
    """Tests for identifier precedence helpers."""

    def test_is_numeric(self):
        """Test numeric identifier detection."""
        assert is_numeric_identifier("0")
        assert is_numeric_identifier("123")
        assert not is_numeric_identifier("1a")
        assert not is_numeric_identifier("")
        assert not is_numeric_identifier("١")

    def test_compare_identifiers(self):
        """Test numeric, alphanumeric and mixed comparisons."""
        assert compare_identifiers("2", "10") == -1
        assert compare_identifiers("10", "10") == 0
        assert compare_identifiers("9", "a") == -1
        assert compare_identifiers("a", "9") == 1
        assert compare_identifiers("alpha", "beta") == -1
        assert compare_identifiers("beta", "beta") == 0

    def test_compare_prerelease(self):
        """Test sequence comparison."""
        assert compare_prerelease((), ()) == 0
        assert compare_prerelease((), ("alpha",)) == 1
        assert compare_prerelease(("alpha",), ()) == -1
        assert compare_prerelease(("alpha",), ("alpha", "1")) == -1
        assert compare_prerelease(("alpha", "1"), ("alpha", "beta")) == -1
