"""Tests for business day convention parsing."""

import pytest

from bizcal.core.conventions import BusinessDayConvention


class TestParse:
    """Tests for BusinessDayConvention.parse."""

    @pytest.mark.parametrize("label, expected", [
        ("No Adjustment", BusinessDayConvention.NO_ADJUST),
        ("Following", BusinessDayConvention.FOLLOWING),
        ("Modified Following", BusinessDayConvention.MODIFIED_FOLLOWING),
        ("Preceding", BusinessDayConvention.PRECEDING),
        ("Modified Preceding", BusinessDayConvention.MODIFIED_PRECEDING),
    ])
    def test_labels(self, label: str, expected: BusinessDayConvention) -> None:
        assert BusinessDayConvention.parse(label) is expected

    @pytest.mark.parametrize("label", ["unknown", "", "following", "MODIFIED_FOLLOWING", None])
    def test_unrecognized_defaults_to_no_adjust(self, label) -> None:
        """Parsing never raises; unknown labels mean no adjustment."""
        assert BusinessDayConvention.parse(label) is BusinessDayConvention.NO_ADJUST

    def test_member_passes_through(self) -> None:
        member = BusinessDayConvention.PRECEDING
        assert BusinessDayConvention.parse(member) is member

    def test_strict_lookup_raises(self) -> None:
        with pytest.raises(ValueError):
            BusinessDayConvention("unknown")


class TestProperties:
    """Tests for convention helpers."""

    def test_is_modified(self) -> None:
        assert BusinessDayConvention.MODIFIED_FOLLOWING.is_modified
        assert BusinessDayConvention.MODIFIED_PRECEDING.is_modified
        assert not BusinessDayConvention.FOLLOWING.is_modified
        assert not BusinessDayConvention.NO_ADJUST.is_modified

    def test_direction(self) -> None:
        assert BusinessDayConvention.FOLLOWING.direction == 1
        assert BusinessDayConvention.MODIFIED_FOLLOWING.direction == 1
        assert BusinessDayConvention.PRECEDING.direction == -1
        assert BusinessDayConvention.MODIFIED_PRECEDING.direction == -1
        assert BusinessDayConvention.NO_ADJUST.direction == 0

    def test_value_is_label(self) -> None:
        assert BusinessDayConvention.MODIFIED_FOLLOWING.value == "Modified Following"
