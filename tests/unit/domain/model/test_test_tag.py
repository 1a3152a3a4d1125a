"""Tests for domain/model/test_tag.py."""

import pytest

from tagfilter.domain.model.test_tag import TestTag


class TestTestTagCreation:
    """Tests for valid TestTag creation."""

    def test_name_stored_as_declared(self) -> None:
        tag = TestTag("  fast ")
        assert tag.name == "  fast "

    def test_trimmed(self) -> None:
        assert TestTag("  fast ").trimmed == "fast"

    def test_case_preserved(self) -> None:
        assert TestTag("Fast").trimmed == "Fast"

    def test_blank_name_allowed(self) -> None:
        assert TestTag("   ").trimmed == ""

    def test_str(self) -> None:
        assert str(TestTag("unit")) == "unit"

    def test_equality_by_name(self) -> None:
        assert TestTag("unit") == TestTag("unit")
        assert TestTag("unit") != TestTag(" unit")

    def test_hashable(self) -> None:
        assert len({TestTag("unit"), TestTag("unit"), TestTag("slow")}) == 2

    def test_is_frozen(self) -> None:
        tag = TestTag("unit")
        with pytest.raises(AttributeError):
            tag.name = "slow"  # type: ignore[misc]


class TestTestTagFailFirst:
    """Tests for FAIL-FIRST validation in TestTag."""

    def test_none_name_raises(self) -> None:
        with pytest.raises(TypeError, match="name must be str"):
            TestTag(None)  # type: ignore[arg-type]

    def test_non_str_name_raises(self) -> None:
        with pytest.raises(TypeError, match="got int"):
            TestTag(42)  # type: ignore[arg-type]
