"""Tests for domain/exceptions.py."""

import pytest

from tagfilter.domain.exceptions import InvalidTagsError, TagFilterError


class TestInvalidTagsError:
    """Tests for InvalidTagsError."""

    def test_is_tagfilter_error(self) -> None:
        assert issubclass(InvalidTagsError, TagFilterError)

    def test_is_value_error(self) -> None:
        """Callers catching ValueError also catch invalid tags."""
        assert issubclass(InvalidTagsError, ValueError)

    def test_has_reason(self) -> None:
        error = InvalidTagsError("tags must not be None")
        assert error.reason == "tags must not be None"
        assert str(error) == "tags must not be None"

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            InvalidTagsError("")

    def test_catch_all_via_base(self) -> None:
        with pytest.raises(TagFilterError):
            raise InvalidTagsError("tags must not be null or empty")
