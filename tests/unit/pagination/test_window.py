"""
Tests for page validation and LIMIT/OFFSET windowing.
"""

import pytest

from datapager.exceptions import InvalidParameterError
from datapager.schemas.pagination import PaginationDecision
from datapager.storage.pagination.window import clamp_items_per_page, window


def make_decision(page=1, items_per_page=10, maximum=None):
    return PaginationDecision(
        enabled=True,
        partial=False,
        page=page,
        items_per_page=items_per_page,
        maximum_items_per_page=maximum,
    )


class TestWindow:
    """Tests for window()."""

    @pytest.mark.parametrize(
        "page,items_per_page,expected_offset",
        [(1, 10, 0), (2, 10, 10), (3, 25, 50), (1, 0, 0), (7, 1, 6)],
    )
    def test_offset_from_page(self, page, items_per_page, expected_offset):
        """Test offset is (page - 1) * items_per_page and never negative."""
        limits = window(make_decision(page, items_per_page))

        assert limits.limit == items_per_page
        assert limits.offset == expected_offset
        assert limits.offset >= 0

    @pytest.mark.parametrize("page", [-3, 0, 1, 2, 100])
    def test_negative_items_per_page_rejected(self, page):
        """Test negative items per page is rejected for any page."""
        with pytest.raises(
            InvalidParameterError, match="must not be negative"
        ):
            window(make_decision(page, -1))

    @pytest.mark.parametrize("page", [0, -1, -100])
    def test_page_below_one_rejected(self, page):
        """Test page below 1 is rejected."""
        with pytest.raises(InvalidParameterError, match="at least 1"):
            window(make_decision(page, 10))

    def test_zero_items_per_page_second_page_rejected(self):
        """Test page 2 is rejected when pages hold no items."""
        with pytest.raises(
            InvalidParameterError, match="Page must be 1 when items per page"
        ):
            window(make_decision(2, 0))

    def test_zero_items_per_page_first_page(self):
        """Test page 1 of zero-size pages is an empty window."""
        limits = window(make_decision(1, 0))

        assert limits.limit == 0
        assert limits.offset == 0

    def test_negative_items_checked_before_page(self):
        """Test items per page is validated before the page."""
        with pytest.raises(InvalidParameterError) as exc_info:
            window(make_decision(0, -5))

        assert "negative" in exc_info.value.message

    def test_large_page_has_no_upper_bound(self):
        """Test pages past the end are windowed, not rejected."""
        limits = window(make_decision(100000, 50))

        assert limits.offset == 4999950

    def test_invalid_parameter_is_client_error(self):
        """Test InvalidParameterError maps to a 400 status."""
        with pytest.raises(InvalidParameterError) as exc_info:
            window(make_decision(0, 10))

        assert exc_info.value.http_status == 400


class TestClampItemsPerPage:
    """Tests for clamp_items_per_page()."""

    def test_clamped_to_maximum(self):
        """Test items per page above the maximum is lowered to it."""
        decision = clamp_items_per_page(make_decision(1, 1000, maximum=50))

        assert decision.items_per_page == 50

    def test_below_maximum_unchanged(self):
        """Test items per page below the maximum is kept."""
        original = make_decision(1, 20, maximum=50)

        assert clamp_items_per_page(original) is original

    def test_no_maximum(self):
        """Test nothing is clamped without a maximum."""
        decision = clamp_items_per_page(make_decision(1, 5000))

        assert decision.items_per_page == 5000

    def test_negative_stays_negative(self):
        """Test clamping does not hide a negative page size."""
        decision = clamp_items_per_page(make_decision(1, -1, maximum=50))

        with pytest.raises(InvalidParameterError):
            window(decision)
