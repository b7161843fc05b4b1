"""Unit tests for listing pages and the page-number window."""

from __future__ import annotations

import pytest

from citydir.application.pagination import ELLIPSIS, ListingPage, PageNavigator, page_window


# ---------------------------------------------------------------------------
# ListingPage
# ---------------------------------------------------------------------------


class TestListingPage:
    def test_build_computes_page_count(self) -> None:
        page = ListingPage.build(range(12), total_count=25, page_size=12)
        assert page.page_count == 3
        assert page.items == tuple(range(12))

    def test_build_exact_division(self) -> None:
        assert ListingPage.build([], total_count=24, page_size=12).page_count == 2

    def test_empty(self) -> None:
        page = ListingPage.empty()
        assert page.items == ()
        assert page.total_count == 0
        assert page.page_count == 0
        assert page.page_number == 1

    def test_page_number_clamped_into_range(self) -> None:
        page = ListingPage((), total_count=25, page_size=12, page_number=9, page_count=3)
        assert page.page_number == 3

    def test_page_number_clamped_to_one(self) -> None:
        assert ListingPage((), total_count=0, page_size=1, page_number=0).page_number == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"total_count": -1, "page_size": 1},
            {"total_count": 0, "page_size": 0},
            {"total_count": 0, "page_size": 1, "page_count": -1},
        ],
    )
    def test_invalid(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            ListingPage((), **kwargs)

    def test_has_previous_and_next(self) -> None:
        middle = ListingPage.build([], total_count=30, page_size=10, page_number=2)
        assert middle.has_previous
        assert middle.has_next
        last = ListingPage.build([], total_count=30, page_size=10, page_number=3)
        assert not last.has_next

    def test_map(self) -> None:
        page = ListingPage.build([1, 2, 3], total_count=3, page_size=3)
        mapped = page.map(lambda x: x * 10)
        assert mapped.items == (10, 20, 30)
        assert mapped.total_count == 3


# ---------------------------------------------------------------------------
# page_window
# ---------------------------------------------------------------------------


class TestPageWindow:
    def test_first_page_of_ten(self) -> None:
        assert page_window(1, 10) == [1, 2, 3, 4, 5, ELLIPSIS, 10]

    def test_last_page_of_ten(self) -> None:
        assert page_window(10, 10) == [1, ELLIPSIS, 6, 7, 8, 9, 10]

    def test_middle_page_of_ten(self) -> None:
        assert page_window(5, 10) == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]

    def test_zero_pages_shows_single_page(self) -> None:
        assert page_window(1, 0) == [1]

    def test_fits_without_ellipsis(self) -> None:
        assert page_window(4, 7) == [1, 2, 3, 4, 5, 6, 7]

    def test_wider_limit_shows_every_page(self) -> None:
        assert page_window(5, 9, max_visible=9) == list(range(1, 10))

    @pytest.mark.parametrize("max_visible", [0, 4, 6])
    def test_limit_below_seven_rejected(self, max_visible: int) -> None:
        with pytest.raises(ValueError):
            page_window(1, 5, max_visible)

    @pytest.mark.parametrize("current", [3, 8])
    def test_boundary_pages(self, current: int) -> None:
        window = page_window(current, 10)
        assert current in window
        assert window.count(ELLIPSIS) == 1

    @pytest.mark.parametrize("current", range(1, 21))
    def test_window_shape(self, current: int) -> None:
        window = page_window(current, 20)
        assert window[0] == 1
        assert window[-1] == 20
        assert current in window
        assert len(window) == 7


class TestPageNavigator:
    def test_first_page_disables_previous(self) -> None:
        nav = PageNavigator(1, 5)
        assert nav.previous_disabled
        assert not nav.next_disabled

    def test_last_page_disables_next(self) -> None:
        nav = PageNavigator(5, 5)
        assert nav.next_disabled

    def test_single_page_disables_both(self) -> None:
        nav = PageNavigator(1, 0)
        assert nav.previous_disabled and nav.next_disabled

    def test_go_to_page_clamps(self) -> None:
        nav = PageNavigator(2, 5)
        assert nav.go_to_page(99) == 5
        assert nav.page_number == 5

    def test_go_to_current_is_noop(self) -> None:
        assert PageNavigator(3, 5).go_to_page(3) is None

    def test_previous_at_first_is_noop(self) -> None:
        assert PageNavigator(1, 5).previous() is None

    def test_next(self) -> None:
        assert PageNavigator(1, 5).next() == 2

    def test_window(self) -> None:
        assert PageNavigator(5, 10).window() == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]
