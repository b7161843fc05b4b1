"""Unit tests – listing envelope decoding and normalisation."""
from __future__ import annotations

import pytest

from citydir.adapters.http import BareList, PagedEnvelope, decode_envelope, normalize_listing, to_listing_page
from citydir.kernel.errors import ParseError


def _record(i: int) -> dict[str, object]:
    return {"_id": f"e{i}", "title": f"Event {i}", "date": "2025-11-15T18:00:00Z", "type": "market", "price": 0}


class TestDecodeEnvelope:
    def test_bare_array(self) -> None:
        assert isinstance(decode_envelope([_record(1)]), BareList)

    def test_paged(self) -> None:
        envelope = decode_envelope({"data": [_record(1)], "total": 25, "page": 2, "pages": 3})
        assert envelope == PagedEnvelope(records=(_record(1),), total=25, page=2, pages=3)

    def test_offset_shape(self) -> None:
        envelope = decode_envelope({"data": [], "total": 40, "offset": 24, "limit": 12})
        assert isinstance(envelope, PagedEnvelope)
        assert envelope.page == 3
        assert envelope.pages is None

    def test_data_without_totals_is_bare(self) -> None:
        assert isinstance(decode_envelope({"data": [_record(1)]}), BareList)

    @pytest.mark.parametrize(
        "body",
        [
            "oops",
            42,
            None,
            {"data": "nope", "total": 1, "pages": 1},
            [1, 2],
            {"success": False, "message": "Server error"},
            {"total": 3, "pages": 1},
        ],
    )
    def test_unexpected_shapes(self, body: object) -> None:
        with pytest.raises(ParseError):
            decode_envelope(body)

    def test_malformed_totals(self) -> None:
        with pytest.raises(ParseError):
            decode_envelope({"data": [], "total": "many", "pages": 1})


class TestNormalizeListing:
    def test_bare_array_of_two(self) -> None:
        page = normalize_listing([_record(1), _record(2)])
        assert [e.id for e in page.items] == ["e1", "e2"]
        assert page.total_count == 2
        assert page.page_count == 1
        assert page.page_number == 1

    def test_empty_bare_array(self) -> None:
        page = normalize_listing([])
        assert page.items == ()
        assert page.page_size == 1

    def test_paged_envelope_verbatim(self) -> None:
        page = normalize_listing({"data": [_record(1)], "total": 25, "page": 2, "pages": 3})
        assert page.total_count == 25
        assert page.page_number == 2
        assert page.page_count == 3

    def test_page_size_from_request(self) -> None:
        page = normalize_listing({"data": [_record(1)], "total": 25, "page": 1, "pages": 3}, requested_limit=12)
        assert page.page_size == 12

    def test_pages_computed_from_limit(self) -> None:
        page = normalize_listing({"data": [], "total": 40, "offset": 0, "limit": 12})
        assert page.page_count == 4
        assert page.page_size == 12

    def test_bad_record(self) -> None:
        with pytest.raises(ParseError):
            normalize_listing([{"title": "no id"}])

    def test_negative_total(self) -> None:
        with pytest.raises(ParseError):
            to_listing_page(PagedEnvelope(records=(), total=-1, page=1, pages=0))
