"""Unit tests for ResultCollection."""

from __future__ import annotations

import dataclasses

import pytest

from mp_cloudsearch.application.pagination import ResultCollection
from mp_cloudsearch.kernel.errors import SerializationError


def _body(hits: list[dict], found: int | None = None, start: int = 0) -> dict:
    return {"hits": {"found": len(hits) if found is None else found, "start": start, "hit": hits}}


# ---------------------------------------------------------------------------
# Id pages
# ---------------------------------------------------------------------------


class TestIdPage:
    def test_ids_in_response_order(self) -> None:
        page = ResultCollection.from_response(_body([{"id": "123"}, {"id": "456"}]), 10)
        assert list(page) == ["123", "456"]
        assert page[0] == "123"
        assert len(page) == 2
        assert "456" in page
        assert page.total_entries == 2
        assert page.page_size == 10

    def test_single_page(self) -> None:
        page = ResultCollection.from_response(_body([{"id": "1"}, {"id": "2"}]), 10)
        assert page.total_pages == 1
        assert page.current_page == 1
        assert not page.has_next
        assert not page.has_previous

    def test_no_hits_is_still_one_page(self) -> None:
        page = ResultCollection.from_response(_body([]), 10)
        assert len(page) == 0
        assert page.total_pages == 1
        assert page.current_page == 1

    def test_middle_page(self) -> None:
        hits = [{"id": str(n)} for n in range(20, 30)]
        page = ResultCollection.from_response(_body(hits, found=45, start=20), 10)
        assert page.total_pages == 5
        assert page.current_page == 3
        assert page.offset == 20
        assert page.has_next
        assert page.has_previous

    def test_last_partial_page(self) -> None:
        page = ResultCollection.from_response(_body([{"id": "x"}], found=41, start=40), 20)
        assert page.total_pages == 3
        assert page.current_page == 3
        assert not page.has_next

    def test_string_lookup_needs_fields(self) -> None:
        page = ResultCollection.from_response(_body([{"id": "1"}]), 10)
        with pytest.raises(TypeError):
            page["1"]

    def test_as_dict_without_fields(self) -> None:
        page = ResultCollection.from_response(_body([{"id": "1"}]), 10)
        assert page.as_dict() == {"1": {}}
        assert not page.has_fields

    def test_cursor_is_kept(self) -> None:
        body = _body([{"id": "1"}])
        body["hits"]["cursor"] = "next-cursor"
        assert ResultCollection.from_response(body, 10).cursor == "next-cursor"


# ---------------------------------------------------------------------------
# Field pages
# ---------------------------------------------------------------------------


class TestFieldPage:
    def test_legacy_data_key(self) -> None:
        hits = [
            {"id": "123", "data": {"name": "Beavis", "address": "arizona"}},
            {"id": "456", "data": {"name": "Honey Badger", "address": "africa"}},
        ]
        page = ResultCollection.from_response(_body(hits), 10, with_fields=True, fields_key="data")
        assert page.has_fields
        assert page.as_dict() == {
            "123": {"name": "Beavis", "address": "arizona"},
            "456": {"name": "Honey Badger", "address": "africa"},
        }
        assert page["123"]["name"] == "Beavis"
        assert page.ids == ("123", "456")

    def test_structured_fields_key(self) -> None:
        hits = [{"id": "1", "fields": {"name": "x"}}]
        page = ResultCollection.from_response(_body(hits), 10, with_fields=True, fields_key="fields")
        assert page.as_dict() == {"1": {"name": "x"}}

    def test_either_key_without_hint(self) -> None:
        hits = [{"id": "1", "data": {"a": 1}}, {"id": "2", "fields": {"b": 2}}]
        page = ResultCollection.from_response(_body(hits), 10, with_fields=True)
        assert page.as_dict() == {"1": {"a": 1}, "2": {"b": 2}}

    def test_missing_field_data_is_empty(self) -> None:
        page = ResultCollection.from_response(_body([{"id": "1"}]), 10, with_fields=True, fields_key="fields")
        assert page.as_dict() == {"1": {}}


# ---------------------------------------------------------------------------
# Immutability and errors
# ---------------------------------------------------------------------------


class TestCollectionContract:
    def test_frozen(self) -> None:
        page = ResultCollection.sandbox()
        with pytest.raises(dataclasses.FrozenInstanceError):
            page.total_entries = 5  # type: ignore[misc]

    def test_field_entries_are_read_only(self) -> None:
        hits = [{"id": "1", "fields": {"name": "x"}}]
        page = ResultCollection.from_response(_body(hits), 10, with_fields=True, fields_key="fields")
        with pytest.raises(TypeError):
            page.entries["2"] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            page["1"]["name"] = "y"

    def test_sandbox_page(self) -> None:
        page = ResultCollection.sandbox()
        assert list(page) == []
        assert page.total_entries == 0
        assert page.total_pages == 1
        assert page.page_size == 10

    def test_zero_page_size_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            ResultCollection(entries=(), total_entries=0, page_size=0)

    @pytest.mark.parametrize(
        "body",
        [
            {},
            None,
            {"hits": {"hit": []}},
            {"hits": {"found": "many", "hit": []}},
            {"hits": {"found": 1, "hit": [{"name": "no id"}]}},
        ],
    )
    def test_malformed_body(self, body: object) -> None:
        with pytest.raises(SerializationError) as exc_info:
            ResultCollection.from_response(body, 10)
        assert exc_info.value.payload_type == "search_response"
