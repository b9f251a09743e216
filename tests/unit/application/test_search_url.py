"""Unit tests for search options and URL assembly."""

from __future__ import annotations

from urllib.parse import quote_plus

import pytest

from mp_cloudsearch.application.search import (
    SearchOptions,
    build_search_url,
    coordinate_box,
    document_endpoint,
    search_endpoint,
    syntax_for,
)
from mp_cloudsearch.config.validation import InvalidSettingValueError
from mp_cloudsearch.kernel.errors import InvalidSearchOptionError

LEGACY = "2011-02-01"
STRUCTURED = "2013-01-01"
HOST = "http://search-testdomain.us-east-1.cloudsearch.amazonaws.com"


def _url(version: str, term: str = "", **options: object) -> str:
    return build_search_url("testdomain", "us-east-1", version, SearchOptions.build(term, **options))


def _query(version: str, term: str = "", **options: object) -> str:
    return _url(version, term, **options).split("?", 1)[1]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


class TestEndpoints:
    @pytest.mark.parametrize("version", [LEGACY, STRUCTURED])
    def test_basic_search_url(self, version: str) -> None:
        assert _url(version, "testsearch") == f"{HOST}/{version}/search?q=testsearch&size=10"

    def test_region_is_part_of_the_host(self) -> None:
        url = build_search_url("testdomain", "my-region", LEGACY, SearchOptions("testsearch"))
        assert url == (
            "http://search-testdomain.my-region.cloudsearch.amazonaws.com"
            "/2011-02-01/search?q=testsearch&size=10"
        )

    def test_scheme_can_be_https(self) -> None:
        assert search_endpoint("d", "r", STRUCTURED, scheme="https").startswith("https://search-d.r.")

    def test_document_endpoint(self) -> None:
        assert document_endpoint("testdomain", "us-east-1", STRUCTURED) == (
            "http://doc-testdomain.us-east-1.cloudsearch.amazonaws.com/2013-01-01/documents/batch"
        )

    def test_unknown_version_is_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            syntax_for("2099-01-01")


# ---------------------------------------------------------------------------
# Shared parameters
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("version", [LEGACY, STRUCTURED])
class TestSharedParameters:
    def test_term_is_escaped(self, version: str) -> None:
        assert _query(version, "testsearch!") == "q=testsearch%21&size=10"

    def test_spaces_become_plus(self, version: str) -> None:
        assert _query(version, "glazed donut") == "q=glazed+donut&size=10"

    def test_page_size(self, version: str) -> None:
        assert _query(version, "testsearch", page_size=20) == "q=testsearch&size=20"

    def test_page_adds_start_offset(self, version: str) -> None:
        assert _query(version, "testsearch", page_size=20, page=3) == "q=testsearch&size=20&start=40"

    def test_first_page_still_sends_start(self, version: str) -> None:
        assert _query(version, "testsearch", page="1") == "q=testsearch&size=10&start=0"

    def test_numeric_strings_are_accepted(self, version: str) -> None:
        assert _query(version, "t", page_size="5", page="2") == "q=t&size=5&start=5"

    def test_all_empty_filter_is_omitted(self, version: str) -> None:
        assert _query(version, "nom", filter={"and": {"a": None, "b": ""}}) == "q=nom&size=10"


# ---------------------------------------------------------------------------
# 2011-02-01
# ---------------------------------------------------------------------------


class TestLegacyQuery:
    def test_filter_travels_in_bq(self) -> None:
        query = _query(LEGACY, filter={"and": {"foo": "bar", "baz": "bug"}})
        assert query == "q=&bq=%28and+foo%3A%27bar%27+baz%3A%27bug%27%29&size=10"

    def test_term_and_filter(self) -> None:
        query = _query(LEGACY, "nom", filter={"or": {"is_donut": True, "and": {"fried": True}}})
        assert query == "q=nom&bq=%28or+is_donut%3A%27true%27%28and+fried%3A%27true%27%29%29&size=10"

    def test_rank_ascending(self) -> None:
        assert _query(LEGACY, "testsearch", rank="some_field") == "q=testsearch&size=10&rank=some_field"

    def test_rank_descending(self) -> None:
        query = _query(LEGACY, "testsearch", rank=["some_field", "desc"])
        assert query == "q=testsearch&size=10&rank=-some_field"

    def test_return_fields(self) -> None:
        query = _query(LEGACY, "testsearch", return_fields=["name", "address"])
        assert query == "q=testsearch&size=10&return-fields=name,address"

    def test_geography_box_filter(self) -> None:
        query = _query(LEGACY, filter={"and": coordinate_box(meters=5000, lat=45.52, lng=122.6819)})
        assert query == (
            "q=&bq=%28and+lat%3A2505771415..2506771417+lng%3A2358260777..2359261578%29&size=10"
        )

    def test_cursor_is_dropped(self) -> None:
        assert _query(LEGACY, "testsearch", cursor="initial") == "q=testsearch&size=10"

    def test_parameter_order(self) -> None:
        query = _query(
            LEGACY,
            "t",
            filter={"and": {"a": 1}},
            page_size=5,
            page=2,
            return_fields=["x", "y"],
            rank=("f", "desc"),
        )
        assert query == "q=t&bq=%28and+a%3A1%29&size=5&start=5&return-fields=x,y&rank=-f"


# ---------------------------------------------------------------------------
# 2013-01-01
# ---------------------------------------------------------------------------


class TestStructuredQuery:
    def test_filter_only(self) -> None:
        query = _query(STRUCTURED, filter={"and": {"foo": "bar", "baz": "bug"}})
        expected = quote_plus("(and foo:'bar' baz:'bug')")
        assert query == f"q={expected}&q.parser=structured&size=10"

    def test_term_is_folded_into_the_filter(self) -> None:
        query = _query(STRUCTURED, "nom", filter={"or": {"is_donut": True, "and": {"fried": True}}})
        expected = quote_plus("(and 'nom' (or is_donut:'true'(and fried:'true')))")
        assert query == f"q={expected}&q.parser=structured&size=10"

    def test_term_quotes_are_escaped(self) -> None:
        query = _query(STRUCTURED, "it's", filter={"and": {"a": 1}})
        expected = quote_plus("(and 'it\\'s' (and a:1))")
        assert query == f"q={expected}&q.parser=structured&size=10"

    def test_sort_ascending(self) -> None:
        assert _query(STRUCTURED, "testsearch", rank="some_field") == "q=testsearch&size=10&sort=some_field+asc"

    def test_sort_descending(self) -> None:
        query = _query(STRUCTURED, "testsearch", rank=["some_field", "desc"])
        assert query == "q=testsearch&size=10&sort=some_field+desc"

    def test_return_fields(self) -> None:
        query = _query(STRUCTURED, "testsearch", return_fields=["name", "address"])
        assert query == "q=testsearch&size=10&return=name,address"

    def test_cursor(self) -> None:
        assert _query(STRUCTURED, "testsearch", cursor="initial") == "q=testsearch&size=10&cursor=initial"


# ---------------------------------------------------------------------------
# SearchOptions validation
# ---------------------------------------------------------------------------


class TestSearchOptions:
    @pytest.mark.parametrize("value", ["abc", 0, -1, True, 1.5j])
    def test_bad_page_is_rejected(self, value: object) -> None:
        with pytest.raises(InvalidSearchOptionError) as exc_info:
            SearchOptions(page=value)  # type: ignore[arg-type]
        assert exc_info.value.option == "page"

    def test_bad_page_size_is_rejected(self) -> None:
        with pytest.raises(InvalidSearchOptionError):
            SearchOptions(page_size="twenty")  # type: ignore[arg-type]

    def test_single_return_field_string(self) -> None:
        assert SearchOptions(return_fields="name").return_fields == ("name",)  # type: ignore[arg-type]

    def test_start_offset_without_page_is_none(self) -> None:
        assert SearchOptions().start_offset(10) is None

    def test_default_page_size_applies(self) -> None:
        assert SearchOptions(page=4).start_offset(25) == 75
