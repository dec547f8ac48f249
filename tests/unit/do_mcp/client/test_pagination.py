"""Tests for query-string building and list-response normalization."""

import pytest

from do_mcp.client import (
    build_query_string,
    drop_none,
    extract_page_number,
    parse_paginated_response,
)


class TestBuildQueryString:
    def test_empty(self) -> None:
        assert build_query_string(None) == ""
        assert build_query_string({}) == ""
        assert build_query_string({"a": None, "b": ""}) == ""

    def test_keeps_order_and_drops_missing(self) -> None:
        assert (
            build_query_string({"page": 2, "tag_name": None, "per_page": 20})
            == "?page=2&per_page=20"
        )

    def test_encodes_values(self) -> None:
        assert build_query_string({"name": "web server&co"}) == (
            "?name=web+server%26co"
        )

    def test_booleans_are_lowercase(self) -> None:
        assert build_query_string({"private": True, "follow": False}) == (
            "?private=true&follow=false"
        )


class TestExtractPageNumber:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://api.digitalocean.com/v2/droplets?page=3&per_page=20", 3),
            ("https://api.digitalocean.com/v2/droplets?per_page=20&page=12", 12),
            ("https://api.digitalocean.com/v2/droplets?per_page=20", None),
            ("https://api.digitalocean.com/v2/droplets?page=abc", None),
            ("", None),
            (None, None),
            (5, None),
            (True, None),
        ],
    )
    def test_extract(self, url: object, expected: int | None) -> None:
        assert extract_page_number(url) == expected


class TestParsePaginatedResponse:
    def test_full_response(self) -> None:
        page = parse_paginated_response(
            {
                "droplets": [{"id": 1}, {"id": 2}, {"id": 3}],
                "meta": {"total": 50},
                "links": {
                    "pages": {
                        "next": "https://api.digitalocean.com/v2/droplets?page=3&per_page=3"
                    }
                },
            },
            "droplets",
        )

        assert page.items == [{"id": 1}, {"id": 2}, {"id": 3}]
        assert page.count == 3
        assert page.total == 50
        assert page.has_more is True
        assert page.next_page == 3

    def test_last_page(self) -> None:
        page = parse_paginated_response(
            {"ssh_keys": [{"id": 7}], "meta": {"total": 1}, "links": {}}, "ssh_keys"
        )
        assert page.has_more is False
        assert page.next_page is None
        assert page.total == 1

    def test_missing_sections_degrade_to_defaults(self) -> None:
        page = parse_paginated_response({"droplets": []}, "droplets")
        assert page.items == []
        assert page.total is None
        assert page.has_more is False

    def test_wrong_key_yields_empty_page(self) -> None:
        page = parse_paginated_response({"volumes": [{"id": "v"}]}, "droplets")
        assert page.count == 0

    @pytest.mark.parametrize("raw", [None, "not json", 42, []])
    def test_never_raises(self, raw: object) -> None:
        assert parse_paginated_response(raw, "droplets").count == 0

    @pytest.mark.parametrize("next_link", [5, True, {"href": "x"}, ["x"]])
    def test_non_string_next_link_keeps_has_more(self, next_link: object) -> None:
        page = parse_paginated_response(
            {"droplets": [{"id": 1}], "links": {"pages": {"next": next_link}}},
            "droplets",
        )
        assert page.count == 1
        assert page.has_more is True
        assert page.next_page is None

    def test_malformed_total_ignored(self) -> None:
        page = parse_paginated_response(
            {"droplets": [], "meta": {"total": "many"}}, "droplets"
        )
        assert page.total is None


def test_drop_none_is_recursive() -> None:
    body = {
        "name": "lb",
        "health_check": {"protocol": "http", "path": None},
        "forwarding_rules": [{"entry_port": 80, "certificate_id": None}],
        "tag": None,
    }
    assert drop_none(body) == {
        "name": "lb",
        "health_check": {"protocol": "http"},
        "forwarding_rules": [{"entry_port": 80}],
    }
