from __future__ import annotations

from datetime import datetime, timezone
from urllib.parse import parse_qs, urlsplit

import pytest

from blockfrost_sdk import RequestOptions, build_request, configure
from blockfrost_sdk.builder import USER_AGENT
from blockfrost_sdk.exceptions import BlockfrostConfigError

from conftest import API_KEY


def test_build_request_joins_base_path_and_encodes_query() -> None:
    request = build_request("test", "get", "/blocks/latest/txs", {"page": 2, "order": "desc", "count": 100})

    parts = urlsplit(request.url)
    assert request.method == "GET"
    assert parts.scheme == "https"
    assert parts.netloc == "api.test"
    assert parts.path == "/api/v0/blocks/latest/txs"
    assert parse_qs(parts.query) == {"page": ["2"], "order": ["desc"], "count": ["100"]}


def test_query_encoding_is_independent_of_mapping_order() -> None:
    first = build_request("test", "GET", "/assets", {"a": 1, "b": "x y", "c": "&"})
    second = build_request("test", "GET", "/assets", {"c": "&", "b": "x y", "a": 1})

    assert parse_qs(urlsplit(first.url).query) == parse_qs(urlsplit(second.url).query)


def test_query_drops_none_and_expands_sequences() -> None:
    request = build_request(
        "test",
        "GET",
        "/txs",
        {"skip": None, "hash": ["a", "b"], "from": datetime(2024, 1, 2, tzinfo=timezone.utc)},
    )

    query = parse_qs(urlsplit(request.url).query)
    assert "skip" not in query
    assert query["hash"] == ["a", "b"]
    assert query["from"] == ["2024-01-02T00:00:00+00:00"]


def test_missing_query_produces_no_query_string() -> None:
    request = build_request("test", "GET", "/health")

    assert urlsplit(request.url).query == ""


def test_query_replaces_existing_query_on_base_url() -> None:
    configure("stale", api_key="key", base_url="https://api.test/api/v0?stale=1")

    request = build_request("stale", "GET", "/health", {"fresh": "1"})

    assert parse_qs(urlsplit(request.url).query) == {"fresh": ["1"]}


def test_default_headers() -> None:
    request = build_request("test", "GET", "/health")

    assert request.header("project_id") == API_KEY
    assert request.header("User-Agent") == USER_AGENT
    assert USER_AGENT.startswith("blockfrost-python-sdk/")
    assert request.header("Content-Type") == "application/json"
    assert request.header("Content-Length") is None


def test_content_type_and_length_overrides() -> None:
    options = RequestOptions(content_type="application/cbor", content_length=42, body=b"\x84\xa4")

    request = build_request("test", "POST", "/tx/submit", None, options)

    assert request.header("Content-Type") == "application/cbor"
    assert request.header("Content-Length") == "42"
    assert request.body == b"\x84\xa4"


def test_body_defaults_to_empty_string() -> None:
    request = build_request("test", "POST", "/utils/txs/evaluate")

    assert request.body == ""


def test_build_request_is_idempotent() -> None:
    options = RequestOptions(content_length=3, body="abc")

    first = build_request("test", "POST", "/ipfs/add", {"x": 1}, options)
    second = build_request("test", "POST", "/ipfs/add", {"x": 1}, options)

    assert first == second


def test_unknown_client_name_is_a_config_error() -> None:
    with pytest.raises(BlockfrostConfigError, match="Unknown Blockfrost client"):
        build_request("nope", "GET", "/health")


def test_rejects_unknown_method_and_relative_paths() -> None:
    with pytest.raises(ValueError, match="Unsupported HTTP method"):
        build_request("test", "FETCH", "/health")
    with pytest.raises(ValueError, match="must be absolute"):
        build_request("test", "GET", "health")
    with pytest.raises(ValueError, match="Full URLs"):
        build_request("test", "GET", "https://evil.test/health")


def test_to_httpx_carries_headers_and_body() -> None:
    request = build_request("test", "POST", "/tx/submit", None, RequestOptions(body="payload"))

    converted = request.to_httpx()

    assert converted.method == "POST"
    assert str(converted.url) == request.url
    assert converted.headers["project_id"] == API_KEY
    assert converted.content == b"payload"
