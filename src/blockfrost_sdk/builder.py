"""Request construction for the Blockfrost API."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

import httpx

from ._version import __version__
from .config import ClientConfig, get_config
from .request_options import RequestOptions

USER_AGENT = f"blockfrost-python-sdk/{__version__}"
DEFAULT_CONTENT_TYPE = "application/json"

HTTP_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE"}


@dataclass(frozen=True)
class OutboundRequest:
    method: str
    url: str
    headers: tuple[tuple[str, str], ...]
    body: str | bytes = ""

    def header(self, name: str) -> str | None:
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

    def to_httpx(self) -> httpx.Request:
        return httpx.Request(self.method, self.url, headers=list(self.headers), content=self.body)


def _coerce_query_params(query: Mapping[str, Any] | None) -> dict[str, Any]:
    if query is None:
        return {}
    normalized: dict[str, Any] = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            normalized[key] = ["" if v is None else v for v in value]
            continue
        if isinstance(value, datetime):
            normalized[key] = value.isoformat()
            continue
        if isinstance(value, bool):
            normalized[key] = "true" if value else "false"
            continue
        normalized[key] = value
    return normalized


def resolve_url(config: ClientConfig, path: str, query_params: Mapping[str, Any] | None) -> str:
    if "://" in path:
        raise ValueError("Full URLs are not allowed in path")
    if not path.startswith("/"):
        raise ValueError("Path must be absolute and start with '/'")
    if "\x00" in path:
        raise ValueError("Invalid path characters")
    base = httpx.URL(config.network_url)
    url = base.copy_with(path=base.path.rstrip("/") + path, params=_coerce_query_params(query_params))
    return str(url)


def resolve_headers(config: ClientConfig, options: RequestOptions) -> tuple[tuple[str, str], ...]:
    headers = [
        ("project_id", config.api_key),
        ("User-Agent", USER_AGENT),
        ("Content-Type", options.content_type or DEFAULT_CONTENT_TYPE),
    ]
    if options.content_length is not None:
        headers.append(("Content-Length", str(int(options.content_length))))
    return tuple(headers)


def build_request(
    name: str,
    method: str,
    path: str,
    query_params: Mapping[str, Any] | None = None,
    options: RequestOptions | None = None,
) -> OutboundRequest:
    """Build a request for the client registered as ``name`` without sending it."""
    config = get_config(name)
    options = options or RequestOptions()
    method = method.upper()
    if method not in HTTP_METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")
    return OutboundRequest(
        method=method,
        url=resolve_url(config, path, query_params),
        headers=resolve_headers(config, options),
        body=options.body if options.body is not None else "",
    )
