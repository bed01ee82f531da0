"""Security helpers."""

from __future__ import annotations

from typing import Iterable, Mapping
from urllib.parse import urlparse


SENSITIVE_HEADERS = {
    "authorization",
    "project_id",
}


def sanitize_headers(headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> dict[str, str]:
    """Return headers with sensitive values redacted for logging."""
    items = headers.items() if isinstance(headers, Mapping) else headers
    redacted: dict[str, str] = {}
    for key, value in items:
        if key.lower() in SENSITIVE_HEADERS:
            redacted[key] = "[REDACTED]"
        else:
            redacted[key] = value
    return redacted


LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


def validate_base_url(url: str, *, allow_http: bool = False) -> None:
    """Check a Blockfrost base URL before any ``project_id`` header is sent to it.

    Plain ``http`` would expose the project id on the wire, so it is refused for
    anything but a loopback host unless ``allow_http`` is set (a self-hosted
    backend behind a trusted network, for example).
    """
    if "\x00" in url:
        raise ValueError("base_url contains a NUL byte")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"base_url must be an absolute http(s) URL for the Blockfrost API, got {url!r}")
    host = (parsed.hostname or "").lower()
    if parsed.scheme == "http" and not allow_http and host not in LOOPBACK_HOSTS:
        raise ValueError(
            f"refusing to send project_id to {host} over plain http; use https or pass allow_http=True"
        )
