"""Synchronous and asynchronous clients for the Blockfrost API."""

from __future__ import annotations

import asyncio
import time
from dataclasses import replace
from typing import Any, Awaitable, Callable, Mapping

import httpx

from .builder import OutboundRequest, build_request
from .config import ClientConfig, get_config
from .outcome import Outcome
from .pagination import fetch_paginated, fetch_paginated_async
from .request_options import ALL_PAGES, RequestOptions
from .transport import AsyncHTTPXTransport, AsyncTransport, HTTPXTransport, Transport


def _all_pages(options: RequestOptions | None) -> RequestOptions:
    if options is None:
        return RequestOptions(page=ALL_PAGES)
    if options.page is None:
        return replace(options, page=ALL_PAGES)
    return options


class _BaseBlockfrostClient:
    def __init__(self, name: str = "default") -> None:
        self.name = name

    @property
    def config(self) -> ClientConfig:
        return get_config(self.name)

    def build(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> OutboundRequest:
        return build_request(self.name, method, path, query, options)

    @staticmethod
    def _parse_payload(payload: Any) -> Any:
        if not isinstance(payload, httpx.Response):
            return payload
        if payload.status_code == 204 or not payload.content:
            return None
        content_type = payload.headers.get("content-type", "")
        if "application/json" not in content_type.lower():
            return payload.text
        return payload.json()


class BlockfrostClient(_BaseBlockfrostClient):
    """Synchronous client."""

    def __init__(
        self,
        name: str = "default",
        *,
        httpx_client: httpx.Client | None = None,
        transport: Transport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(name)
        self._transport = transport or HTTPXTransport(httpx_client, timeout=self.config.timeout)
        self._sleep = sleep

    def __enter__(self) -> "BlockfrostClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Outcome:
        return fetch_paginated(self._transport, self.name, method, path, query, options, sleep=self._sleep)

    def get(
        self,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """GET ``path`` and return the decoded body, raising on error outcomes."""
        return self._parse_payload(self.request("GET", path, query=query, options=options).unwrap())

    def get_all(
        self,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> list[Any]:
        return self.get(path, query=query, options=_all_pages(options))

    def health(self, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.get("/health", options=options)

    def blocks_latest(self, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.get("/blocks/latest", options=options)

    def block(self, hash_or_number: str | int, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.get(f"/blocks/{hash_or_number}", options=options)

    def blocks_next(self, hash_or_number: str | int, *, options: RequestOptions | None = None) -> list[dict[str, Any]]:
        return self.get(f"/blocks/{hash_or_number}/next", options=options)

    def blocks_previous(
        self,
        hash_or_number: str | int,
        *,
        options: RequestOptions | None = None,
    ) -> list[dict[str, Any]]:
        return self.get(f"/blocks/{hash_or_number}/previous", options=options)


class AsyncBlockfrostClient(_BaseBlockfrostClient):
    """Asynchronous client."""

    def __init__(
        self,
        name: str = "default",
        *,
        httpx_client: httpx.AsyncClient | None = None,
        transport: AsyncTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        super().__init__(name)
        self._transport = transport or AsyncHTTPXTransport(httpx_client, timeout=self.config.timeout)
        self._sleep = sleep

    async def __aenter__(self) -> "AsyncBlockfrostClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        aclose = getattr(self._transport, "aclose", None)
        if aclose is not None:
            await aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Outcome:
        return await fetch_paginated_async(self._transport, self.name, method, path, query, options, sleep=self._sleep)

    async def get(
        self,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        outcome = await self.request("GET", path, query=query, options=options)
        return self._parse_payload(outcome.unwrap())

    async def get_all(
        self,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> list[Any]:
        return await self.get(path, query=query, options=_all_pages(options))

    async def health(self, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.get("/health", options=options)

    async def blocks_latest(self, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.get("/blocks/latest", options=options)

    async def block(self, hash_or_number: str | int, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.get(f"/blocks/{hash_or_number}", options=options)

    async def blocks_next(
        self,
        hash_or_number: str | int,
        *,
        options: RequestOptions | None = None,
    ) -> list[dict[str, Any]]:
        return await self.get(f"/blocks/{hash_or_number}/next", options=options)

    async def blocks_previous(
        self,
        hash_or_number: str | int,
        *,
        options: RequestOptions | None = None,
    ) -> list[dict[str, Any]]:
        return await self.get(f"/blocks/{hash_or_number}/previous", options=options)
