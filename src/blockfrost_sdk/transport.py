"""HTTP transport used to send built requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

import httpx

from .builder import OutboundRequest


@dataclass(frozen=True)
class TransportFailure:
    """A request that never produced a response."""

    reason: Exception


TransportResult = Union[httpx.Response, TransportFailure]


class Transport(Protocol):
    def send(self, request: OutboundRequest) -> TransportResult: ...


class AsyncTransport(Protocol):
    async def send(self, request: OutboundRequest) -> TransportResult: ...


class HTTPXTransport:
    """Sends requests through an ``httpx.Client``."""

    def __init__(self, client: httpx.Client | None = None, *, timeout: float | None = None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, trust_env=False)

    def send(self, request: OutboundRequest) -> TransportResult:
        try:
            return self._client.send(request.to_httpx())
        except httpx.TransportError as exc:
            return TransportFailure(reason=exc)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class AsyncHTTPXTransport:
    """Sends requests through an ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient | None = None, *, timeout: float | None = None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, trust_env=False)

    async def send(self, request: OutboundRequest) -> TransportResult:
        try:
            return await self._client.send(request.to_httpx())
        except httpx.TransportError as exc:
            return TransportFailure(reason=exc)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
