"""SDK-specific exceptions."""

from __future__ import annotations

from typing import Mapping


class BlockfrostError(Exception):
    """Base exception for all Blockfrost SDK failures."""

    def __init__(
        self,
        message: str,
        *,
        kind: str | None = None,
        status_code: int | None = None,
        body: object = None,
        headers: Mapping[str, str] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers) if headers is not None else {}
        self.cause = cause

    def __str__(self) -> str:
        if self.status_code is None:
            return str(self.args[0])
        parts = [f"{self.status_code}"]
        if self.kind:
            parts.append(self.kind)
        return " ".join(parts) + f": {self.args[0]}"


class BlockfrostConfigError(BlockfrostError):
    """Raised for unknown client names and invalid configuration."""


class BlockfrostValidationError(BlockfrostError):
    """Raised when request options or response payloads are invalid."""


class BlockfrostHTTPError(BlockfrostError):
    """Raised for HTTP non-success responses."""


class BlockfrostBadRequestError(BlockfrostHTTPError):
    """Raised for HTTP 400 responses."""


class BlockfrostAuthError(BlockfrostHTTPError):
    """Raised for HTTP 403 responses."""


class BlockfrostNotFoundError(BlockfrostHTTPError):
    """Raised for HTTP 404 responses."""


class BlockfrostIPBannedError(BlockfrostHTTPError):
    """Raised for HTTP 418 responses."""


class BlockfrostRateLimitError(BlockfrostHTTPError):
    """Raised for HTTP 429 responses."""


class BlockfrostServerError(BlockfrostHTTPError):
    """Raised for HTTP 500 responses."""


class BlockfrostUnexpectedStatusError(BlockfrostHTTPError):
    """Raised for status codes the API does not document."""


class BlockfrostNetworkError(BlockfrostError):
    """Raised for transport-level failures like DNS, TCP errors and timeouts."""
