"""Tagged success/error result shared by the request pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from .exceptions import (
    BlockfrostAuthError,
    BlockfrostBadRequestError,
    BlockfrostError,
    BlockfrostHTTPError,
    BlockfrostIPBannedError,
    BlockfrostNetworkError,
    BlockfrostNotFoundError,
    BlockfrostRateLimitError,
    BlockfrostServerError,
    BlockfrostUnexpectedStatusError,
)


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    IP_BANNED = "ip_banned"
    USAGE_LIMIT_REACHED = "usage_limit_reached"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    UNEXPECTED_STATUS = "unexpected_status"
    TRANSPORT_FAILURE = "transport_failure"


# 403 is retried along with rate limiting and server errors.
RETRYABLE_KINDS = frozenset(
    {
        ErrorKind.UNAUTHENTICATED,
        ErrorKind.USAGE_LIMIT_REACHED,
        ErrorKind.INTERNAL_SERVER_ERROR,
    }
)

_EXCEPTIONS: dict[ErrorKind, type[BlockfrostHTTPError]] = {
    ErrorKind.BAD_REQUEST: BlockfrostBadRequestError,
    ErrorKind.UNAUTHENTICATED: BlockfrostAuthError,
    ErrorKind.NOT_FOUND: BlockfrostNotFoundError,
    ErrorKind.IP_BANNED: BlockfrostIPBannedError,
    ErrorKind.USAGE_LIMIT_REACHED: BlockfrostRateLimitError,
    ErrorKind.INTERNAL_SERVER_ERROR: BlockfrostServerError,
    ErrorKind.UNEXPECTED_STATUS: BlockfrostUnexpectedStatusError,
}


@dataclass(frozen=True)
class Outcome:
    """Either a success payload or an error kind.

    ``reason`` holds the transport exception for ``transport_failure``
    outcomes and the response for HTTP errors.
    """

    payload: Any = None
    error: ErrorKind | None = None
    status_code: int | None = None
    reason: Any = None

    @classmethod
    def ok(cls, payload: Any) -> "Outcome":
        return cls(payload=payload)

    @classmethod
    def failure(cls, kind: ErrorKind, *, status_code: int | None = None, reason: Any = None) -> "Outcome":
        return cls(error=kind, status_code=status_code, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def retryable(self) -> bool:
        return self.error in RETRYABLE_KINDS

    def unwrap(self) -> Any:
        """Return the payload or raise the exception matching the error kind."""
        if self.error is None:
            return self.payload
        raise self.to_exception()

    def to_exception(self) -> BlockfrostError:
        if self.error is ErrorKind.TRANSPORT_FAILURE:
            cause = self.reason if isinstance(self.reason, Exception) else None
            return BlockfrostNetworkError(
                f"Transport failure: {self.reason!r}",
                kind=self.error.value,
                cause=cause,
            )
        body: object = None
        headers = None
        if isinstance(self.reason, httpx.Response):
            body = self.reason.text
            headers = self.reason.headers
        exc_cls = _EXCEPTIONS[self.error]
        return exc_cls(
            self.error.value.replace("_", " "),
            kind=self.error.value,
            status_code=self.status_code,
            body=body,
            headers=headers,
        )
