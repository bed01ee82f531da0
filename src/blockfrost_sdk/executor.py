"""Sends one request, classifies it and retries transient failures."""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable

from .builder import OutboundRequest
from .classifier import classify
from .log import get_logger
from .outcome import Outcome
from .request_options import RequestOptions
from .security import sanitize_headers
from .transport import AsyncTransport, Transport, TransportFailure, TransportResult

logger = get_logger(__name__)


def _log_sent(request: OutboundRequest, attempt: int) -> None:
    logger.debug(
        "request_sent",
        method=request.method,
        url=request.url,
        headers=sanitize_headers(request.headers),
        attempt=attempt,
    )


def _log_result(request: OutboundRequest, result: TransportResult) -> None:
    if isinstance(result, TransportFailure):
        logger.warning("transport_failure", method=request.method, url=request.url, reason=repr(result.reason))


def _should_retry(outcome: Outcome, options: RequestOptions, attempt: int) -> bool:
    if outcome.is_ok or not outcome.retryable or not options.retry_enabled:
        return False
    if attempt >= options.retry_max_attempts:
        logger.warning("retries_exhausted", kind=outcome.error.value, attempts=attempt)
        return False
    logger.warning(
        "request_retry",
        kind=outcome.error.value,
        attempt=attempt,
        max_attempts=options.retry_max_attempts,
        delay=options.retry_interval,
    )
    return True


def execute(
    request: OutboundRequest,
    transport: Transport,
    options: RequestOptions,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> Outcome:
    """Send ``request`` until it succeeds, fails terminally or runs out of attempts.

    ``options`` must already be resolved (see ``config.resolve_options``).
    """
    attempt = 0
    while True:
        attempt += 1
        _log_sent(request, attempt)
        result = transport.send(request)
        _log_result(request, result)
        outcome = classify(result, options)
        if not _should_retry(outcome, options, attempt):
            return outcome
        sleep(options.retry_interval)


async def execute_async(
    request: OutboundRequest,
    transport: AsyncTransport,
    options: RequestOptions,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> Outcome:
    attempt = 0
    while True:
        attempt += 1
        _log_sent(request, attempt)
        result = await transport.send(request)
        _log_result(request, result)
        outcome = classify(result, options)
        if not _should_retry(outcome, options, attempt):
            return outcome
        await sleep(options.retry_interval)
