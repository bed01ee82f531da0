"""Single-page and all-pages fetching for paginated endpoints.

In all-pages mode page 1 is fetched alone. While every page fetched so far
came back full (``PAGE_SIZE`` items each), another batch is dispatched
concurrently. Batch size starts at one page and grows with the number of pages
already seen, capped at ``max_concurrency``; one worker pool (or semaphore)
sized ``max_concurrency`` serves every batch of a call. Each batch is joined
before deciding whether the data continues, and the final result is assembled
by page number, never by completion order.
"""

from __future__ import annotations

import asyncio
import json
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Mapping

from .builder import build_request
from .config import PAGE_SIZE, get_config, resolve_options
from .exceptions import BlockfrostValidationError
from .executor import execute, execute_async
from .log import get_logger
from .outcome import Outcome
from .request_options import ALL_PAGES, RequestOptions
from .transport import AsyncTransport, Transport

logger = get_logger(__name__)


def decode_items(body: bytes | str) -> list[Any]:
    """Decode a page body into its top-level items.

    A JSON array yields its elements; any other JSON value is a single item.
    """
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise BlockfrostValidationError("Paginated response body is not valid JSON", body=body, cause=exc) from exc
    if isinstance(payload, list):
        return payload
    return [payload]


def count_items(body: bytes | str) -> int:
    return len(decode_items(body))


@dataclass(frozen=True)
class _PageResult:
    outcome: Outcome
    items: tuple[Any, ...] = ()


def _page_result(outcome: Outcome) -> _PageResult:
    if not outcome.is_ok:
        return _PageResult(outcome)
    return _PageResult(outcome, tuple(decode_items(outcome.payload.content)))


def _page_query(query_params: Mapping[str, Any] | None, options: RequestOptions, page: int | None) -> dict[str, Any]:
    query = dict(query_params or {})
    if page is not None:
        query["page"] = page
    if options.count is not None:
        query["count"] = options.count
    if options.order is not None:
        query["order"] = options.order
    return query


def _next_batch(pages_fetched: int, max_concurrency: int) -> range:
    size = max(1, min(pages_fetched, max_concurrency))
    return range(pages_fetched + 1, pages_fetched + size + 1)


def _should_fetch_more(results: Mapping[int, _PageResult]) -> bool:
    if any(not result.outcome.is_ok for result in results.values()):
        return False
    total = sum(len(result.items) for result in results.values())
    return total == len(results) * PAGE_SIZE


def _collapse(results: Mapping[int, _PageResult]) -> Outcome:
    pages = sorted(results)
    for page in pages:
        outcome = results[page].outcome
        if not outcome.is_ok:
            logger.warning("pagination_failed", page=page, kind=outcome.error.value, pages=len(pages))
            return outcome
    items: list[Any] = []
    for page in pages:
        items.extend(results[page].items)
    logger.info("pagination_finished", pages=len(pages), items=len(items))
    return Outcome.ok(items)


def _single_page_query(query_params: Mapping[str, Any] | None, options: RequestOptions) -> Mapping[str, Any] | None:
    if options.page is None and options.count is None and options.order is None:
        return query_params
    return _page_query(query_params, options, options.page)


def fetch_paginated(
    transport: Transport,
    name: str,
    method: str,
    path: str,
    query_params: Mapping[str, Any] | None = None,
    options: RequestOptions | None = None,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> Outcome:
    """Fetch one page, or every page when ``options.page`` is ``ALL_PAGES``.

    All-pages success payloads are the decoded items of every page, concatenated
    in page order. If any page fails, the error of the lowest-numbered failed
    page is returned and nothing else is.
    """
    options = resolve_options(options, get_config(name))
    if options.page != ALL_PAGES:
        request = build_request(name, method, path, _single_page_query(query_params, options), options)
        return execute(request, transport, options, sleep=sleep)

    options = replace(options, count=PAGE_SIZE)

    def fetch(page: int) -> _PageResult:
        request = build_request(name, method, path, _page_query(query_params, options, page), options)
        return _page_result(execute(request, transport, options, sleep=sleep))

    results: dict[int, _PageResult] = {1: fetch(1)}
    with ThreadPoolExecutor(max_workers=options.max_concurrency, thread_name_prefix="blockfrost-page") as pool:
        while _should_fetch_more(results):
            batch = _next_batch(len(results), options.max_concurrency)
            logger.debug("pagination_batch", first_page=batch[0], last_page=batch[-1])
            futures = {page: pool.submit(fetch, page) for page in batch}
            for page, future in futures.items():
                results[page] = future.result()
    return _collapse(results)


async def fetch_paginated_async(
    transport: AsyncTransport,
    name: str,
    method: str,
    path: str,
    query_params: Mapping[str, Any] | None = None,
    options: RequestOptions | None = None,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> Outcome:
    options = resolve_options(options, get_config(name))
    if options.page != ALL_PAGES:
        request = build_request(name, method, path, _single_page_query(query_params, options), options)
        return await execute_async(request, transport, options, sleep=sleep)

    options = replace(options, count=PAGE_SIZE)
    semaphore = asyncio.Semaphore(options.max_concurrency)

    async def fetch(page: int) -> _PageResult:
        async with semaphore:
            request = build_request(name, method, path, _page_query(query_params, options, page), options)
            return _page_result(await execute_async(request, transport, options, sleep=sleep))

    results: dict[int, _PageResult] = {1: await fetch(1)}
    while _should_fetch_more(results):
        batch = _next_batch(len(results), options.max_concurrency)
        logger.debug("pagination_batch", first_page=batch[0], last_page=batch[-1])
        settled = await asyncio.gather(*(fetch(page) for page in batch), return_exceptions=True)
        for page, result in zip(batch, settled):
            if isinstance(result, BaseException):
                raise result
            results[page] = result
    return _collapse(results)
