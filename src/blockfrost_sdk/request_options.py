"""Per-request overrides for the Blockfrost clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

ALL_PAGES: Literal["all"] = "all"

Page = Union[int, Literal["all"]]


@dataclass(frozen=True)
class RequestOptions:
    retry_enabled: bool | None = None
    retry_max_attempts: int | None = None
    retry_interval: float | None = None
    max_concurrency: int | None = None
    page: Page | None = None
    count: int | None = None
    order: Literal["asc", "desc"] | None = None
    skip_error_handling: bool = False
    content_type: str | None = None
    content_length: int | None = None
    body: str | bytes | None = None
