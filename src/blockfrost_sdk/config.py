"""Named client configuration and option resolution."""

from __future__ import annotations

import os
import threading
from dataclasses import replace
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .exceptions import BlockfrostConfigError, BlockfrostValidationError
from .request_options import ALL_PAGES, RequestOptions
from .security import validate_base_url

API_KEY_ENV_VAR = "BLOCKFROST_API_KEY"
NETWORK_ENV_VAR = "BLOCKFROST_NETWORK"

DEFAULT_RETRY_ENABLED = True
DEFAULT_RETRY_MAX_ATTEMPTS = 3
DEFAULT_RETRY_INTERVAL = 0.5
DEFAULT_MAX_CONCURRENCY = 10
DEFAULT_TIMEOUT = 30.0

PAGE_SIZE = 100


class Network(str, Enum):
    CARDANO_MAINNET = "cardano-mainnet"
    CARDANO_PREPROD = "cardano-preprod"
    CARDANO_PREVIEW = "cardano-preview"
    IPFS = "ipfs"


NETWORK_URLS = {
    Network.CARDANO_MAINNET: "https://cardano-mainnet.blockfrost.io/api/v0",
    Network.CARDANO_PREPROD: "https://cardano-preprod.blockfrost.io/api/v0",
    Network.CARDANO_PREVIEW: "https://cardano-preview.blockfrost.io/api/v0",
    Network.IPFS: "https://ipfs.blockfrost.io/api/v0",
}


class ClientConfig(BaseModel):
    """Resolved settings for one named client.

    Retry and concurrency fields left as ``None`` defer to the hardcoded
    defaults in :func:`resolve_options`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    api_key: str = Field(min_length=1)
    network: Network = Network.CARDANO_MAINNET
    base_url: str | None = None
    allow_http: bool = False
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    retry_enabled: bool | None = None
    retry_max_attempts: int | None = Field(default=None, ge=1)
    retry_interval: float | None = Field(default=None, ge=0)
    max_concurrency: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_base_url(self) -> "ClientConfig":
        if self.base_url is not None:
            validate_base_url(self.base_url, allow_http=self.allow_http)
        return self

    @property
    def network_url(self) -> str:
        return (self.base_url or NETWORK_URLS[self.network]).rstrip("/")


_registry: dict[str, ClientConfig] = {}
_registry_lock = threading.Lock()


def configure(
    name: str = "default",
    *,
    api_key: str | None = None,
    network: Network | str | None = None,
    base_url: str | None = None,
    allow_http: bool = False,
    timeout: float = DEFAULT_TIMEOUT,
    retry_enabled: bool | None = None,
    retry_max_attempts: int | None = None,
    retry_interval: float | None = None,
    max_concurrency: int | None = None,
) -> ClientConfig:
    """Register (or replace) the configuration used by clients named ``name``.

    ``api_key`` falls back to ``BLOCKFROST_API_KEY`` and ``network`` to
    ``BLOCKFROST_NETWORK``, then to Cardano mainnet.
    """
    api_key = api_key or os.getenv(API_KEY_ENV_VAR)
    if not api_key:
        raise BlockfrostConfigError(f"No API key configured for client {name!r}; set {API_KEY_ENV_VAR} or pass api_key")
    network = network or os.getenv(NETWORK_ENV_VAR) or Network.CARDANO_MAINNET
    try:
        config = ClientConfig(
            name=name,
            api_key=api_key,
            network=network,
            base_url=base_url,
            allow_http=allow_http,
            timeout=timeout,
            retry_enabled=retry_enabled,
            retry_max_attempts=retry_max_attempts,
            retry_interval=retry_interval,
            max_concurrency=max_concurrency,
        )
    except ValidationError as exc:
        raise BlockfrostConfigError(f"Invalid configuration for client {name!r}", cause=exc) from exc

    with _registry_lock:
        _registry[name] = config
    return config


def get_config(name: str) -> ClientConfig:
    with _registry_lock:
        config = _registry.get(name)
    if config is None:
        raise BlockfrostConfigError(f"Unknown Blockfrost client {name!r}; call configure({name!r}, ...) first")
    return config


def clear_configs() -> None:
    with _registry_lock:
        _registry.clear()


def _layered(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def resolve_options(options: RequestOptions | None, config: ClientConfig) -> RequestOptions:
    """Resolve per-call options against the client config and the hardcoded defaults.

    The returned options have every layered field set to a concrete value.
    """
    options = options or RequestOptions()
    resolved = replace(
        options,
        retry_enabled=_layered(options.retry_enabled, config.retry_enabled, DEFAULT_RETRY_ENABLED),
        retry_max_attempts=_layered(options.retry_max_attempts, config.retry_max_attempts, DEFAULT_RETRY_MAX_ATTEMPTS),
        retry_interval=_layered(options.retry_interval, config.retry_interval, DEFAULT_RETRY_INTERVAL),
        max_concurrency=_layered(options.max_concurrency, config.max_concurrency, DEFAULT_MAX_CONCURRENCY),
    )
    _validate_options(resolved)
    return resolved


def _validate_options(options: RequestOptions) -> None:
    if options.retry_max_attempts < 1:
        raise BlockfrostValidationError("retry_max_attempts must be at least 1")
    if options.retry_interval < 0:
        raise BlockfrostValidationError("retry_interval must be non-negative")
    if options.max_concurrency < 1:
        raise BlockfrostValidationError("max_concurrency must be at least 1")
    page = options.page
    if page is not None and page != ALL_PAGES:
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise BlockfrostValidationError(f"page must be a positive integer or {ALL_PAGES!r}")
    if page == ALL_PAGES and options.skip_error_handling:
        raise BlockfrostValidationError("skip_error_handling cannot be combined with page='all'")
    if options.count is not None and not 1 <= options.count <= PAGE_SIZE:
        raise BlockfrostValidationError(f"count must be between 1 and {PAGE_SIZE}")
    if options.order is not None and options.order not in ("asc", "desc"):
        raise BlockfrostValidationError("order must be 'asc' or 'desc'")
    if options.content_length is not None and options.content_length < 0:
        raise BlockfrostValidationError("content_length must be non-negative")
