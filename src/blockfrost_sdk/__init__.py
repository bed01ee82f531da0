"""Python client for the Blockfrost API."""

from ._version import __version__
from .builder import OutboundRequest, build_request
from .classifier import classify
from .client import AsyncBlockfrostClient, BlockfrostClient
from .config import ClientConfig, Network, clear_configs, configure, get_config, resolve_options
from .exceptions import (
    BlockfrostAuthError,
    BlockfrostBadRequestError,
    BlockfrostConfigError,
    BlockfrostError,
    BlockfrostHTTPError,
    BlockfrostIPBannedError,
    BlockfrostNetworkError,
    BlockfrostNotFoundError,
    BlockfrostRateLimitError,
    BlockfrostServerError,
    BlockfrostUnexpectedStatusError,
    BlockfrostValidationError,
)
from .executor import execute, execute_async
from .log import configure_logging, reset_logging
from .outcome import ErrorKind, Outcome
from .pagination import count_items, fetch_paginated, fetch_paginated_async
from .request_options import ALL_PAGES, RequestOptions
from .transport import AsyncHTTPXTransport, HTTPXTransport, TransportFailure

__all__ = [
    "ALL_PAGES",
    "AsyncBlockfrostClient",
    "AsyncHTTPXTransport",
    "BlockfrostAuthError",
    "BlockfrostBadRequestError",
    "BlockfrostClient",
    "BlockfrostConfigError",
    "BlockfrostError",
    "BlockfrostHTTPError",
    "BlockfrostIPBannedError",
    "BlockfrostNetworkError",
    "BlockfrostNotFoundError",
    "BlockfrostRateLimitError",
    "BlockfrostServerError",
    "BlockfrostUnexpectedStatusError",
    "BlockfrostValidationError",
    "ClientConfig",
    "ErrorKind",
    "HTTPXTransport",
    "Network",
    "OutboundRequest",
    "Outcome",
    "RequestOptions",
    "TransportFailure",
    "__version__",
    "build_request",
    "classify",
    "clear_configs",
    "configure",
    "configure_logging",
    "count_items",
    "execute",
    "execute_async",
    "fetch_paginated",
    "fetch_paginated_async",
    "get_config",
    "reset_logging",
    "resolve_options",
]
