"""Maps transport results onto outcomes."""

from __future__ import annotations

from .outcome import ErrorKind, Outcome
from .request_options import RequestOptions
from .transport import TransportFailure, TransportResult

STATUS_KINDS = {
    400: ErrorKind.BAD_REQUEST,
    403: ErrorKind.UNAUTHENTICATED,
    404: ErrorKind.NOT_FOUND,
    418: ErrorKind.IP_BANNED,
    429: ErrorKind.USAGE_LIMIT_REACHED,
    500: ErrorKind.INTERNAL_SERVER_ERROR,
}


def classify(result: TransportResult, options: RequestOptions | None = None) -> Outcome:
    if isinstance(result, TransportFailure):
        return Outcome.failure(ErrorKind.TRANSPORT_FAILURE, reason=result.reason)

    if options is not None and options.skip_error_handling:
        return Outcome.ok(result)

    status = result.status_code
    if 199 <= status <= 399:
        return Outcome.ok(result)
    kind = STATUS_KINDS.get(status, ErrorKind.UNEXPECTED_STATUS)
    return Outcome.failure(kind, status_code=status, reason=result)
