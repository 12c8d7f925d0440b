"""Factories for building response envelopes.

Every factory always succeeds. ``processing_time_ms`` on the result measures
how long the library itself took to assemble the envelope, not the latency of
the surrounding request. The window opens on entry to the factory and closes
once the request id, timestamp, error diagnostics and the validated envelope
and metadata models exist; only the final shallow copy that writes the
duration into the frozen metadata falls outside it.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, TypeVar

from sasato_res.core.config import settings
from sasato_res.core.debug_mode import DebugPolicy
from sasato_res.core.request_context import request_id_var
from sasato_res.schemas.common import (
    Metadata,
    PaginationInfo,
    ResponseEnvelope,
    StatusCode,
    new_request_id,
    utc_timestamp,
)
from sasato_res.schemas.error_detail import ErrorDetail, RequestDetails
from sasato_res.utils.sanitizer import Sanitizer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _build(
    status: StatusCode,
    data: Optional[T] = None,
    make_error: Optional[Callable[[], ErrorDetail]] = None,
    pagination: Optional[PaginationInfo] = None,
) -> ResponseEnvelope[T]:
    start = time.perf_counter()
    request_id = new_request_id()
    token = request_id_var.set(request_id)
    try:
        draft: ResponseEnvelope[T] = ResponseEnvelope(
            status_code=status,
            data=data,
            error=make_error() if make_error is not None else None,
            metadata=Metadata(
                request_id=request_id,
                api_version=settings.API_VERSION,
                timestamp=utc_timestamp(),
                pagination=pagination,
            ),
        )
        # everything is validated; only the shallow copies below are unmeasured
        elapsed_ms = round(max((time.perf_counter() - start) * 1000, 0.0), 3)
        envelope = draft.model_copy(
            update={"metadata": draft.metadata.model_copy(update={"processing_time_ms": elapsed_ms})}
        )
        logger.debug(
            "envelope_built",
            extra={
                "status": status.value,
                "api_version": envelope.metadata.api_version,
                "duration_ms": elapsed_ms,
            },
        )
        return envelope
    finally:
        request_id_var.reset(token)


def success(data: Optional[T] = None) -> ResponseEnvelope[T]:
    """SUCCESS envelope carrying ``data`` (``None`` is allowed)."""
    return _build(StatusCode.SUCCESS, data)


def success_with_pagination(
    data: Optional[T], total_count: int, limit: int, offset: int
) -> ResponseEnvelope[T]:
    """SUCCESS envelope with paging info copied verbatim into the metadata."""
    pagination = PaginationInfo(total_count=total_count, limit=limit, offset=offset)
    return _build(StatusCode.SUCCESS, data, pagination=pagination)


def failure(code: str, message: str) -> ResponseEnvelope[T]:
    """FAILURE envelope for a business or validation failure with no exception."""
    return _build(StatusCode.FAILURE, make_error=lambda: ErrorDetail.capture(code, message))


def error(
    code: str,
    message: str,
    exc: Optional[BaseException] = None,
    request_details: Optional[RequestDetails] = None,
    *,
    policy: Optional[DebugPolicy] = None,
    sanitizer: Optional[Sanitizer] = None,
) -> ResponseEnvelope[T]:
    """ERROR envelope wrapping an exception that has already happened.

    The exception is captured, never re-raised or logged. Request details are
    sanitized immediately; the exception type, stack trace and sanitized
    details are only revealed while debug mode is on.
    """
    return _build(
        StatusCode.ERROR,
        make_error=lambda: ErrorDetail.capture(
            code,
            message,
            exc,
            request_details,
            policy=policy,
            sanitizer=sanitizer,
        ),
    )
