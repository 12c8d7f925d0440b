"""Pydantic models for the response envelope."""

from .common import (  # noqa: F401
    Metadata,
    PaginationInfo,
    ResponseEnvelope,
    StatusCode,
)
from .error_detail import ACCESS_DENIED, HIDDEN, ErrorDetail  # noqa: F401
