from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sasato_res.core.config import settings
from sasato_res.schemas.error_detail import ErrorDetail

T = TypeVar("T")


class StatusCode(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ERROR = "ERROR"


def new_request_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Current time as ISO-8601 with an explicit UTC offset."""
    return datetime.now(timezone.utc).isoformat()


class PaginationInfo(BaseModel):
    """Paging values as the caller passed them; ranges are not checked.

    Integer-like input (``True``, ``"10"``, ``10.0``) is coerced to ``int``;
    only values with no integer reading, such as ``1.5``, are rejected.
    """

    model_config = ConfigDict(frozen=True)

    total_count: int
    limit: int
    offset: int


class Metadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    request_id: str = Field(default_factory=new_request_id)
    api_version: str = Field(default_factory=lambda: settings.API_VERSION)
    timestamp: str = Field(default_factory=utc_timestamp)
    # library-internal construction cost, not end-to-end request latency
    processing_time_ms: float = Field(default=0.0, ge=0)
    pagination: Optional[PaginationInfo] = None


class ResponseEnvelope(BaseModel, Generic[T]):
    """Standard response envelope shared by every endpoint."""

    model_config = ConfigDict(frozen=True)

    status_code: StatusCode
    data: Optional[T] = None
    error: Optional[ErrorDetail] = None
    metadata: Metadata = Field(default_factory=Metadata)

    @model_validator(mode="after")
    def _payload_matches_status(self) -> "ResponseEnvelope[T]":
        if self.status_code is StatusCode.SUCCESS:
            if self.error is not None:
                raise ValueError("SUCCESS envelope must not carry an error")
        else:
            if self.error is None:
                raise ValueError(f"{self.status_code.value} envelope requires an error")
            if self.data is not None:
                raise ValueError(f"{self.status_code.value} envelope must not carry data")
        return self

    @property
    def is_success(self) -> bool:
        return self.status_code is StatusCode.SUCCESS

    @property
    def pagination(self) -> Optional[PaginationInfo]:
        return self.metadata.pagination
