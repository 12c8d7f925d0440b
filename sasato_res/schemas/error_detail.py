from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationInfo,
    computed_field,
    field_validator,
)

from sasato_res.core.debug_mode import DebugPolicy, get_debug_policy
from sasato_res.utils.sanitizer import Sanitizer, default_sanitizer, render_request_details
from sasato_res.utils.stack_trace import format_stack_trace, qualified_type_name

HIDDEN = "Hidden"
ACCESS_DENIED = "Access Denied: Set debug mode to true to see details."

RequestDetails = Union[str, Mapping[str, Any]]


class ErrorDetail(BaseModel):
    """Error block of an envelope.

    ``code`` and ``message`` are always visible. The exception type, stack
    trace and request details are captured when the detail is built but only
    handed out while the attached debug policy is enabled; the policy is
    consulted on every read, so flipping it affects instances that already
    exist. Request details are sanitized on the way in, whatever the policy
    says, and the unsanitized text is never stored.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    exception_type_raw: Optional[str] = Field(default=None, exclude=True, repr=False)
    stack_trace_raw: Optional[str] = Field(default=None, exclude=True, repr=False)
    request_details_sanitized: Optional[str] = Field(default=None, exclude=True, repr=False)

    _policy: DebugPolicy = PrivateAttr(default_factory=get_debug_policy)

    @field_validator("request_details_sanitized", mode="before")
    @classmethod
    def _sanitize_request_details(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = render_request_details(value)
        sanitizer: Sanitizer = (info.context or {}).get("sanitizer") or default_sanitizer
        return sanitizer.sanitize(str(value))

    @classmethod
    def capture(
        cls,
        code: str,
        message: str,
        exc: Optional[BaseException] = None,
        request_details: Optional[RequestDetails] = None,
        *,
        policy: Optional[DebugPolicy] = None,
        sanitizer: Optional[Sanitizer] = None,
    ) -> "ErrorDetail":
        """Build an error detail from an optional exception and request summary."""
        detail = cls.model_validate(
            {
                "code": code,
                "message": message,
                "exception_type_raw": qualified_type_name(exc) if exc is not None else None,
                "stack_trace_raw": format_stack_trace(exc) if exc is not None else None,
                "request_details_sanitized": request_details,
            },
            context={"sanitizer": sanitizer} if sanitizer is not None else None,
        )
        if policy is not None:
            detail._policy = policy
        return detail

    @property
    def policy(self) -> DebugPolicy:
        return self._policy

    @property
    def debug_enabled(self) -> bool:
        return self._policy.enabled

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exception_type(self) -> Optional[str]:
        return self.exception_type_raw if self.debug_enabled else HIDDEN

    @computed_field  # type: ignore[prop-decorator]
    @property
    def stack_trace(self) -> Optional[str]:
        return self.stack_trace_raw if self.debug_enabled else ACCESS_DENIED

    @computed_field  # type: ignore[prop-decorator]
    @property
    def request_details(self) -> Optional[str]:
        return self.request_details_sanitized if self.debug_enabled else HIDDEN
