"""Uniform API response envelopes with masked error diagnostics."""

__version__ = "1.0.0"

from sasato_res.core.debug_mode import (  # noqa: E402,F401
    DebugPolicy,
    get_debug_policy,
    is_debug_mode,
    set_debug_mode,
)
from sasato_res.responses import (  # noqa: E402,F401
    error,
    failure,
    success,
    success_with_pagination,
)
from sasato_res.schemas import (  # noqa: E402,F401
    ErrorDetail,
    Metadata,
    PaginationInfo,
    ResponseEnvelope,
    StatusCode,
)
from sasato_res.utils.sanitizer import Sanitizer, sanitize  # noqa: E402,F401
