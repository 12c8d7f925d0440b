from __future__ import annotations

import os
import traceback
from types import FrameType
from typing import Iterable, Iterator, Tuple

_PACKAGE = __name__.split(".", 1)[0]


def qualified_type_name(exc: BaseException) -> str:
    """Return ``module.QualName`` for the runtime type of ``exc``."""
    cls = type(exc)
    return f"{cls.__module__}.{cls.__qualname__}"


def _format_frame(frame: FrameType, lineno: int) -> str:
    code = frame.f_code
    module = frame.f_globals.get("__name__", "?")
    name = getattr(code, "co_qualname", code.co_name)
    return f"{module}.{name}({os.path.basename(code.co_filename)}:{lineno})"


def _frames(exc: BaseException) -> Iterator[Tuple[FrameType, int]]:
    if exc.__traceback__ is not None:
        # outermost first, matching how Python prints tracebacks
        yield from traceback.walk_tb(exc.__traceback__)
        return
    # never raised: fall back to the stack of whoever is capturing it
    stack = [
        (frame, lineno)
        for frame, lineno in traceback.walk_stack(None)
        if not str(frame.f_globals.get("__name__", "")).startswith(_PACKAGE + ".")
    ]
    yield from reversed(stack)


def format_frames(frames: Iterable[Tuple[FrameType, int]]) -> str:
    return "\n".join(_format_frame(frame, lineno) for frame, lineno in frames)


def format_stack_trace(exc: BaseException) -> str:
    """Render the frames of ``exc`` one per line as ``module.func(file:line)``."""
    return format_frames(_frames(exc))
