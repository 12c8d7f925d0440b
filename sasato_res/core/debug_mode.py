"""Debug-mode switch that decides whether error diagnostics are revealed.

The flag is read every time a gated ``ErrorDetail`` field is accessed; no
envelope or error detail keeps its own copy. Most callers only ever touch the
process-wide policy through :func:`set_debug_mode`, but a separate
:class:`DebugPolicy` can be handed to an error detail when one component needs
its own switch.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from sasato_res.core.config import settings

logger = logging.getLogger(__name__)


class DebugPolicy:
    """Lock-protected boolean; latest write wins for every reader."""

    def __init__(self, enabled: bool = False) -> None:
        self._lock = threading.Lock()
        self._enabled = bool(enabled)

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._enabled

    def set(self, enabled: bool) -> None:
        with self._lock:
            self._enabled = bool(enabled)

    def enable(self) -> None:
        self.set(True)

    def disable(self) -> None:
        self.set(False)

    @contextmanager
    def override(self, enabled: bool) -> Iterator["DebugPolicy"]:
        """临时切换开关，退出时恢复之前的值。"""
        with self._lock:
            previous = self._enabled
            self._enabled = bool(enabled)
        try:
            yield self
        finally:
            self.set(previous)

    def __repr__(self) -> str:
        return f"DebugPolicy(enabled={self.enabled})"


# 进程级策略，初始值来自配置
_global_policy = DebugPolicy(enabled=settings.DEBUG_MODE)


def get_debug_policy() -> DebugPolicy:
    return _global_policy


def set_debug_mode(enabled: bool) -> None:
    """设置进程级调试模式，对已构建的实例立即生效。"""
    _global_policy.set(enabled)
    if enabled:
        logger.warning("调试模式已开启，错误诊断信息将对调用方可见")
    else:
        logger.info("调试模式已关闭")


def is_debug_mode() -> bool:
    return _global_policy.enabled
