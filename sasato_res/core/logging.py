from __future__ import annotations

import logging
from logging.config import dictConfig
from pathlib import Path
from typing import Any

from sasato_res.core.config import settings
from sasato_res.core.request_context import request_id_var

# LogRecord 自带的属性；其余属性都来自调用方的 extra=
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "request_id", "taskName"}

_BASE_FORMAT = (
    "{\"ts\":%(asctime)s, \"lvl\":%(levelname)s, "
    "\"logger\":%(name)s, \"msg\":%(message)s, "
    "\"req_id\":%(request_id)s"
)


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # 如果可用，附加正在构建的信封的request_id
        rid = request_id_var.get()
        setattr(record, "request_id", rid or "-")
        return True


class ExtraFieldsFormatter(logging.Formatter):
    """在基础格式后追加记录的 extra 字段（如 status、api_version、duration_ms）。"""

    def __init__(self, fmt: str = _BASE_FORMAT, datefmt: str | None = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        line = super().format(record)
        extras = "".join(
            f", \"{key}\":{value}"
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        )
        return line + extras + "}"


def _file_handler(policy: str) -> dict[str, Any]:
    handler: dict[str, Any] = {
        "formatter": "json",
        "filters": ["reqid"],
        "filename": settings.LOG_FILE_PATH,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
    }
    if policy == "time":
        handler.update(
            {
                "class": "logging.handlers.TimedRotatingFileHandler",
                "when": settings.LOG_ROTATION_WHEN,
                "interval": settings.LOG_ROTATION_INTERVAL,
            }
        )
    else:
        handler.update(
            {
                "class": "logging.handlers.RotatingFileHandler",
                "maxBytes": settings.LOG_MAX_BYTES,
            }
        )
    return handler


def setup_logging(level: str | None = None) -> None:
    """配置结构化日志记录，包含可选的日志文件轮转和信封请求关联。

    导入本包不会配置日志；由宿主应用在启动时显式调用。
    """
    level_upper = (level or settings.LOG_LEVEL).upper()

    handlers: dict[str, dict[str, Any]] = {
        "default": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "filters": ["reqid"],
        }
    }
    if settings.LOG_TO_FILE:
        # 确保日志目录存在
        Path(settings.LOG_FILE_PATH).parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = _file_handler(settings.LOG_ROTATION_POLICY)

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {"reqid": {"()": RequestIdFilter}},
            "formatters": {"json": {"()": ExtraFieldsFormatter}},
            "handlers": handlers,
            "root": {
                "level": level_upper,
                "handlers": list(handlers.keys()),
            },
        }
    )
    logging.getLogger(__name__).info(
        "日志配置完成", extra={"level": level_upper}
    )
