from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from sasato_res import __version__

DEFAULT_SENSITIVE_KEYS: tuple[str, ...] = (
    "password",
    "token",
    "secret",
    "apiKey",
    "auth",
    "credential",
    "card_no",
)


class Settings(BaseSettings):
    """库设置，从环境变量加载。

    提供整个包使用的类型化配置。
    """

    # 调试模式：进程级开关的初始值，默认安全（屏蔽诊断信息）
    DEBUG_MODE: bool = False

    # 写入每个信封元数据的API版本
    API_VERSION: str = __version__

    # 脱敏配置
    SENSITIVE_KEYS: list[str] = list(DEFAULT_SENSITIVE_KEYS)
    MASK: str = "********"

    LOG_LEVEL: str = "info"

    # 日志文件记录和轮转
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: str = "logs/sasato_res.log"
    LOG_ROTATION_POLICY: str = "time"  # 可选: "time", "size"
    LOG_ROTATION_WHEN: str = "D"  # 用于 TimedRotatingFileHandler
    LOG_ROTATION_INTERVAL: int = 1
    LOG_BACKUP_COUNT: int = 7
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 用于基于大小的轮转

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


settings = Settings()
