import os
from typing import Optional


def _bool_env(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).lower() in ("1", "true", "yes", "on")


def _int_env(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return int(v)
    except ValueError:
        return default


class Settings:
    """Settings read from the environment with sensible defaults.

    Only server and logging knobs live here. The line profile (timezone,
    headway, service window) is fixed, see `app.config.profile`.
    """

    def __init__(self) -> None:
        # Server
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = _int_env("PORT", 3000)

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_TO_CONSOLE: bool = _bool_env("LOG_TO_CONSOLE", True)
        self.LOG_FILE: Optional[str] = os.getenv("LOG_FILE")
        self.LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    @property
    def public_url(self) -> str:
        host = "localhost" if self.HOST in ("0.0.0.0", "") else self.HOST
        return f"http://{host}:{self.PORT}"


settings = Settings()
