import logging
import logging.handlers
from app.config.settings import settings

APP_LOGGER = "dernier_metro"


def setup_logging() -> logging.Logger:
    """Attach handlers from `settings` to the service logger and return it.

    Records still propagate to the root logger, so whatever the host
    (uvicorn, pytest) installs there keeps receiving them. Calling this twice
    does not add handlers twice.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(settings.LOG_FORMAT)
    if settings.LOG_TO_CONSOLE:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)
    if settings.LOG_FILE:
        file_handler = logging.handlers.RotatingFileHandler(
            settings.LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # one line per request comes from the app middleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logger


def request_line(method: str, path: str, status_code: int, elapsed_ms: float) -> str:
    """`GET /next-metro -> 200 (0.4ms)`"""
    return f"{method} {path} -> {status_code} ({elapsed_ms:.1f}ms)"
