import os
import logging

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")
# Third-party loggers that only speak up when debugging
NOISY_LOGGERS = ("httpx", "httpcore", "pyinstrument", "multipart")


def get_log_level() -> str:
    """Get log level from LOG_LEVEL, INFO when unset or unknown."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    return level if level in VALID_LEVELS else "INFO"


def get_uvicorn_log_level() -> str:
    """Get log level for Uvicorn (lowercase)."""
    return get_log_level().lower()


def setup_logging() -> str:
    """Configure root and uvicorn loggers from LOG_LEVEL and return the level used."""
    log_level = get_log_level()
    level = getattr(logging, log_level)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(level)

    if log_level != "DEBUG":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")
    return log_level
