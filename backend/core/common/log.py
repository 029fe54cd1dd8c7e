import sys
import os
import logging
from loguru import logger

# stdlib loggers whose records are rerouted into loguru
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records (uvicorn, fastapi) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _intercept_stdlib(level: str) -> None:
    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
        std_logger.setLevel(level)


def configure_logger(level: str | None = None, log_file: str | None = None):
    level = str(level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_file = log_file if log_file is not None else os.getenv("LOG_FILE", "")

    # drop existing sinks so repeated calls don't duplicate output
    logger.remove()

    logger.add(
        sys.stdout,
        level=level,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> - <level>{level}</level> - <level>{message}</level>",
    )

    if log_file:
        logger.add(
            f"{log_file}.log",
            level=level,
            rotation="1 MB",
            retention=7,
            encoding="utf-8",
            format="{time:YYYY-MM-DD HH:mm:ss} - {level} - {name}:{line} - {message}",
        )

    _intercept_stdlib(level)
    return logger


logger = configure_logger()
