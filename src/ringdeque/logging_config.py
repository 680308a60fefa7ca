import logging
import sys
from pathlib import Path
from typing import Any, cast

from loguru import logger
from loguru._defaults import LOGURU_FORMAT

PACKAGE_NAME = "ringdeque"


class InterceptHandler(logging.Handler):
    """A custom logging handler to intercept standard logging messages.

    This handler redirects standard logging messages to Loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Emits a log record to the Loguru logger.

        Args:
            record: The log record to emit.
        """
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = cast(Any, frame.f_back)
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    log_dir: Path | None = None,
) -> None:
    """Configures the Loguru logger for an application using ringdeque.

    The package keeps its own logging disabled on import, so a library
    user sees nothing unless this function is called. It removes the
    default handlers, adds a colorized console sink, an optional daily
    rotated file sink with one JSON record per line, and routes the
    standard library's logging through Loguru.

    Args:
        console_level: The minimum log level for console output.
        file_level: The minimum log level for file output.
        log_dir: Directory to store log files. If None, file logging is disabled.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=console_level.upper(),
        format=LOGURU_FORMAT,
        colorize=True,
    )

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / f"{PACKAGE_NAME}_{{time:YYYY-MM-DD}}.log",
            level=file_level.upper(),
            rotation="00:00",  # New file at midnight
            retention="7 days",
            compression="zip",
            serialize=True,
            enqueue=True,
            backtrace=False,
            diagnose=False,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.enable(PACKAGE_NAME)

    logger.info("Logging configured successfully.")
