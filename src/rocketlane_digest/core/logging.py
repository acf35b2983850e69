"""
Logging setup - routes loguru and stdlib logging to a single stdout sink.
"""

import logging
import sys

from loguru import logger

DEFAULT_SERVICE_NAME = "rocketlane-digest"

# Shown outside of a request, where no request id is bound.
NO_REQUEST_ID = "-"


class InterceptHandler(logging.Handler):
    """Forward stdlib log records (uvicorn, config modules) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    service_name: str = DEFAULT_SERVICE_NAME,
    log_level: str = "INFO",
    enable_json: bool = False,
):
    """
    Set up logging for the service.

    Args:
        service_name: Name shown in every log line
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_json: Emit serialized JSON records instead of text
    """
    logger.remove()
    logger.configure(extra={"request_id": NO_REQUEST_ID})

    log_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[request_id]} | "
        f"{service_name}:{{function}}:{{line}} - {{message}}"
    )

    logger.add(
        sys.stdout,
        format=log_format,
        level=log_level.upper(),
        colorize=not enable_json,
        serialize=enable_json,
        backtrace=True,
        diagnose=False,
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        std_logger = logging.getLogger(logger_name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.info(f"Logging configured for {service_name} at level: {log_level.upper()}")
