"""
Logging setup and HTTP request logging middleware.
Challenge: One configuration for all app.* loggers; request lines with status and latency.
"""

import logging
import sys
import time

from fastapi import Request

from app.config import Settings

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("app.requests")


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the root ``app`` logger. Safe to call repeatedly (tests build many apps)."""
    root_logger = logging.getLogger("app")
    root_logger.setLevel(logging.DEBUG if settings.debug else settings.log_level)

    # Prevent duplicate handlers on repeated calls
    if root_logger.handlers:
        return root_logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    root_logger.addHandler(handler)
    root_logger.debug("Logging initialised: level=%s", logging.getLevelName(root_logger.level))
    return root_logger


async def log_requests(request: Request, call_next):
    """Log method, path, status and duration; level follows the status class."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    client = request.client.host if request.client else "-"
    args = (request.method, request.url.path, response.status_code, duration_ms, client)
    if response.status_code >= 500:
        logger.error("Request failed: %s %s -> %d (%.1fms) ip=%s", *args)
    elif response.status_code >= 400:
        logger.warning("Request error: %s %s -> %d (%.1fms) ip=%s", *args)
    else:
        logger.info("Request completed: %s %s -> %d (%.1fms) ip=%s", *args)
    return response
