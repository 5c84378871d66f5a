"""Root logger configuration."""

import logging
import sys

from gotrip.settings import LoggingSettings

from .context import ContextFilter
from .filters import DefaultCorrelationFilter, PIIFilter
from .formatters import DevFormatter, JSONFormatter

HANDLER_NAME = "gotrip"
NOISY_LOGGERS = ("uvicorn.access", "httpx")


def setup_logging(settings: LoggingSettings | None = None) -> logging.Handler:
    """Install the gotrip stdout handler on the root logger.

    Calling it again swaps the previous gotrip handler; handlers installed by
    anything else (pytest, uvicorn) are left in place.
    """
    settings = settings or LoggingSettings()
    root_logger = logging.getLogger()
    for existing in [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]:
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    if settings.format == "json":
        handler.setFormatter(JSONFormatter(settings.environment))
    else:
        handler.setFormatter(DevFormatter())

    handler.addFilter(ContextFilter())
    handler.addFilter(PIIFilter())
    handler.addFilter(DefaultCorrelationFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(settings.level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.captureWarnings(True)

    return handler
