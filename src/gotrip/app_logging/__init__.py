from .context import ContextFilter, current_log_fields, log_context, log_trip_context
from .filters import DefaultCorrelationFilter, PIIFilter
from .formatters import DevFormatter, JSONFormatter
from .setup import setup_logging

__all__ = [
    "ContextFilter",
    "DefaultCorrelationFilter",
    "DevFormatter",
    "JSONFormatter",
    "PIIFilter",
    "current_log_fields",
    "log_context",
    "log_trip_context",
    "setup_logging",
]
