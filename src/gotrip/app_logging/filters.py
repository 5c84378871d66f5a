"""Log filters for PII masking and correlation ID defaults."""

import logging
import re


class PIIFilter(logging.Filter):
    """Masks emails and phone numbers in the rendered log message.

    Cancellation reasons and rating comments are free text typed by riders,
    so they can carry contact details.
    """

    EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+")
    INTL_PHONE_PATTERN = re.compile(r"\+\d{1,3}[\s-]?\d{3}[\s-]?\d{3}[\s-]?\d{3,4}")
    LOCAL_PHONE_PATTERN = re.compile(r"(?<![\w.])\d{3}[-.\s]?\d{3}[-.\s]?\d{4}(?![\w.])")

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except (TypeError, ValueError):
            return True

        masked = msg
        if "@" in masked:
            masked = self.EMAIL_PATTERN.sub("[EMAIL]", masked)
        if any(c.isdigit() for c in masked):
            masked = self.INTL_PHONE_PATTERN.sub("[PHONE]", masked)
            masked = self.LOCAL_PHONE_PATTERN.sub("[PHONE]", masked)

        if masked != msg:
            record.msg = masked
            record.args = ()
        return True


class DefaultCorrelationFilter(logging.Filter):
    """Adds ``correlation_id='-'`` so format strings can always reference it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "-"
        return True
