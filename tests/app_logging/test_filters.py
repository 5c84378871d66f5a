import logging

import pytest

from gotrip.app_logging import DefaultCorrelationFilter, PIIFilter


def _record(msg, args=()):
    return logging.LogRecord("gotrip.test", logging.INFO, __file__, 1, msg, args, None)


@pytest.mark.unit
class TestPIIFilter:
    def test_masks_email(self):
        record = _record("Cancelled: write to ana.gomez@example.com")
        PIIFilter().filter(record)
        assert record.getMessage() == "Cancelled: write to [EMAIL]"

    def test_masks_international_phone(self):
        record = _record("Call me at +595 981 123 456 please")
        PIIFilter().filter(record)
        assert record.getMessage() == "Call me at [PHONE] please"

    def test_masks_local_phone(self):
        record = _record("Reason: %s", ("call 021-555-1234",))
        PIIFilter().filter(record)

        assert record.getMessage() == "Reason: call [PHONE]"
        assert record.args == ()

    def test_leaves_prices_and_ids_alone(self):
        msg = "Trip 3f2a9c1e0b7d4e5f8a6b1c2d3e4f5a6b requested (economy, 25269)"
        record = _record(msg)
        PIIFilter().filter(record)
        assert record.getMessage() == msg

    def test_never_drops_records(self):
        assert PIIFilter().filter(_record("plain text")) is True


@pytest.mark.unit
class TestDefaultCorrelationFilter:
    def test_sets_placeholder(self):
        record = _record("x")
        DefaultCorrelationFilter().filter(record)
        assert record.correlation_id == "-"

    def test_keeps_existing(self):
        record = _record("x")
        record.correlation_id = "t-1"
        DefaultCorrelationFilter().filter(record)
        assert record.correlation_id == "t-1"
