"""
Tests for the logging utilities.
"""

import io
import json
import logging
from unittest.mock import patch

from app.definitions.data_sources import REDACTED_API_KEY
from app.utils.logger import SecretRedactingFilter, redact_secret, setup_logger

SECRET = "fedcba9876543210fedcba9876543210"


class TestRedaction:
    """Test suite for credential redaction in diagnostics."""

    def test_redact_secret(self):
        assert redact_secret(f"appid={SECRET}", SECRET) == f"appid={REDACTED_API_KEY}"

    def test_redact_without_secret_is_noop(self):
        assert redact_secret("appid=", "") == "appid="

    def test_filter_scrubs_message_and_extras(self):
        record = logging.LogRecord(
            "test", logging.INFO, __file__, 1, "calling %s", (f"?appid={SECRET}",), None
        )
        record.url = f"https://x/weather?appid={SECRET}"

        with patch("app.utils.logger.settings") as mock_settings:
            mock_settings.openweather_api_key = SECRET
            assert SecretRedactingFilter().filter(record) is True

        assert SECRET not in record.getMessage()
        assert SECRET not in record.url
        assert REDACTED_API_KEY in record.url

    def test_json_output(self):
        """Test the logger emits one JSON object per record."""
        logger = setup_logger("tests.json_output")
        stream = io.StringIO()
        logger.handlers[0].setStream(stream)

        logger.warning("hello", extra={"event": "test_event"})

        payload = json.loads(stream.getvalue().strip())
        assert payload["message"] == "hello"
        assert payload["event"] == "test_event"
        assert payload["levelname"] == "WARNING"
