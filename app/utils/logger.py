import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from app.config import get_settings
from app.definitions.data_sources import REDACTED_API_KEY

settings = get_settings()


def redact_secret(text: str, secret: Optional[str] = None) -> str:
    """
    Replace every occurrence of the provider credential in text.

    Args:
        text: Text that may contain the credential (URLs, exception messages)
        secret: Credential to hide, defaults to the configured API key

    Returns:
        Text with the credential replaced by a placeholder
    """
    secret = secret if secret is not None else settings.openweather_api_key
    if not secret:
        return text
    return text.replace(secret, REDACTED_API_KEY)


class SecretRedactingFilter(logging.Filter):
    """
    Scrub the provider credential from messages and string extras.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        secret = settings.openweather_api_key
        if not secret:
            return True

        message = record.getMessage()
        if secret in message:
            record.msg = redact_secret(message, secret)
            record.args = None

        for key, value in list(vars(record).items()):
            if isinstance(value, str) and secret in value:
                setattr(record, key, redact_secret(value, secret))
        return True


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with JSON formatting for structured logging.

    Args:
        name: The name of the logger (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, settings.log_level.upper()))

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, settings.log_level.upper()))
    handler.addFilter(SecretRedactingFilter())

    formatter = jsonlogger.JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False

    return logger
