"""
Logging helpers for quickrest

Plain-text or structured JSON output, plus header redaction for debug logs.
"""

import json
import logging
import sys
from typing import Any, Dict, Mapping

SENSITIVE_KEYS = {"authorization", "api_key", "api-key", "token", "secret", "password"}


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": int(record.created * 1000),  # milliseconds
            "name": record.name,
            "level": record.levelname,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        if hasattr(record, "method"):
            payload["method"] = record.method

        if hasattr(record, "uri"):
            payload["uri"] = record.uri

        return json.dumps(payload, default=str)


def setup_structured_logger(level: int = logging.INFO) -> None:
    """
    Configure structured JSON logging for quickrest.

    Args:
        level: Logging level (default: logging.INFO)

    Example:
        >>> from quickrest.logging_setup import setup_structured_logger
        >>> setup_structured_logger(logging.DEBUG)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    pkg_logger = logging.getLogger("quickrest")
    pkg_logger.setLevel(level)
    pkg_logger.handlers = [handler]
    pkg_logger.propagate = False


def setup_logging(debug: bool = False) -> None:
    """
    Setup plain-text logging

    Args:
        debug: Enable debug level logging
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("quickrest").setLevel(level)


def sanitize_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """
    Redact sensitive header values for logging.

    Example:
        >>> sanitize_headers({"Authorization": "Bearer abc", "Accept": "application/json"})
        {'Authorization': '***REDACTED***', 'Accept': 'application/json'}
    """
    sanitized = {}
    for key, value in headers.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value
    return sanitized
