"""
Configuration module for quickrest.
"""

import os
from typing import Optional

from pydantic import BaseModel, Field

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


class ClientConfig(BaseModel):
    """
    Client configuration.

    Supports environment variables through ``from_env``:
    - QUICKREST_TEST: use http instead of https (default: off)
    - QUICKREST_DEBUG: enable debug logging (default: off)
    - QUICKREST_JSON_LOGS: log as JSON when debug is on (default: off)
    - QUICKREST_TIMEOUT: request timeout in seconds (default: none)
    """

    test: bool = Field(False, description="Use plain http instead of https")
    debug: bool = Field(False, description="Enable debug logging")
    json_logs: bool = Field(False, description="Structured JSON logs when debug is enabled")
    timeout: Optional[float] = Field(
        None, gt=0, description="Timeout in seconds for the default transport"
    )

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build configuration from QUICKREST_* environment variables.

        Raises:
            pydantic.ValidationError: If QUICKREST_TIMEOUT is not a positive number
        """
        return cls(
            test=_env_flag("QUICKREST_TEST"),
            debug=_env_flag("QUICKREST_DEBUG"),
            json_logs=_env_flag("QUICKREST_JSON_LOGS"),
            timeout=os.getenv("QUICKREST_TIMEOUT") or None,
        )
