"""
quickrest data models
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Method(str, Enum):
    """HTTP methods supported by the client"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Request(BaseModel):
    """
    Request descriptor.

    Holds everything needed to build the URI and send one call. ``method``
    is only checked against the supported verbs when dispatched through
    ``Client.api``.

    Example:
        >>> request = Request(method="GET", base_uri="api.example.com", endpoint="/v3/templates")
        >>> request.add_query_param("ids", "1&2&3")
        >>> request.add_header("Authorization", "Bearer XXXX")
    """

    method: Optional[str] = Field(None, description="HTTP method name")
    base_uri: str = Field("", description="Host, optionally with :port (e.g. 'api.example.com')")
    endpoint: str = Field("", description="Path (e.g. '/your/endpoint/path')")
    query_params: Dict[str, str] = Field(
        default_factory=dict, description="Query parameters; '&' in a value repeats the key"
    )
    headers: Dict[str, str] = Field(default_factory=dict, description="Request headers")
    body: str = Field("", description="Request body, sent as JSON text when non-empty")

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, v):
        if isinstance(v, Method):
            return v.value
        if isinstance(v, str):
            return v.upper()
        return v

    def add_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def add_query_param(self, key: str, value: str) -> None:
        self.query_params[key] = value


class Response(BaseModel):
    """Normalized response: status code, body text and headers"""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
