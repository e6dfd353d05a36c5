"""
Test helpers: raw responses and a recording HTTP adapter.
"""

from typing import Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from quickrest.http.adapter import HTTPAdapter

SUCCESS_BODY = '{"message":"success"}'


def make_raw_response(
    status_code: int = 200,
    content: Optional[bytes] = SUCCESS_BODY.encode("utf-8"),
    headers: Optional[Mapping[str, str]] = None,
) -> requests.Response:
    """Build a raw requests.Response without touching the network."""
    raw = requests.Response()
    raw.status_code = status_code
    raw._content = content
    raw.headers = CaseInsensitiveDict(headers if headers is not None else {"headerA": "valueA"})
    return raw


class DummyAdapter(HTTPAdapter):
    """Mock HTTP adapter for testing."""

    def __init__(
        self,
        response: Optional[requests.Response] = None,
        error: Optional[BaseException] = None,
    ):
        self.response = response if response is not None else make_raw_response()
        self.error = error
        self.requests = []
        self.closed = False

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.requests[-1]

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """Record the request and return the canned response."""
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True
