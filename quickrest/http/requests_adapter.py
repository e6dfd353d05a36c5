"""
Requests-based HTTP adapter.
"""

import logging
from typing import Optional

import requests

from .adapter import HTTPAdapter
from ..exceptions import TransportError

logger = logging.getLogger("quickrest.http")


class RequestsAdapter(HTTPAdapter):
    """
    Synchronous HTTP adapter using requests library.

    One attempt per call; the session is not mounted with any retry policy.
    A session passed in by the caller is never closed by this adapter.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize requests adapter.

        Args:
            session: Optional requests.Session instance (borrowed, not closed)
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self._external_session = session is not None
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """
        Send HTTP request using requests library.

        Raises:
            TransportError: On any requests failure (connection, timeout, protocol)
        """
        try:
            settings = self.session.merge_environment_settings(request.url, {}, None, None, None)
            return self.session.send(request, timeout=self.timeout, **settings)
        except requests.exceptions.RequestException as e:
            raise TransportError.from_exception(e) from e

    def close(self) -> None:
        """Close the session if this adapter created it."""
        if not self._external_session:
            logger.debug("Closing owned requests session")
            self.session.close()
