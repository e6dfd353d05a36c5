"""
Base HTTP adapter interface.
"""

from abc import ABC, abstractmethod

import requests


class HTTPAdapter(ABC):
    """
    Abstract base class for HTTP transports.

    A transport sends one prepared request and returns one raw response.
    Connection handling, TLS, redirects and timeouts all belong to the
    transport.
    """

    @abstractmethod
    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """
        Send HTTP request.

        Args:
            request: Prepared request (method, URL, headers, body)

        Returns:
            Raw response; its body may be read lazily

        Raises:
            TransportError: On network or protocol failures
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release transport resources. Default is a no-op."""
