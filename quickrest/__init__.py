"""
quickrest

Quick and easy access to any REST or REST-like API: builds the URI, makes
one HTTP call and returns a normalized response.
"""

from quickrest.__version__ import __version__
from quickrest.client import Client
from quickrest.config import ClientConfig
from quickrest.exceptions import (
    QuickRestError,
    TransportError,
    UnsupportedMethodError,
    UriSyntaxError,
)
from quickrest.http import HTTPAdapter, RequestsAdapter
from quickrest.models import Method, Request, Response
from quickrest.uri import build_uri

__all__ = [
    "Client",
    "ClientConfig",
    "HTTPAdapter",
    "RequestsAdapter",
    "Method",
    "Request",
    "Response",
    "build_uri",
    "QuickRestError",
    "TransportError",
    "UnsupportedMethodError",
    "UriSyntaxError",
    "__version__",
]
