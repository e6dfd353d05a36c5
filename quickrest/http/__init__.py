"""
HTTP transports for quickrest.
"""

from .adapter import HTTPAdapter
from .requests_adapter import RequestsAdapter

__all__ = ["HTTPAdapter", "RequestsAdapter"]
