"""
Exception classes for quickrest.
"""


class QuickRestError(Exception):
    """Base exception for all quickrest errors."""

    pass


class UriSyntaxError(QuickRestError, ValueError):
    """
    Malformed host, path or query parameters.

    Raised while building the URI, before any network attempt.
    """

    pass


class TransportError(QuickRestError, OSError):
    """
    Network, protocol or entity-parsing failure during an HTTP exchange.

    Wraps whatever the transport raised; the original exception is kept
    as ``__cause__``.
    """

    @classmethod
    def from_exception(cls, exc: BaseException) -> "TransportError":
        """Create TransportError carrying the message of ``exc``."""
        message = str(exc) or exc.__class__.__name__
        error = cls(message)
        error.__cause__ = exc
        return error


class UnsupportedMethodError(QuickRestError, ValueError):
    """Request method is unset or not one of GET, POST, PUT, PATCH, DELETE."""

    def __init__(self, method=None):
        super().__init__("We only support GET, PUT, PATCH, POST and DELETE.")
        self.method = method
