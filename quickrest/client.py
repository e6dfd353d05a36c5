"""
quickrest client
"""

import logging
import time
from http.client import HTTPException
from typing import Dict, Mapping, Optional, Union

import requests

from .config import ClientConfig
from .exceptions import TransportError, UnsupportedMethodError, UriSyntaxError
from .http.adapter import HTTPAdapter
from .http.requests_adapter import RequestsAdapter
from .logging_setup import sanitize_headers, setup_logging, setup_structured_logger
from .metrics import metrics_request
from .models import Method, Request, Response
from .uri import build_uri

logger = logging.getLogger("quickrest.client")

# Statuses that never carry a response entity
NO_ENTITY_STATUSES = (204, 304)


def _has_entity(raw: requests.Response, content: Optional[bytes]) -> bool:
    if content is None:
        return False
    if 100 <= raw.status_code < 200 or raw.status_code in NO_ENTITY_STATUSES:
        return False
    if content:
        return True
    # zero-length content is an entity only when the response framed one
    names = {name.lower() for name in raw.headers}
    return "content-length" in names or "transfer-encoding" in names


class Client:
    """
    Quick and easy access to any REST or REST-like API.

    Each call builds the URI, makes exactly one attempt through the HTTP
    adapter and returns a normalized ``Response``. Nothing is retried.

    A client constructed without ``http_adapter`` owns its ``RequestsAdapter``
    and closes it in ``close()``. An adapter passed in is borrowed and never
    closed.

    Example:
        >>> with Client() as client:
        ...     response = client.api(
        ...         Request(method="GET", base_uri="api.example.com", endpoint="/v3/templates")
        ...     )
        ...     print(response.status_code, response.body)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_adapter: Optional[HTTPAdapter] = None,
    ):
        """
        Initialize client

        Args:
            config: Client configuration (default: ClientConfig())
            http_adapter: Optional transport; borrowed, never closed by this client
        """
        self.config = config or ClientConfig()

        if self.config.debug:
            if self.config.json_logs:
                setup_structured_logger(logging.DEBUG)
            else:
                setup_logging(debug=True)

        self._owns_adapter = http_adapter is None
        self.http = (
            http_adapter if http_adapter is not None else RequestsAdapter(timeout=self.config.timeout)
        )
        self.scheme = "http" if self.config.test else "https"

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP adapter if this client created it."""
        if self._owns_adapter:
            self.http.close()

    def build_uri(
        self,
        base_uri: str,
        endpoint: str,
        query_params: Optional[Mapping[str, str]] = None,
    ) -> str:
        """
        Add query parameters to a URL.

        Args:
            base_uri: Host (e.g. "api.example.com")
            endpoint: Path (e.g. "/your/endpoint/path")
            query_params: Query parameters; "a&b" repeats the key per value

        Raises:
            UriSyntaxError: On a malformed host or query parameter
        """
        return build_uri(base_uri, endpoint, query_params, scheme=self.scheme)

    def get_response(self, raw: requests.Response) -> Response:
        """
        Normalize a raw response into status code, body and headers.

        The body is decoded as UTF-8 and is ``None`` when the response has no
        entity. Header names are copied exactly as the transport reports them.

        Raises:
            TransportError: If the entity cannot be read or decoded
        """
        try:
            content = raw.content
            if not _has_entity(raw, content):
                body = None
            else:
                body = content.decode("utf-8")
        except (requests.exceptions.RequestException, OSError, UnicodeDecodeError) as e:
            raise TransportError.from_exception(e) from e

        headers: Dict[str, str] = {}
        for name, value in raw.headers.items():
            headers[name] = value

        return Response(status_code=raw.status_code, body=body, headers=headers)

    def execute(
        self,
        method: Union[Method, str],
        uri: str,
        headers: Optional[Mapping[str, str]] = None,
        body: str = "",
    ) -> Response:
        """
        Make one HTTP call and normalize the result.

        A non-empty body is sent as UTF-8 with ``Content-Type: application/json``.

        Raises:
            UnsupportedMethodError: If method is not GET, POST, PUT, PATCH or DELETE
            UriSyntaxError: If the URI is not an absolute http(s) URI
            TransportError: On network, protocol or entity errors
        """
        method = self._resolve_method(method)

        try:
            prepared = requests.Request(
                method.value,
                uri,
                headers=dict(headers or {}),
                data=body.encode("utf-8", errors="replace") if body else None,
            ).prepare()
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as e:
            raise UriSyntaxError(str(e)) from e
        except requests.exceptions.RequestException as e:
            raise TransportError.from_exception(e) from e
        if body:
            prepared.headers["Content-Type"] = "application/json"

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s %s headers=%s",
                method.value,
                uri,
                sanitize_headers(prepared.headers),
                extra={"method": method.value, "uri": uri},
            )

        start = time.time()
        try:
            response = self.get_response(self.http.send(prepared))
        except (OSError, HTTPException) as e:
            metrics_request(method.value, "error", time.time() - start)
            logger.warning(
                "%s %s failed: %s", method.value, uri, e, extra={"method": method.value, "uri": uri}
            )
            if isinstance(e, TransportError):
                raise
            raise TransportError.from_exception(e) from e

        metrics_request(method.value, response.status_code, time.time() - start)
        logger.debug(
            "Response (%d) for %s %s",
            response.status_code,
            method.value,
            uri,
            extra={"method": method.value, "uri": uri},
        )
        return response

    def get(self, request: Request) -> Response:
        """Make a GET request. The request body is never sent."""
        uri = self.build_uri(request.base_uri, request.endpoint, request.query_params)
        return self.execute(Method.GET, uri, request.headers)

    def post(self, request: Request) -> Response:
        """Make a POST request"""
        return self._call(Method.POST, request)

    def put(self, request: Request) -> Response:
        """Make a PUT request"""
        return self._call(Method.PUT, request)

    def patch(self, request: Request) -> Response:
        """Make a PATCH request"""
        return self._call(Method.PATCH, request)

    def delete(self, request: Request) -> Response:
        """Make a DELETE request"""
        return self._call(Method.DELETE, request)

    def api(self, request: Request) -> Response:
        """
        A thin wrapper around the HTTP methods.

        Dispatches on ``request.method``.

        Raises:
            UnsupportedMethodError: If the method is unset or unrecognized
            UriSyntaxError: On a malformed host or query parameter
            TransportError: On network, protocol or entity errors
        """
        method = self._resolve_method(request.method)
        handlers = {
            Method.GET: self.get,
            Method.POST: self.post,
            Method.PUT: self.put,
            Method.PATCH: self.patch,
            Method.DELETE: self.delete,
        }
        return handlers[method](request)

    def _call(self, method: Method, request: Request) -> Response:
        uri = self.build_uri(request.base_uri, request.endpoint, request.query_params)
        return self.execute(method, uri, request.headers, request.body)

    @staticmethod
    def _resolve_method(method: Union[Method, str, None]) -> Method:
        if isinstance(method, Method):
            return method
        if not isinstance(method, str):
            raise UnsupportedMethodError(method)
        try:
            return Method(method.upper())
        except ValueError:
            raise UnsupportedMethodError(method) from None
