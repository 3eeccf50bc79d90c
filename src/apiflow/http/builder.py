"""Fluent builder producing ready-to-send clients."""

from collections.abc import Iterable, Mapping

import httpx

from .client import HTTPClient, Serializer, serialize_payload
from .descriptor import HeaderSet, RequestDescriptor
from .method import HTTPMethod


class HTTPClientBuilder:
    """Accumulate method, URL and headers, then build an :class:`HTTPClient`.

    Each ``with_*`` call mutates the builder and returns it, so calls chain::

        client = (
            HTTPClientBuilder()
            .with_method(HTTPMethod.POST)
            .with_url("http://127.0.0.1/items")
            .with_header("Content-Type", "application/json")
            .build()
        )

    Nothing is validated here. A bad URL only shows up as a failure when the
    request is sent.
    """

    def __init__(self):
        self.method = HTTPMethod.GET
        self.url = ""
        self.headers: HeaderSet = {}
        self.serializer: Serializer = serialize_payload
        self.transport: httpx.BaseTransport | None = None

    def with_method(self, method: HTTPMethod) -> "HTTPClientBuilder":
        self.method = method
        return self

    def with_url(self, url: str) -> "HTTPClientBuilder":
        self.url = url
        return self

    def with_header(self, key: str, value: str) -> "HTTPClientBuilder":
        """Set one header; a later value for the same key wins."""
        self.headers[key] = value
        return self

    def with_headers(
        self, headers: Mapping[str, str] | Iterable[tuple[str, str]]
    ) -> "HTTPClientBuilder":
        """Set several headers in iteration order."""
        items = headers.items() if isinstance(headers, Mapping) else headers
        for key, value in items:
            self.with_header(key, value)
        return self

    def with_serializer(self, serializer: Serializer) -> "HTTPClientBuilder":
        self.serializer = serializer
        return self

    def with_transport(self, transport: httpx.BaseTransport) -> "HTTPClientBuilder":
        self.transport = transport
        return self

    def build(self) -> HTTPClient:
        """Freeze the configuration into a descriptor and wrap it in a client."""
        descriptor = RequestDescriptor(method=self.method, url=self.url, headers=self.headers)
        return HTTPClient(descriptor, serializer=self.serializer, transport=self.transport)
