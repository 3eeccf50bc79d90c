"""Request executor: performs one call and normalizes what happened."""

import json
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

import httpx

from .descriptor import RequestDescriptor
from .outcome import Failure, Outcome, Success

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/json"

Serializer = Callable[[Any], str | bytes]


def serialize_payload(value: Any) -> str:
    """Encode a request payload as JSON text."""
    return json.dumps(value, allow_nan=False)


class ClientState(str, Enum):
    """Lifecycle of an HTTPClient."""

    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    COMPLETED = "completed"


class HTTPClient:
    """Synchronous HTTP client bound to a single request descriptor.

    Every call to :meth:`send` performs exactly one request and replaces
    :attr:`outcome` with a fresh :class:`Success` or :class:`Failure`.
    No exception escapes for serialization, transport, status or decode
    problems.
    """

    def __init__(
        self,
        descriptor: RequestDescriptor,
        serializer: Serializer = serialize_payload,
        transport: httpx.BaseTransport | None = None,
    ):
        self.descriptor = descriptor
        self.serializer = serializer
        self.transport = transport
        self.state = ClientState.IDLE
        self.outcome: Outcome | None = None

    def send(self, body: Any = None) -> Outcome:
        """Send the request, optionally with a payload, and return the outcome."""
        self.state = ClientState.IN_FLIGHT
        self.outcome = None
        try:
            self.outcome = self._perform(body)
        finally:
            self.state = ClientState.COMPLETED
        return self.outcome

    def _perform(self, body: Any) -> Outcome:
        content: str | bytes | None = None
        if body is not None:
            try:
                content = self.serializer(body)
                if not isinstance(content, (str, bytes)):
                    raise TypeError(
                        f"Serializer returned {type(content).__name__}, expected str or bytes"
                    )
            except Exception as e:
                logger.warning("Could not serialize request body: %s", e)
                return Failure.from_exception(e)

        method = self.descriptor.method.token
        url = self.descriptor.url
        logger.debug("Sending %s %s", method, url)

        try:
            headers = httpx.Headers(dict(self.descriptor.headers))
            if content is not None and "content-type" not in headers:
                headers["Content-Type"] = DEFAULT_CONTENT_TYPE
            with httpx.Client(transport=self.transport, follow_redirects=True) as client:
                request = client.build_request(method, url, headers=headers, content=content)
                response = client.send(request)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            return Failure.from_exception(e)

        if response.status_code != httpx.codes.OK:
            logger.warning("%s %s returned status %d", method, url, response.status_code)
            return Failure(f"HTTP Error: {response.status_code}")

        return _decode_body(response)


def _decode_body(response: httpx.Response) -> Outcome:
    """Decode a response entity strictly, without replacement characters."""
    encoding = response.charset_encoding or "utf-8"
    try:
        return Success(response.content.decode(encoding))
    except (UnicodeDecodeError, LookupError) as e:
        logger.warning("Could not decode response body as %s: %s", encoding, e)
        return Failure.from_exception(e)
