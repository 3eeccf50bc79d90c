"""Request builder and client for apiflow."""

from .builder import HTTPClientBuilder
from .client import DEFAULT_CONTENT_TYPE, ClientState, HTTPClient, serialize_payload
from .descriptor import HeaderSet, RequestDescriptor, parse_header
from .method import HTTPMethod
from .outcome import Failure, Outcome, Success

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "ClientState",
    "Failure",
    "HTTPClient",
    "HTTPClientBuilder",
    "HTTPMethod",
    "HeaderSet",
    "Outcome",
    "RequestDescriptor",
    "Success",
    "parse_header",
    "serialize_payload",
]
