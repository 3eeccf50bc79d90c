"""HTTP method enumeration."""

from enum import Enum
from typing import assert_never


class HTTPMethod(str, Enum):
    """Request methods the client can send."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @property
    def token(self) -> str:
        """Return the uppercase token used on the request line."""
        match self:
            case HTTPMethod.GET:
                return "GET"
            case HTTPMethod.POST:
                return "POST"
            case HTTPMethod.PUT:
                return "PUT"
            case HTTPMethod.DELETE:
                return "DELETE"
            case HTTPMethod.PATCH:
                return "PATCH"
            case HTTPMethod.HEAD:
                return "HEAD"
            case HTTPMethod.OPTIONS:
                return "OPTIONS"
            case _:
                assert_never(self)

    def __str__(self) -> str:
        return self.token

    @classmethod
    def parse(cls, text: str) -> "HTTPMethod":
        """Parse a method name case-insensitively."""
        name = text.strip().upper()
        try:
            return cls[name]
        except KeyError:
            choices = ", ".join(member.token for member in cls)
            raise ValueError(f"Unknown HTTP method: {text!r} (expected one of {choices})") from None
