"""Frozen request configuration."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .method import HTTPMethod

HeaderSet = dict[str, str]


@dataclass(frozen=True)
class RequestDescriptor:
    """Method, URL and headers of one request, fixed at build time."""

    method: HTTPMethod = HTTPMethod.GET
    url: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict never leak in.
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


def parse_header(line: str) -> tuple[str, str]:
    """Split a ``Name: value`` line into a header pair."""
    if ":" not in line:
        raise ValueError(f"Invalid header {line!r}: expected 'Name: value'")
    name, value = line.split(":", 1)
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid header {line!r}: empty header name")
    return name, value.strip()
