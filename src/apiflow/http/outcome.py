"""Result of one request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Success:
    """The server answered 200 and the body decoded to text."""

    body: str

    @property
    def ok(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return self.body


@dataclass(frozen=True)
class Failure:
    """Anything else: serialization, transport, status or decode error."""

    message: str

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", "Unknown error")

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failure":
        """Build a failure from an exception, falling back to its type name."""
        return cls(str(exc) or type(exc).__name__)

    @property
    def ok(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return self.message


Outcome = Success | Failure
