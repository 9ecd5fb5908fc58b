"""Domain-level request and response contracts shared by multiple layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from .user import User

INVALID_REQUEST_MESSAGE = "Invalid request data"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class UserStore(Protocol):
    """Persistence collaborator able to store a user record."""

    def create_user(self, user: User) -> Any: ...


@dataclass(slots=True)
class UserCreateRequest:
    """Inputs required to create a user within a category."""

    category: str
    user: User
    source: str = "api"


@dataclass(slots=True)
class PersistenceFailure:
    """Explicit failure value produced when the persistence collaborator errors."""

    reason: str
    error: BaseException | None = field(default=None, repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "PersistenceFailure":
        return cls(reason=type(exc).__name__, error=exc)


@dataclass(slots=True)
class ResponseEnvelope:
    """Status code plus JSON-ready body returned for one creation request."""

    status_code: int
    body: dict[str, Any]

    @classmethod
    def created(cls, result: Any, category: str, source: str) -> "ResponseEnvelope":
        return cls(201, {"result": result, "category": category, "source": source})

    @classmethod
    def rejected(cls, category: str, source: str) -> "ResponseEnvelope":
        return cls(400, {"error": INVALID_REQUEST_MESSAGE, "category": category, "source": source})

    @classmethod
    def failed(cls) -> "ResponseEnvelope":
        return cls(500, {"error": UNEXPECTED_ERROR_MESSAGE})
