from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class User:
    """User record accepted for creation; fields other than ``phone`` are opaque."""

    phone: str
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class CreationResult:
    """Acknowledgement returned by the Postgres collaborator after an upsert."""

    acknowledged: bool
    matched_count: int
    modified_count: int
    upserted_id: str | None = None
