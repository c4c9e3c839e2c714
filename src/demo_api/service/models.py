"""Response models for the demo API.

Frozen dataclasses with explicit ``to_dict()`` so the wire shape
(camelCase ``createdAt``, ISO timestamps) is spelled out in one place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from demo_api.clock import format_timestamp

# Id echoed back for every created user; nothing is stored.
CREATED_USER_ID = 3


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: Any
    email: Any
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "email": self.email}
        if self.created_at is not None:
            data["createdAt"] = format_timestamp(self.created_at)
        return data


@dataclass(frozen=True, slots=True)
class HealthStatus:
    timestamp: datetime
    status: str = "healthy"

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "timestamp": format_timestamp(self.timestamp)}


@dataclass(frozen=True, slots=True)
class SumResult:
    a: int
    b: int

    @property
    def sum(self) -> int:
        return self.a + self.b

    def to_dict(self) -> dict[str, int]:
        return {"a": self.a, "b": self.b, "sum": self.sum}


FIXED_USERS: tuple[User, ...] = (
    User(id=1, name="John", email="john@example.com"),
    User(id=2, name="Jane", email="jane@example.com"),
)
