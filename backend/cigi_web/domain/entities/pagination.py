"""Server-computed pagination descriptor: read-only on the page layer."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PaginationData:
    current_page: int
    last_page: int
    per_page: int
    total: int
    from_: int = 0
    to: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PaginationData":
        """Build from a backend paginator payload (uses the ``from`` key)."""
        return cls(
            current_page=int(data.get("current_page", 1)),
            last_page=int(data.get("last_page", 1)),
            per_page=int(data.get("per_page", 10)),
            total=int(data.get("total", 0)),
            from_=int(data.get("from") or 0),
            to=int(data.get("to") or 0),
        )

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.last_page

    @property
    def summary(self) -> str:
        return f"Showing {self.from_} to {self.to} of {self.total} results"
