from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

"""Import result models.

An ImportOutcome is recorded for every file of an upload batch; the
ImportResult aggregates them for the SUMMARY line and for callers that want
more than the notifications.
"""

__all__ = [
    "ImportStatus",
    "ImportOutcome",
    "ImportResult",
]


class ImportStatus(Enum):
    """Final per-file status of an import."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ImportOutcome:
    file_name: str
    status: ImportStatus
    error_type: str | None = None  # UPPER_SNAKE error code when rejected
    message: str | None = None  # Notification text when rejected


@dataclass(frozen=True)
class ImportResult:
    """Aggregated outcome of one upload batch.

    ``outcomes`` is in completion order, which is also the order accepted
    records were appended to the store.
    """
    outcomes: list[ImportOutcome] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def accepted(self) -> int:
        return sum(1 for o in self.outcomes if o.status is ImportStatus.ACCEPTED)

    @property
    def rejected(self) -> int:
        return sum(1 for o in self.outcomes if o.status is ImportStatus.REJECTED)

    @property
    def total(self) -> int:
        return len(self.outcomes)
