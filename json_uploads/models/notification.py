from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""Notification model: a transient, severity-tagged user message."""

__all__ = [
    "Severity",
    "Notification",
]


class Severity(Enum):
    """Notification severity. Values match the banner styles of the UI."""
    INFO = "info"
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class Notification:
    """One queued message.

    ``id`` is assigned by the queue at push time and never reused, so a
    dismissal by id targets the exact entry even after other entries moved.
    The message is point-in-time text and does not track rows.
    """
    id: int
    message: str
    severity: Severity = Severity.INFO
