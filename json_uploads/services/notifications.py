from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator

from ..models.notification import Notification, Severity

"""Notification queue.

Holds user-facing messages in push order until the user dismisses them;
there is no automatic expiry. Entries can be dismissed by position (the
banner index the UI shows) or by the stable id assigned at push time.
"""

__all__ = [
    "NotificationQueue",
]

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.SUCCESS: logging.INFO,
    Severity.DANGER: logging.ERROR,
}


class NotificationQueue:

    def __init__(self) -> None:
        self._entries: list[Notification] = []
        self._ids = itertools.count(1)

    def push(self, message: str, severity: Severity = Severity.INFO) -> Notification:
        """Append a message and log it (danger -> ERROR, otherwise INFO)."""
        entry = Notification(id=next(self._ids), message=message, severity=severity)
        self._entries.append(entry)
        logger.log(_LOG_LEVELS[severity], message)
        return entry

    def dismiss(self, position: int) -> Notification:
        """Remove the entry at ``position``; later entries shift down by one.

        Raises:
            IndexError: position is outside the queue.
        """
        if position < 0 or position >= len(self._entries):
            raise IndexError(f"no notification at position {position}")
        return self._entries.pop(position)

    def dismiss_id(self, notification_id: int) -> bool:
        """Remove the entry with ``notification_id``. Returns False if absent."""
        for pos, entry in enumerate(self._entries):
            if entry.id == notification_id:
                del self._entries[pos]
                return True
        return False

    def list(self) -> list[Notification]:
        return list(self._entries)

    def by_severity(self, severity: Severity) -> list[Notification]:
        return [n for n in self._entries if n.severity is severity]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Notification]:
        return iter(list(self._entries))
