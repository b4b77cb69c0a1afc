from __future__ import annotations

import logging

from ..errors import EditInProgressError

"""Single-row edit session.

States: Idle (``editing_row is None``) and Editing(row). Field changes are
written straight through to the record store, so leaving edit mode ("Save")
commits nothing; it only ends the mode. Switching rows directly loses no data
for the same reason.
"""

__all__ = [
    "EditSession",
]

logger = logging.getLogger(__name__)


class EditSession:

    def __init__(self) -> None:
        self._editing_row: int | None = None

    @property
    def editing_row(self) -> int | None:
        return self._editing_row

    @property
    def is_editing(self) -> bool:
        return self._editing_row is not None

    def is_editing_row(self, row_index: int) -> bool:
        return self._editing_row == row_index

    def start_edit(self, row_index: int) -> None:
        """Enter Editing(row_index) from any state."""
        if self._editing_row is not None and self._editing_row != row_index:
            logger.debug(f"edit: switching from row {self._editing_row} to row {row_index}")
        self._editing_row = row_index

    def finish_edit(self) -> None:
        """Return to Idle. No-op when already Idle."""
        self._editing_row = None

    def row_removed(self, row_index: int) -> None:
        """Keep the session consistent after row ``row_index`` was deleted.

        A session on the deleted row or on any later row (whose index just
        shifted) ends; a session on an earlier row still points at the same
        record and is kept.
        """
        if self._editing_row is not None and self._editing_row >= row_index:
            logger.debug(f"edit: row {self._editing_row} ended by deletion of row {row_index}")
            self._editing_row = None

    def ensure_idle(self) -> None:
        """Raise EditInProgressError while any row is being edited."""
        if self._editing_row is not None:
            raise EditInProgressError(self._editing_row)
