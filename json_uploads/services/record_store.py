from __future__ import annotations

import copy
import threading
from collections.abc import Mapping
from typing import Any

from ..errors import IndexOutOfRangeError, UnknownFieldError

"""Record store: the ordered, in-memory collection of imported rows.

A record is an ordered ``dict`` of field name -> value, shaped by whatever the
uploaded JSON object contained. Row position is meaningful (it is the 1-based
number in single-row export filenames) and shifts down on delete.

Every mutation runs under one lock, so uploads completing concurrently each
append to the live list and none of them can overwrite another.
"""

__all__ = [
    "Record",
    "RecordStore",
]

Record = dict[str, Any]


class RecordStore:

    def __init__(self, records: list[Mapping[str, Any]] | None = None) -> None:
        self._records: list[Record] = [dict(r) for r in (records or [])]
        self._lock = threading.RLock()

    def append(self, record: Mapping[str, Any]) -> int:
        """Append a copy of ``record`` and return its row index."""
        with self._lock:
            self._records.append(copy.deepcopy(dict(record)))
            return len(self._records) - 1

    def replace_field(self, row_index: int, key: str, value: Any) -> None:
        """Set one existing field of one record; key order is unchanged.

        Raises:
            IndexOutOfRangeError: row_index outside [0, len)
            UnknownFieldError: key is not a field of that record
        """
        with self._lock:
            self._check_index(row_index)
            record = self._records[row_index]
            if key not in record:
                raise UnknownFieldError(row_index, key)
            record[key] = value

    def remove(self, row_index: int) -> Record:
        """Delete a row, shifting later rows down by one; returns the removed record."""
        with self._lock:
            self._check_index(row_index)
            return self._records.pop(row_index)

    def get(self, row_index: int) -> Record:
        with self._lock:
            self._check_index(row_index)
            return copy.deepcopy(self._records[row_index])

    def list(self) -> list[Record]:
        """Snapshot of all records in order. Later mutations do not affect it."""
        with self._lock:
            return copy.deepcopy(self._records)

    def _check_index(self, row_index: int) -> None:
        # bool is an int; True would silently address row 1
        if isinstance(row_index, bool) or row_index < 0 or row_index >= len(self._records):
            raise IndexOutOfRangeError(row_index, len(self._records))

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __bool__(self) -> bool:
        return len(self) > 0
