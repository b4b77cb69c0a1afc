from __future__ import annotations

import json
from typing import Any

from ..errors import EmptyStoreError, IndexOutOfRangeError
from ..models.artifact import ExportArtifact
from .record_store import RecordStore

"""Export serialization.

Single rows go to ``user_info_<n>.json`` where n is the 1-based row number;
the whole store goes to ``all_user_info.json`` as a JSON array. Output is
deterministic for a given store state: 2-space indentation, keys in record
order, non-ASCII written as UTF-8, no trailing newline.
"""

__all__ = [
    "INDENT",
    "BULK_FILENAME",
    "row_filename",
    "serialize",
    "export_row",
    "export_all",
]

INDENT = 2
BULK_FILENAME = "all_user_info.json"


def row_filename(row_index: int) -> str:
    return f"user_info_{row_index + 1}.json"


def serialize(data: Any) -> bytes:
    return json.dumps(data, indent=INDENT, ensure_ascii=False).encode("utf-8")


def export_row(store: RecordStore, row_index: int) -> ExportArtifact:
    """Serialize one record.

    Raises:
        IndexOutOfRangeError: row_index is negative or >= len(store)
    """
    # negative indices must not wrap around to the end
    if row_index < 0 or row_index >= len(store):
        raise IndexOutOfRangeError(row_index, len(store))
    return ExportArtifact(filename=row_filename(row_index), content=serialize(store.get(row_index)))


def export_all(store: RecordStore) -> ExportArtifact:
    """Serialize every record, in order.

    Raises:
        EmptyStoreError: the store holds no records
    """
    records = store.list()
    if not records:
        raise EmptyStoreError()
    return ExportArtifact(filename=BULK_FILENAME, content=serialize(records))
