from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable, Iterable
from datetime import UTC, datetime
from typing import Any

from ..errors import (
    EmptyValueError,
    ImportValidationError,
    InvalidFileTypeError,
    JSONParseError,
    NotAnObjectError,
)
from ..models.config_models import DEFAULT_CONTENT_TYPES
from ..models.import_result import ImportOutcome, ImportResult, ImportStatus
from ..models.notification import Severity
from ..models.uploaded_file import UploadedFile
from .notifications import NotificationQueue
from .progress import ProgressTracker
from .record_store import Record, RecordStore

"""Import validation for uploaded JSON files.

Each file goes through the same steps, and the first failing step rejects it:

1. declared content type must be accepted (the file is not read otherwise)
2. content must decode as UTF-8 and parse as JSON
3. the top-level value must be a JSON object
4. no value of that object may be the empty string

Accepted objects are appended to the record store as soon as their own read
completes. All reads of a batch start together, and any of them may finish
first, so each completion appends to the live store under its lock. A stale
copy of the store is never written back. One rejected file never affects
the others.
"""

__all__ = [
    "NO_FILES_MESSAGE",
    "Reader",
    "check_content_type",
    "parse_record",
    "ImportValidator",
]

logger = logging.getLogger(__name__)

NO_FILES_MESSAGE = "Please select at least one file."

Reader = Callable[[UploadedFile], Awaitable[bytes]]


async def _thread_reader(upload: UploadedFile) -> bytes:
    return await asyncio.to_thread(upload.read_bytes)


def _reject_constant(token: str) -> Any:
    # Python's json accepts NaN / Infinity; strict JSON does not
    raise ValueError(f"invalid JSON constant: {token}")


def check_content_type(upload: UploadedFile, accepted: Iterable[str] = DEFAULT_CONTENT_TYPES) -> None:
    """Raise InvalidFileTypeError unless the declared type is accepted."""
    if upload.content_type not in set(accepted):
        raise InvalidFileTypeError(upload.name, upload.content_type)


def parse_record(filename: str, raw: bytes | str) -> Record:
    """Decode, parse and validate one uploaded document.

    Returns:
        The parsed object with its key order preserved.

    Raises:
        JSONParseError: not UTF-8 or not valid JSON (including nesting too deep to decode)
        NotAnObjectError: valid JSON whose top level is not an object
        EmptyValueError: some value is exactly ""
    """
    try:
        text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
        data = json.loads(text, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError; very deep nesting overflows the decoder
        raise JSONParseError(filename, str(e)) from e

    if not isinstance(data, dict):
        raise NotAnObjectError(filename)

    empty = [key for key, value in data.items() if value == ""]
    if empty:
        raise EmptyValueError(filename, empty)
    return data


class ImportValidator:
    """Validate a batch of uploads and append accepted records to the store.

    Rejections are turned into danger notifications here, one per file.
    """

    def __init__(
        self,
        store: RecordStore,
        notifications: NotificationQueue,
        *,
        accepted_content_types: Iterable[str] = DEFAULT_CONTENT_TYPES,
        max_concurrent_reads: int = 8,
        reader: Reader | None = None,
    ) -> None:
        if max_concurrent_reads < 1:
            raise ValueError("max_concurrent_reads must be >= 1")
        self._store = store
        self._notifications = notifications
        self._accepted = tuple(accepted_content_types)
        self._max_concurrent_reads = max_concurrent_reads
        self._reader: Reader = reader or _thread_reader

    async def import_files(
        self,
        files: Iterable[UploadedFile],
        progress: ProgressTracker | None = None,
    ) -> ImportResult:
        """Import every file of one selection concurrently.

        Args:
            files: The uploaded files, in selection order
            progress: Optional tracker advanced as each file completes

        Returns:
            ImportResult whose outcomes are in completion order
        """
        uploads = list(files)
        start_time = datetime.now(UTC)
        if not uploads:
            self._notifications.push(NO_FILES_MESSAGE, Severity.DANGER)
            return ImportResult(outcomes=[], elapsed_seconds=0.0)

        logger.debug(f"import: starting {len(uploads)} file(s)")
        semaphore = asyncio.Semaphore(self._max_concurrent_reads)
        outcomes: list[ImportOutcome] = []
        tasks = [self._import_one(upload, semaphore, outcomes, progress) for upload in uploads]
        await asyncio.gather(*tasks)

        elapsed = (datetime.now(UTC) - start_time).total_seconds()
        result = ImportResult(outcomes=outcomes, elapsed_seconds=elapsed)
        logger.debug(f"import: accepted={result.accepted} rejected={result.rejected}")
        return result

    async def _import_one(
        self,
        upload: UploadedFile,
        semaphore: asyncio.Semaphore,
        outcomes: list[ImportOutcome],
        progress: ProgressTracker | None,
    ) -> None:
        if progress is not None:
            progress.start_file(upload.name)
        try:
            check_content_type(upload, self._accepted)
            async with semaphore:
                raw = await self._read(upload)
            # no await from here on: validate-then-append runs as one step
            record = parse_record(upload.name, raw)
        except ImportValidationError as e:
            logger.debug(f"import: rejected {upload.name} ({e.code})")
            self._notifications.push(e.message, Severity.DANGER)
            outcome = ImportOutcome(
                file_name=upload.name,
                status=ImportStatus.REJECTED,
                error_type=e.code,
                message=e.message,
            )
        else:
            row_index = self._store.append(record)
            logger.debug(f"import: {upload.name} -> row {row_index + 1}")
            outcome = ImportOutcome(file_name=upload.name, status=ImportStatus.ACCEPTED)
        outcomes.append(outcome)
        if progress is not None:
            progress.finish_file(success=outcome.status is ImportStatus.ACCEPTED)

    async def _read(self, upload: UploadedFile) -> bytes:
        try:
            return await self._reader(upload)
        except OSError as e:
            raise JSONParseError(upload.name, str(e)) from e
