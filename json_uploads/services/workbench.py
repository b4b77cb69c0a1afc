from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..errors import JsonUploadsError, NotEditingError
from ..models.artifact import ExportArtifact
from ..models.config_models import AppConfig
from ..models.import_result import ImportResult
from ..models.notification import Notification, Severity
from ..models.uploaded_file import UploadedFile
from .edit_session import EditSession
from .export_serializer import export_all, export_row
from .import_validator import ImportValidator, Reader
from .notifications import NotificationQueue
from .progress import ProgressTracker
from .record_store import Record, RecordStore

"""Workbench: the user-facing operations of the JSON uploads tool.

Owns one record store, one edit session and one notification queue, and
exposes the intents a presentation layer forwards: upload, edit, change a
field, save, delete, download a row, download everything, dismiss a message.

Errors raised by the components are caught here, turned into danger
notifications, and the action is abandoned with the store unchanged. Nothing
in here is fatal.
"""

__all__ = [
    "ArtifactSink",
    "Workbench",
    "DELETE_SUCCESS_MESSAGE",
]

logger = logging.getLogger(__name__)

ArtifactSink = Callable[[ExportArtifact], Any]

DELETE_SUCCESS_MESSAGE = "Row deleted successfully!"


class Workbench:

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        sink: ArtifactSink | None = None,
        reader: Reader | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.store = RecordStore()
        self.session = EditSession()
        self.notifications = NotificationQueue()
        self.importer = ImportValidator(
            self.store,
            self.notifications,
            accepted_content_types=self.config.accepted_content_types,
            max_concurrent_reads=self.config.max_concurrent_reads,
            reader=reader,
        )
        self._sink = sink

    # --- read views -------------------------------------------------------

    @property
    def records(self) -> list[Record]:
        return self.store.list()

    @property
    def editing_row(self) -> int | None:
        return self.session.editing_row

    def list_notifications(self) -> list[Notification]:
        return self.notifications.list()

    # --- upload -----------------------------------------------------------

    async def upload(
        self, files: Iterable[UploadedFile], progress: ProgressTracker | None = None
    ) -> ImportResult:
        result = await self.importer.import_files(files, progress=progress)
        logger.info(f"upload: {result.accepted} accepted, {result.rejected} rejected, rows={len(self.store)}")
        return result

    # --- edit session -----------------------------------------------------

    def start_edit(self, row_index: int) -> bool:
        try:
            self.store.get(row_index)
        except JsonUploadsError as e:
            self._fail(e)
            return False
        self.session.start_edit(row_index)
        return True

    def change_field(self, row_index: int, key: str, value: str) -> bool:
        """Write one field of the row being edited straight to the store."""
        try:
            if not self.session.is_editing_row(row_index):
                raise NotEditingError(row_index)
            self.store.replace_field(row_index, key, value)
        except JsonUploadsError as e:
            self._fail(e)
            return False
        return True

    def save(self) -> None:
        """Leave edit mode. Changes are already in the store."""
        self.session.finish_edit()

    # --- destructive / export actions -------------------------------------

    def delete_row(self, row_index: int) -> bool:
        try:
            self._guard_row_action()
            self.store.remove(row_index)
        except JsonUploadsError as e:
            self._fail(e)
            return False
        self.session.row_removed(row_index)
        self.notifications.push(DELETE_SUCCESS_MESSAGE, Severity.SUCCESS)
        return True

    def download_row(self, row_index: int) -> ExportArtifact | None:
        try:
            self._guard_row_action()
            artifact = export_row(self.store, row_index)
            self._deliver(artifact)
        except JsonUploadsError as e:
            self._fail(e)
            return None
        self.notifications.push(f"File downloaded successfully: {artifact.filename}", Severity.SUCCESS)
        return artifact

    def download_all(self) -> ExportArtifact | None:
        try:
            artifact = export_all(self.store)
            self._deliver(artifact)
        except JsonUploadsError as e:
            self._fail(e)
            return None
        self.notifications.push(f"All data downloaded successfully: {artifact.filename}", Severity.SUCCESS)
        return artifact

    def dismiss(self, position: int) -> Notification | None:
        """Remove the notification at ``position``; None if there is none."""
        try:
            return self.notifications.dismiss(position)
        except IndexError:
            logger.debug(f"dismiss: no notification at position {position}")
            return None

    # --- helpers ----------------------------------------------------------

    def _guard_row_action(self) -> None:
        if self.config.lock_rows_while_editing:
            self.session.ensure_idle()

    def _deliver(self, artifact: ExportArtifact) -> None:
        if self._sink is not None:
            self._sink(artifact)

    def _fail(self, error: JsonUploadsError) -> None:
        logger.debug(f"action rejected: {error.code}")
        self.notifications.push(error.message, Severity.DANGER)
