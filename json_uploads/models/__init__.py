"""Domain models for the JSON uploads workbench."""

from .artifact import ExportArtifact
from .config_models import AppConfig
from .import_result import ImportOutcome, ImportResult, ImportStatus
from .notification import Notification, Severity
from .uploaded_file import UploadedFile

__all__ = [
    # Configuration
    "AppConfig",
    # Import
    "UploadedFile",
    "ImportStatus",
    "ImportOutcome",
    "ImportResult",
    # Notifications
    "Notification",
    "Severity",
    # Export
    "ExportArtifact",
]
