"""JSON uploads workbench.

Import JSON documents as rows of an in-memory table, edit or delete rows,
and export single rows or the whole table back to JSON files.
"""

from .models import AppConfig, ExportArtifact, Notification, Severity, UploadedFile
from .services import Workbench

__all__ = [
    "AppConfig",
    "ExportArtifact",
    "Notification",
    "Severity",
    "UploadedFile",
    "Workbench",
]

__version__ = "0.1.0"
