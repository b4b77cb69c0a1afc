from .edit_session import EditSession
from .export_serializer import export_all, export_row
from .import_validator import ImportValidator
from .notifications import NotificationQueue
from .record_store import RecordStore
from .workbench import Workbench

__all__ = [
    "NotificationQueue",
    "RecordStore",
    "EditSession",
    "ImportValidator",
    "export_row",
    "export_all",
    "Workbench",
]
