from __future__ import annotations

"""Error taxonomy for the JSON uploads workbench.

Every core error is recoverable: the workbench catches it where the user
action started, turns ``message`` into a danger notification and abandons the
action with the record store unchanged. ``code`` is an UPPER_SNAKE
classification used in logs and import outcomes.
"""

__all__ = [
    "JsonUploadsError",
    "ImportValidationError",
    "InvalidFileTypeError",
    "JSONParseError",
    "NotAnObjectError",
    "EmptyValueError",
    "IndexOutOfRangeError",
    "UnknownFieldError",
    "EmptyStoreError",
    "EditInProgressError",
    "NotEditingError",
    "ArtifactWriteError",
]


class JsonUploadsError(Exception):
    """Base class for all recoverable core errors.

    Attributes:
        code: Error classification in UPPER_SNAKE_CASE
        message: User-facing text (becomes the notification message)
    """

    code = "JSON_UPLOADS_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# --- import ---------------------------------------------------------------

class ImportValidationError(JsonUploadsError):
    """A single uploaded file was rejected. Carries the file name."""

    code = "IMPORT_VALIDATION_ERROR"

    def __init__(self, filename: str, message: str) -> None:
        self.filename = filename
        super().__init__(message)


class InvalidFileTypeError(ImportValidationError):
    code = "INVALID_FILE_TYPE"

    def __init__(self, filename: str, content_type: str | None = None) -> None:
        self.content_type = content_type
        super().__init__(filename, f"File '{filename}' is not a valid JSON file.")


class JSONParseError(ImportValidationError):
    code = "JSON_PARSE_ERROR"

    def __init__(self, filename: str, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(filename, f"Error parsing JSON file '{filename}'.")


class NotAnObjectError(ImportValidationError):
    code = "NOT_AN_OBJECT"

    def __init__(self, filename: str) -> None:
        super().__init__(filename, f"File '{filename}' does not contain a JSON object.")


class EmptyValueError(ImportValidationError):
    code = "EMPTY_VALUE"

    def __init__(self, filename: str, fields: list[str] | None = None) -> None:
        self.fields = fields or []
        super().__init__(
            filename,
            f"File '{filename}' contains empty values. Please upload a file with non-empty values.",
        )


# --- store / export -------------------------------------------------------

class IndexOutOfRangeError(JsonUploadsError, IndexError):
    code = "INDEX_OUT_OF_RANGE"

    def __init__(self, row_index: int, length: int) -> None:
        self.row_index = row_index
        self.length = length
        super().__init__("Invalid row index.")


class UnknownFieldError(JsonUploadsError, KeyError):
    """Edits may change values only; a record's key set never grows."""

    code = "UNKNOWN_FIELD"

    def __init__(self, row_index: int, key: str) -> None:
        self.row_index = row_index
        self.key = key
        super().__init__(f"Row {row_index + 1} has no field '{key}'.")

    def __str__(self) -> str:  # KeyError would repr() the message
        return self.message


class EmptyStoreError(JsonUploadsError):
    code = "EMPTY_STORE"

    def __init__(self) -> None:
        super().__init__("No data to download.")


# --- edit session ---------------------------------------------------------

class EditInProgressError(JsonUploadsError):
    code = "EDIT_IN_PROGRESS"

    def __init__(self, editing_row: int) -> None:
        self.editing_row = editing_row
        super().__init__("Finish editing before deleting or downloading a row.")


class NotEditingError(JsonUploadsError):
    code = "NOT_EDITING"

    def __init__(self, row_index: int) -> None:
        self.row_index = row_index
        super().__init__(f"Row {row_index + 1} is not being edited.")


# --- artifact delivery ----------------------------------------------------

class ArtifactWriteError(JsonUploadsError):
    code = "ARTIFACT_WRITE_ERROR"

    def __init__(self, filename: str, detail: str | None = None) -> None:
        self.filename = filename
        self.detail = detail
        super().__init__(f"Could not save file '{filename}'.")
