from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path

"""UploadedFile domain model.

An uploaded file as the host hands it over: a display name, the declared
content type and the content itself. Content is either held in memory or
read lazily from ``path``; reading happens on a worker thread so that many
uploads can be in flight at once.
"""

__all__ = [
    "UploadedFile",
]


@dataclass(frozen=True)
class UploadedFile:
    name: str  # Display name used in notifications
    content_type: str | None  # Declared MIME type (None = unknown)
    content: bytes | None = None  # In-memory content
    path: Path | None = None  # Backing file when content is not in memory

    def __post_init__(self) -> None:
        if self.content is None and self.path is None:
            raise ValueError(f"upload '{self.name}' has neither content nor path")

    @classmethod
    def from_path(cls, path: Path | str) -> UploadedFile:
        """Build an upload from a local file, guessing the type from its extension."""
        p = Path(path)
        content_type, _ = mimetypes.guess_type(p.name)
        return cls(name=p.name, content_type=content_type, path=p)

    @classmethod
    def from_text(cls, name: str, text: str, content_type: str | None = "application/json") -> UploadedFile:
        return cls(name=name, content_type=content_type, content=text.encode("utf-8"))

    def read_bytes(self) -> bytes:
        """Return the raw content. Blocking; run it off the event loop."""
        if self.content is not None:
            return self.content
        return self.path.read_bytes()  # type: ignore[union-attr]  # set when content is None
