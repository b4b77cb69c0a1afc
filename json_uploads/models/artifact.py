from __future__ import annotations

from dataclasses import dataclass

"""ExportArtifact: a generated, downloadable JSON file."""

__all__ = [
    "ExportArtifact",
]


@dataclass(frozen=True)
class ExportArtifact:
    filename: str  # user_info_<n>.json or all_user_info.json
    content: bytes  # UTF-8 encoded JSON text
    media_type: str = "application/json"

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def __len__(self) -> int:
        return len(self.content)
