from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..errors import ArtifactWriteError
from ..models.artifact import ExportArtifact

"""Hand exported artifacts to the local filesystem.

The content is written to a temporary file beside the target and renamed
into place, so a reader never sees a half-written export. The temporary file
is closed and removed on every failure path.
"""

__all__ = [
    "DirectorySink",
    "write_artifact",
]

logger = logging.getLogger(__name__)


def write_artifact(artifact: ExportArtifact, directory: Path) -> Path:
    """Write ``artifact`` into ``directory`` under its own filename.

    Returns:
        Path of the written file.

    Raises:
        ArtifactWriteError: directory cannot be created or file cannot be written
    """
    target = directory / artifact.filename
    tmp_path: str | None = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=f".{artifact.filename}.", suffix=".tmp", dir=directory)
        with os.fdopen(fd, "wb") as f:
            f.write(artifact.content)
        os.replace(tmp_path, target)
        tmp_path = None
    except OSError as e:
        raise ArtifactWriteError(artifact.filename, str(e)) from e
    finally:
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:  # pragma: no cover
                logger.debug(f"export: could not remove temporary file {tmp_path}")
    logger.debug(f"export: wrote {len(artifact)} bytes to {target}")
    return target


class DirectorySink:
    """Artifact sink that writes every artifact into one directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        self.written: list[Path] = []

    def __call__(self, artifact: ExportArtifact) -> Path:
        path = write_artifact(artifact, self.directory)
        self.written.append(path)
        return path
