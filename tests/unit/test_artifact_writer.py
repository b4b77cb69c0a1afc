from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from json_uploads.errors import ArtifactWriteError
from json_uploads.models.artifact import ExportArtifact
from json_uploads.services.artifact_writer import DirectorySink, write_artifact


def test_write_artifact_creates_directory_and_file(tmp_path: Path):
    artifact = ExportArtifact("user_info_1.json", b'{\n  "a": "1"\n}')
    path = write_artifact(artifact, tmp_path / "out" / "nested")
    assert path == tmp_path / "out" / "nested" / "user_info_1.json"
    assert path.read_bytes() == artifact.content
    # no temporary file left behind
    assert [p.name for p in path.parent.iterdir()] == ["user_info_1.json"]


def test_write_artifact_overwrites_previous_export(tmp_path: Path):
    write_artifact(ExportArtifact("all_user_info.json", b"[]"), tmp_path)
    write_artifact(ExportArtifact("all_user_info.json", b"[1]"), tmp_path)
    assert (tmp_path / "all_user_info.json").read_bytes() == b"[1]"


def test_failed_write_removes_temporary_file(tmp_path: Path):
    artifact = ExportArtifact("user_info_1.json", b"{}")
    with patch("json_uploads.services.artifact_writer.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(ArtifactWriteError) as e:
            write_artifact(artifact, tmp_path)
    assert e.value.filename == "user_info_1.json"
    assert "disk full" in (e.value.detail or "")
    assert os.listdir(tmp_path) == []


def test_directory_that_is_a_file_raises(tmp_path: Path):
    blocker = tmp_path / "exports"
    blocker.write_text("x")
    with pytest.raises(ArtifactWriteError):
        write_artifact(ExportArtifact("user_info_1.json", b"{}"), blocker)


def test_directory_sink_records_written_paths(tmp_path: Path):
    sink = DirectorySink(tmp_path)
    sink(ExportArtifact("a.json", b"{}"))
    sink(ExportArtifact("b.json", b"{}"))
    assert [p.name for p in sink.written] == ["a.json", "b.json"]
