# Shared pytest fixtures
from __future__ import annotations

import asyncio
import json
import logging
import tempfile
from collections.abc import Iterable
from pathlib import Path

import pytest

from json_uploads.logging.init import LOGGER_NAME, reset_logging
from json_uploads.models.uploaded_file import UploadedFile
from json_uploads.services.workbench import Workbench

USERS = [
    {"name": "Alice Tanaka", "email": "alice@example.com", "number": "555-0101"},
    {"name": "Bob Weber", "email": "bob@example.com", "number": "555-0102"},
    {"name": "Chiara Silva", "email": "chiara@example.com", "number": "555-0103"},
]


@pytest.fixture(autouse=True)
def _fresh_logging():
    # each test gets a handler bound to its own captured stdout
    reset_logging()
    yield
    reset_logging()
    app_logger = logging.getLogger(LOGGER_NAME)
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """output_directory: ./exports
accepted_content_types:
  - application/json
max_concurrent_reads: 4
lock_rows_while_editing: true
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "uploads.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def user_files(temp_workdir: Path) -> list[Path]:
    files = []
    for n, user in enumerate(USERS, start=1):
        f = temp_workdir / "data" / f"user_{n}.json"
        f.write_text(json.dumps(user, indent=2), encoding="utf-8")
        files.append(f)
    return files


def json_upload(name: str, data: object, content_type: str | None = "application/json") -> UploadedFile:
    return UploadedFile.from_text(name, json.dumps(data), content_type=content_type)


def delayed_reader(delays: dict[str, float]):
    """Reader that finishes each upload after its own delay (seconds)."""
    async def read(upload: UploadedFile) -> bytes:
        await asyncio.sleep(delays.get(upload.name, 0))
        return upload.read_bytes()
    return read


def load_users(workbench: Workbench, users: Iterable[dict] = USERS) -> None:
    """Put records in the store directly, bypassing upload."""
    for user in users:
        workbench.store.append(user)


@pytest.fixture()
def workbench() -> Workbench:
    return Workbench()


@pytest.fixture()
def loaded_workbench(workbench: Workbench) -> Workbench:
    load_users(workbench)
    return workbench


@pytest.fixture()
def make_upload():
    return json_upload


@pytest.fixture()
def make_delayed_reader():
    return delayed_reader


@pytest.fixture()
def users() -> list[dict]:
    return [dict(u) for u in USERS]
