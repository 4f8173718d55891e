"""
Pytest configuration for abletime tests.
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Ensure src/ is importable without an editable install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from abletime.adapters import filesystem  # noqa: E402
from abletime.core.domain.models import ProjectFile  # noqa: E402

T0 = datetime(2024, 3, 5, 14, 0, 0, tzinfo=timezone.utc)
T0_EPOCH = int(T0.timestamp())


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ABLETIME_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("ABLETIME_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_project_file():
    """Build a ProjectFile from offsets (seconds) relative to T0."""

    def _make(name: str, created: float, modified: float) -> ProjectFile:
        return ProjectFile(
            name=name,
            created_at=T0 + timedelta(seconds=created),
            modified_at=T0 + timedelta(seconds=modified),
        )

    return _make


@pytest.fixture
def atime_as_creation(monkeypatch):
    """Most CI filesystems have no creation time: read it from st_atime instead."""
    monkeypatch.setattr(filesystem, "creation_timestamp", lambda st: float(st.st_atime))


@pytest.fixture
def write_snapshot(atime_as_creation):
    """Create a file whose (faked) creation and modification times are T0 + offsets."""

    def _write(directory: Path, name: str, created: float, modified: float) -> Path:
        path = directory / name
        path.write_bytes(b"snapshot")
        created_ns = T0_EPOCH * 1_000_000_000 + int(created * 1_000_000_000)
        modified_ns = T0_EPOCH * 1_000_000_000 + int(modified * 1_000_000_000)
        os.utime(path, ns=(created_ns, modified_ns))
        return path

    return _write
