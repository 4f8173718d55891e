"""Filesystem collector.

Lists one directory (non-recursive) and turns every file whose name ends with
the configured suffix into a `ProjectFile`.

Fail fast: a single unreadable entry aborts the scan, because a missing
snapshot would skew every sum computed downstream.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from abletime.core.domain.models import ProjectFile
from abletime.core.errors import IoError

logger = logging.getLogger(__name__)


def _to_local(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).astimezone()


def creation_timestamp(st: os.stat_result) -> float | None:
    """Creation time of a stat result, or None when the platform lacks one.

    `st_birthtime` exists on macOS/BSD (and Windows from Python 3.12);
    on Windows `st_ctime` has always been the creation time. Linux `os.stat`
    exposes neither, and `st_mtime` is never an acceptable stand-in.
    """

    birthtime = getattr(st, "st_birthtime", None)
    if birthtime is not None:
        return float(birthtime)
    if os.name == "nt":
        return float(st.st_ctime)
    return None


def display_name(path: Path) -> str:
    """Base name of `path`, with undecodable bytes replaced by U+FFFD."""

    return os.fsencode(path.name).decode("utf-8", errors="replace")


def read_project_file(path: Path) -> ProjectFile:
    """Read both timestamps of `path`."""

    try:
        st = path.stat()
    except OSError as exc:
        raise IoError(f"cannot read metadata ({exc.strerror or exc})", path=path) from exc

    created = creation_timestamp(st)
    if created is None:
        raise IoError("creation time is not available on this platform", path=path)

    try:
        return ProjectFile(
            name=display_name(path),
            created_at=_to_local(created),
            modified_at=_to_local(st.st_mtime),
        )
    except ValidationError as exc:
        raise IoError(f"unusable metadata ({exc.error_count()} invalid fields)", path=path) from exc


def collect_project_files(directory: Path | str, suffix: str) -> list[ProjectFile]:
    """Return a `ProjectFile` for every direct child file ending with `suffix`.

    The match is case-sensitive and an empty suffix matches every file.
    Subdirectories are skipped. Order follows directory enumeration.
    """

    directory = Path(directory)
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as exc:
        raise IoError(f"cannot list directory ({exc.strerror or exc})", path=directory) from exc

    project_files: list[ProjectFile] = []
    for entry in entries:
        if not entry.name.endswith(suffix):
            continue
        try:
            is_file = entry.is_file()
        except OSError as exc:
            raise IoError(f"cannot read metadata ({exc.strerror or exc})", path=entry.path) from exc
        if not is_file:
            logger.debug("skipping non-file entry %s", entry.path)
            continue
        project_files.append(read_project_file(Path(entry.path)))

    logger.debug(
        "collected %d of %d entries in %s matching %r",
        len(project_files),
        len(entries),
        directory,
        suffix,
    )
    return project_files
