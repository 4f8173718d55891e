"""Time estimation pipeline.

Collector -> Sorter -> Duration Estimator, strictly in sequence. The CLI
only renders the returned `ProjectReport`; printing and exit codes stay out
of this module so the pipeline is usable from tests and other entry-points.

Duration heuristic, per snapshot in creation order:

- a save followed soon by another save: the gap until the next save is the
  time spent producing it;
- a save followed by a gap longer than the threshold (a session boundary):
  the user likely stopped right after saving, so the file's own
  `modified_at - created_at` is used instead of the idle gap;
- the last save has no successor and always uses its own difference.

Every result is truncated to whole milliseconds and clamped at zero.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Iterable, Sequence

from abletime.adapters.filesystem import collect_project_files
from abletime.core.domain.models import (
    ProjectFile,
    ProjectFileWithDuration,
    ProjectReport,
    ScanConfig,
)

logger = logging.getLogger(__name__)

_ZERO = timedelta(0)
_MILLISECOND = timedelta(milliseconds=1)


def sort_by_creation(project_files: Iterable[ProjectFile]) -> list[ProjectFile]:
    """Order by `created_at` ascending; ties keep their enumeration order."""

    return sorted(project_files, key=lambda project_file: project_file.created_at)


def _clamp(duration: timedelta) -> timedelta:
    # whole milliseconds, so the total is the sum of the printed rows
    duration = (duration // _MILLISECOND) * _MILLISECOND
    return duration if duration > _ZERO else _ZERO


def estimate_durations(
    project_files: Sequence[ProjectFile],
    max_minutes_between_saves: int,
) -> list[ProjectFileWithDuration]:
    """Attach a duration to every entry of an already sorted sequence.

    `max_minutes_between_saves <= 0` disables the session-boundary test, so
    every non-last entry gets the full gap to its successor.
    """

    threshold = timedelta(minutes=max_minutes_between_saves) if max_minutes_between_saves > 0 else None

    out: list[ProjectFileWithDuration] = []
    for i, project_file in enumerate(project_files):
        if i == len(project_files) - 1:
            duration = project_file.own_duration
        else:
            gap = project_files[i + 1].created_at - project_file.created_at
            if threshold is not None and gap > threshold:
                logger.debug("session boundary after %s (gap %s)", project_file.name, gap)
                duration = project_file.own_duration
            else:
                duration = gap
        out.append(ProjectFileWithDuration.from_project_file(project_file, _clamp(duration)))
    return out


def sum_durations(entries: Iterable[ProjectFileWithDuration]) -> timedelta:
    return sum((entry.duration for entry in entries), _ZERO)


def build_report(project_files: Iterable[ProjectFile], max_minutes_between_saves: int) -> ProjectReport:
    """Sort, estimate and total an unordered collection of snapshots."""

    entries = estimate_durations(sort_by_creation(project_files), max_minutes_between_saves)
    return ProjectReport(entries=entries, total=sum_durations(entries))


def scan_project(config: ScanConfig) -> ProjectReport:
    """Run the whole pipeline for `config`.

    Raises `IoError` when the directory or any matched file cannot be read.
    """

    logger.debug(
        "scanning %s (suffix=%r, max_minutes_between_saves=%d)",
        config.directory,
        config.suffix,
        config.max_minutes_between_saves,
    )
    project_files = collect_project_files(config.directory, config.suffix)
    report = build_report(project_files, config.max_minutes_between_saves)
    logger.debug("estimated %s over %d project files", report.total, len(report.entries))
    return report
