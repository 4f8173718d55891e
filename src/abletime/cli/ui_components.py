"""Report rendering for the CLI.

Why separate components:
- Keeps command logic apart from visual details.
- The whole report is built before anything is written, so a run prints
  either the complete report or nothing.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from abletime.core.domain.models import ProjectReport
from abletime.core.formatting import format_duration, format_start_time

NO_FILES_MESSAGE = "No project files found"
TOTAL_LABEL = "Total project time"


def _row(start: str, duration: str, name: str) -> str:
    return f"{start: <21} {duration: <13} {name}"


def render_report(report: ProjectReport) -> list[str]:
    """Plain-text report lines (header, one row per snapshot, blank, total)."""

    if report.is_empty:
        return [NO_FILES_MESSAGE]

    lines = [_row("Start time", "Duration", "Name")]
    for entry in report.entries:
        lines.append(_row(format_start_time(entry.start_time), format_duration(entry.duration), entry.name))
    lines.append("")
    lines.append(TOTAL_LABEL)
    lines.append(format_duration(report.total))
    return lines


def build_report_table(report: ProjectReport) -> Table:
    """Rich table with the same data as `render_report`."""

    table = Table(title="Project time", caption=f"{TOTAL_LABEL}: {format_duration(report.total)}")
    table.add_column("Start time", style="cyan", no_wrap=True)
    table.add_column("Duration", style="bright_green", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    for entry in report.entries:
        table.add_row(format_start_time(entry.start_time), format_duration(entry.duration), Text(entry.name))
    return table
