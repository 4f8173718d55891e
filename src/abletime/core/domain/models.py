"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Typed, immutable snapshots of the filesystem facts the pipeline consumes.
- `Field` descriptions double as documentation of each value's meaning.

Note:
- These models describe *what* a snapshot is, not *how* it was read.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ProjectFile(BaseModel):
    """One saved snapshot of the project (a single file on disk)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Base name of the file (no directory component).",
    )
    created_at: datetime = Field(
        ...,
        description="Creation timestamp reported by the platform.",
    )
    modified_at: datetime = Field(
        ...,
        description="Last modification timestamp.",
    )

    @property
    def own_duration(self) -> timedelta:
        """Raw `modified_at - created_at`, may be negative on clock anomalies."""

        return self.modified_at - self.created_at


class ProjectFileWithDuration(ProjectFile):
    """A snapshot plus the working time attributed to it."""

    duration: timedelta = Field(
        ...,
        ge=timedelta(0),
        description="Estimated time spent producing this snapshot (never negative).",
    )

    @property
    def start_time(self) -> datetime:
        return self.created_at

    @classmethod
    def from_project_file(cls, project_file: ProjectFile, duration: timedelta) -> "ProjectFileWithDuration":
        return cls(**project_file.model_dump(), duration=duration)


class ScanConfig(BaseModel):
    """Validated input of the core pipeline.

    The CLI builds it from flags and settings; the pipeline never sees flag syntax.
    """

    model_config = ConfigDict(frozen=True)

    directory: Path = Field(
        default=Path("."),
        description="Directory to scan (non-recursive).",
    )
    max_minutes_between_saves: int = Field(
        default=60,
        description="Session-boundary threshold in minutes; <= 0 disables it.",
    )
    suffix: str = Field(
        default=".als",
        description="Case-sensitive file name suffix; empty matches every file.",
    )


class ProjectReport(BaseModel):
    """Ordered per-snapshot durations plus their grand total."""

    model_config = ConfigDict(frozen=True)

    entries: list[ProjectFileWithDuration] = Field(
        default_factory=list,
        description="Snapshots sorted by creation time.",
    )
    total: timedelta = Field(
        default=timedelta(0),
        ge=timedelta(0),
        description="Sum of every entry's duration.",
    )

    @property
    def is_empty(self) -> bool:
        return not self.entries
