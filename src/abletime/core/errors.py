"""Error taxonomy.

Every error is fatal: nothing in the pipeline retries or recovers. The CLI is
the only place that turns these into a message and an exit code.
"""

from __future__ import annotations

from pathlib import Path


class AbletimeError(Exception):
    """Base class for errors raised by abletime."""

    exit_code: int = 1


class IoError(AbletimeError):
    """Listing a directory, reading file metadata or writing output failed."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is None:
            return message
        return f"{message}: {self.path}"
