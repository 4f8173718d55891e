"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- CLI flags always win; settings only provide the defaults.

Environment variables only: abletime has no configuration file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from abletime.core.domain.models import ScanConfig

ABLETON_SUFFIX = ".als"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class AppSettings(BaseSettings):
    """Application-wide defaults, overridable through `ABLETIME_*` variables."""

    model_config = SettingsConfigDict(
        env_prefix="ABLETIME_",
        extra="ignore",
        case_sensitive=False,
    )

    directory: Path = Field(
        default=Path("."),
        description="Directory to inspect when none is given on the command line.",
    )
    suffix: str = Field(
        default=ABLETON_SUFFIX,
        description="Project file suffix. The default works for Ableton projects.",
    )
    max_minutes_between_saves: int = Field(
        default=60,
        description="Maximum minutes between saves for the gap to be counted; <= 0 disables.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level used when --verbose is not given.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    def scan_config(
        self,
        *,
        directory: Path | None = None,
        suffix: str | None = None,
        max_minutes_between_saves: int | None = None,
    ) -> ScanConfig:
        """Merge explicit overrides on top of these settings."""

        return ScanConfig(
            directory=directory if directory is not None else self.directory,
            suffix=suffix if suffix is not None else self.suffix,
            max_minutes_between_saves=(
                max_minutes_between_saves
                if max_minutes_between_saves is not None
                else self.max_minutes_between_saves
            ),
        )


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Send `abletime` log records to the current stderr at `level`."""

    logger = logging.getLogger("abletime")
    for old in [h for h in logger.handlers if getattr(h, "_abletime", False)]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler._abletime = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
