"""Pydantic models for the storage configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from user_settings.domain.models.enums import LogLevel


class StorageConfig(BaseModel):
    """Where the isolated store lives and how failures are reported."""

    app_name: str = Field(
        default="user_settings",
        min_length=1,
        description="Application the store is isolated to.",
    )
    app_author: Optional[str] = Field(
        default=None,
        description="Vendor directory used on Windows (omitted when None).",
    )
    roaming: bool = Field(
        default=True,
        description="Use the roaming profile where the platform has one.",
    )
    root_dir: Optional[Path] = Field(
        default=None,
        description="Explicit store directory; bypasses platformdirs.",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Threshold of the package logger.",
    )
