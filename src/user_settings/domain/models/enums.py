"""Enumerations shared by the domain ports."""

from __future__ import annotations

import logging
from enum import Enum


class FileMode(str, Enum):
    """How an isolated storage entry is opened."""

    CREATE = "create"  # create or truncate, write
    OPEN = "open"  # must exist, read

    @property
    def raw_mode(self) -> str:
        return "wb" if self is FileMode.CREATE else "rb"


class LogLevel(str, Enum):
    """Severity accepted by the logger port."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def stdlib_level(self) -> int:
        return getattr(logging, self.name)
