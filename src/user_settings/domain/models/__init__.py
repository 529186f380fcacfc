"""Domain models package."""

from user_settings.domain.models.enums import FileMode, LogLevel

__all__ = ["FileMode", "LogLevel"]
