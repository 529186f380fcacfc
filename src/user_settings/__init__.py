"""User settings persistence — XML preferences in per-user isolated storage."""

from user_settings.api import load_settings, save_settings
from user_settings.application.persistence_helper import (
    UserSettingsPersistenceHelper,
    execute_noncritical,
    storage_file_name,
)

__all__ = [
    "UserSettingsPersistenceHelper",
    "execute_noncritical",
    "load_settings",
    "save_settings",
    "storage_file_name",
]
__version__ = "0.1.0"
