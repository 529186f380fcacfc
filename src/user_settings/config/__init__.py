"""Storage configuration package."""

from user_settings.config.loader import get_config, load_config
from user_settings.config.models import StorageConfig

__all__ = ["StorageConfig", "get_config", "load_config"]
