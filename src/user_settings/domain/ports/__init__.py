"""Domain ports — abstract interfaces implemented by infrastructure."""

from user_settings.domain.ports.logger_port import LoggerPort
from user_settings.domain.ports.serializer_port import SerializerPort
from user_settings.domain.ports.settings_store_port import SettingsStorePort
from user_settings.domain.ports.storage_port import IsolatedStoragePort

__all__ = [
    "IsolatedStoragePort",
    "LoggerPort",
    "SerializerPort",
    "SettingsStorePort",
]
