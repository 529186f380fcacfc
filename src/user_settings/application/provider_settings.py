"""Use case: settings for a single provider.

Binds a provider id and a logger to the persistence helper so that callers
only deal with setting-set names.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from user_settings.application.persistence_helper import (
    UserSettingsPersistenceHelper,
    storage_file_name,
)
from user_settings.domain.ports.logger_port import LoggerPort
from user_settings.domain.ports.settings_store_port import SettingsStorePort

T = TypeVar("T")


class ProviderSettingsStore(SettingsStorePort):
    """Concrete implementation of :class:`SettingsStorePort`.

    Parameters
    ----------
    helper : UserSettingsPersistenceHelper
        Helper that performs the actual reads and writes.
    provider_id : str
        Identifier prefixed to every entry name.
    logger : LoggerPort
        Receives warnings for failed operations.
    """

    def __init__(
        self,
        helper: UserSettingsPersistenceHelper,
        provider_id: str,
        logger: LoggerPort,
    ) -> None:
        self._helper = helper
        self._provider_id = provider_id
        self._logger = logger

    # -- Public API ----------------------------------------------------------

    def load(
        self,
        name: str,
        settings_type: type[T],
        on_loaded: Optional[Callable[[T], None]] = None,
    ) -> Optional[T]:
        return self._helper.load(settings_type, self._provider_id, name, on_loaded, self._logger)

    def save(
        self,
        name: str,
        settings: Any,
        on_saved: Optional[Callable[[], None]] = None,
    ) -> None:
        self._helper.save(settings, self._provider_id, name, on_saved, self._logger)

    def file_name(self, name: str) -> str:
        """Entry name used for the setting set *name*."""
        return storage_file_name(self._provider_id, name)

    @property
    def provider_id(self) -> str:
        return self._provider_id
