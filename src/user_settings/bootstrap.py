"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

import logging
from pathlib import Path

from user_settings.application.persistence_helper import UserSettingsPersistenceHelper
from user_settings.application.provider_settings import ProviderSettingsStore
from user_settings.config.loader import load_config
from user_settings.config.models import StorageConfig
from user_settings.domain.ports.logger_port import LoggerPort
from user_settings.domain.ports.serializer_port import SerializerPort
from user_settings.infrastructure.log.log_adapter import DEFAULT_LOGGER_NAME, StdLoggerAdapter
from user_settings.infrastructure.serialization.xml_serializer import XmlSettingsSerializer
from user_settings.infrastructure.storage.isolated_store import IsolatedStore


class Container:
    """Simple dependency injection container.

    Wires the XML serializer, the isolated store and the logger adapter to
    the persistence helper.

    Usage::

        container = Container()
        endpoint = container.provider("ODataProvider")
        endpoint.save("Endpoint", settings)
    """

    def __init__(
        self,
        config: StorageConfig | None = None,
        config_path: Path | None = None,
    ) -> None:
        self._config = config or load_config(config_path)

        self._serializer = XmlSettingsSerializer()

        std_logger = logging.getLogger(DEFAULT_LOGGER_NAME)
        std_logger.setLevel(self._config.log_level.stdlib_level)
        self._logger = StdLoggerAdapter(std_logger)

        self._helper = UserSettingsPersistenceHelper(self._serializer, self.open_store)

    # -- Factories -----------------------------------------------------------

    def open_store(self) -> IsolatedStore:
        """Acquire a fresh handle on the configured isolated store."""
        if self._config.root_dir is not None:
            return IsolatedStore(self._config.root_dir)
        return IsolatedStore.for_application(
            self._config.app_name,
            self._config.app_author,
            roaming=self._config.roaming,
        )

    def provider(self, provider_id: str) -> ProviderSettingsStore:
        """Settings store bound to *provider_id*."""
        return ProviderSettingsStore(self._helper, provider_id, self._logger)

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> StorageConfig:
        return self._config

    @property
    def serializer(self) -> SerializerPort:
        return self._serializer

    @property
    def logger(self) -> LoggerPort:
        return self._logger

    @property
    def helper(self) -> UserSettingsPersistenceHelper:
        return self._helper
