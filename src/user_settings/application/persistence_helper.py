"""Save and load user settings to isolated storage.

The data is stored with the user's roaming profile, one XML entry per
``(provider_id, name)`` pair. Failures are non-critical: they are written to
the injected logger as warnings and never reach the caller.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from user_settings.domain.models.enums import FileMode, LogLevel
from user_settings.domain.ports.logger_port import LoggerPort
from user_settings.domain.ports.serializer_port import SerializerPort
from user_settings.domain.ports.storage_port import IsolatedStoragePort

T = TypeVar("T")

StoreFactory = Callable[[], IsolatedStoragePort]

FAILURE_MESSAGE = "Failed to access the %s user settings"
_EXTENSION = ".xml"


def storage_file_name(provider_id: str, name: str) -> str:
    """Return the entry name for a provider's setting set.

    ``storage_file_name("ODataProvider", "Endpoint")`` → ``"ODataProvider_Endpoint.xml"``
    """
    return f"{provider_id}_{name}{_EXTENSION}"


def execute_noncritical(
    operation: Callable[[], None],
    logger: LoggerPort,
    message_template: str,
    message_arg: str,
) -> None:
    """Run *operation*; log any exception as a warning and return normally."""
    try:
        operation()
    except Exception as exc:
        logger.log(LogLevel.WARNING, message_template, message_arg, exc=exc)


class UserSettingsPersistenceHelper:
    """Persist settings objects through a serializer and an isolated store.

    Every call acquires its own store handle from *store_factory* and
    releases it before returning; nothing is cached between calls.
    """

    def __init__(self, serializer: SerializerPort, store_factory: StoreFactory) -> None:
        self._serializer = serializer
        self._store_factory = store_factory

    def save(
        self,
        user_settings: Any,
        provider_id: str,
        name: str,
        on_saved: Optional[Callable[[], None]],
        logger: LoggerPort,
    ) -> None:
        """Save *user_settings*, overwriting any existing entry.

        *on_saved* is invoked only after the entry has been fully written and
        every resource released.
        """
        file_name = storage_file_name(provider_id, name)

        def _operation() -> None:
            with self._store_factory() as store:
                with store.open_file(file_name, FileMode.CREATE) as stream:
                    stream.write(self._serializer.serialize(user_settings))
                    stream.flush()

            logger.log(LogLevel.DEBUG, "Saved the %s user settings", file_name)
            if on_saved is not None:
                on_saved()

        execute_noncritical(_operation, logger, FAILURE_MESSAGE, file_name)

    def load(
        self,
        settings_type: type[T],
        provider_id: str,
        name: str,
        on_loaded: Optional[Callable[[T], None]],
        logger: LoggerPort,
    ) -> Optional[T]:
        """Load a setting set as an instance of *settings_type*.

        Returns ``None`` when nothing was saved under the key (silently) or
        when reading fails (with a warning).
        """
        file_name = storage_file_name(provider_id, name)
        result: Optional[T] = None

        def _operation() -> None:
            nonlocal result
            with self._store_factory() as store:
                if not store.file_exists(file_name):
                    return
                with store.open_file(file_name, FileMode.OPEN) as stream:
                    data = stream.read()

            result = self._serializer.deserialize(data, settings_type)
            logger.log(LogLevel.DEBUG, "Loaded the %s user settings", file_name)
            if on_loaded is not None and result is not None:
                on_loaded(result)

        execute_noncritical(_operation, logger, FAILURE_MESSAGE, file_name)
        return result
