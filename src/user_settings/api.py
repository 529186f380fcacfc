"""Module-level convenience functions bound to a default container.

>>> save_settings(settings, "ODataProvider", "Endpoint")
>>> load_settings(EndpointSettings, "ODataProvider", "Endpoint")
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from user_settings.domain.ports.logger_port import LoggerPort

T = TypeVar("T")

_container = None


def _default_container():
    global _container
    if _container is None:
        from user_settings.bootstrap import Container

        _container = Container()
    return _container


def reset_default_container() -> None:
    """Forget the default container so the next call re-reads configuration."""
    global _container
    _container = None


def save_settings(
    user_settings: Any,
    provider_id: str,
    name: str,
    on_saved: Optional[Callable[[], None]] = None,
    logger: Optional[LoggerPort] = None,
) -> None:
    """Save *user_settings* under ``(provider_id, name)``; never raises."""
    container = _default_container()
    container.helper.save(user_settings, provider_id, name, on_saved, logger or container.logger)


def load_settings(
    settings_type: type[T],
    provider_id: str,
    name: str,
    on_loaded: Optional[Callable[[T], None]] = None,
    logger: Optional[LoggerPort] = None,
) -> Optional[T]:
    """Load ``(provider_id, name)`` as *settings_type*; ``None`` if absent or unreadable."""
    container = _default_container()
    return container.helper.load(settings_type, provider_id, name, on_loaded, logger or container.logger)
