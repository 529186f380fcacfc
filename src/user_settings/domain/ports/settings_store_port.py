"""Port (ABC) for per-provider user settings persistence.

Domain layer interface — the application layer provides the implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


class SettingsStorePort(ABC):
    """Abstract interface for loading / saving named setting sets."""

    @abstractmethod
    def load(
        self,
        name: str,
        settings_type: type[T],
        on_loaded: Optional[Callable[[T], None]] = None,
    ) -> Optional[T]:
        """Load the setting set *name*, or ``None`` if absent or unreadable."""

    @abstractmethod
    def save(
        self,
        name: str,
        settings: Any,
        on_saved: Optional[Callable[[], None]] = None,
    ) -> None:
        """Persist *settings* as the setting set *name*."""
