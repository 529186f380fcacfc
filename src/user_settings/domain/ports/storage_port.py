"""Port: Isolated storage — a per-user, per-application entry area."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

from user_settings.domain.models.enums import FileMode


class IsolatedStoragePort(ABC):
    """Contract for a scoped storage handle.

    A handle is acquired per operation and released with :meth:`close`
    (or by leaving a ``with`` block). Streams returned by :meth:`open_file`
    must be closed before the handle itself.
    """

    @abstractmethod
    def file_exists(self, name: str) -> bool:
        """Return ``True`` if an entry called *name* exists."""
        ...

    @abstractmethod
    def open_file(self, name: str, mode: FileMode) -> BinaryIO:
        """Open the entry *name* as a binary stream."""
        ...

    @abstractmethod
    def list_files(self, pattern: str = "*") -> list[str]:
        """Return entry names matching the glob *pattern*, sorted."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the handle."""
        ...

    def __enter__(self) -> "IsolatedStoragePort":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
