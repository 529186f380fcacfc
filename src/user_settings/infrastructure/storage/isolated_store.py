"""Isolated store — implements IsolatedStoragePort on a user data directory.

The directory is scoped to the current user and to one application, and
lives in the roaming profile where the platform has one
(``%APPDATA%\\<author>\\<app>`` on Windows, ``~/.local/share/<app>`` on
Linux) as resolved by ``platformdirs``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

import platformdirs

from user_settings.domain.errors import StorageError
from user_settings.domain.models.enums import FileMode
from user_settings.domain.ports.storage_port import IsolatedStoragePort

logger = logging.getLogger(__name__)

_FORBIDDEN_CHARS = {"/", "\\", "\x00"}


class IsolatedStore(IsolatedStoragePort):
    """Concrete implementation of :class:`IsolatedStoragePort`.

    Parameters
    ----------
    root : Path
        Directory holding the entries. Created on first use.
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)
        self._streams: list[BinaryIO] = []
        self._closed = False

    @classmethod
    def for_application(
        cls,
        app_name: str,
        app_author: str | None = None,
        *,
        roaming: bool = True,
    ) -> "IsolatedStore":
        """Open the store belonging to *app_name* for the current user."""
        root = platformdirs.user_data_dir(
            app_name,
            app_author or False,
            roaming=roaming,
            ensure_exists=True,
        )
        logger.debug("Isolated store for %s at %s", app_name, root)
        return cls(Path(root))

    # -- IsolatedStoragePort -------------------------------------------------

    def file_exists(self, name: str) -> bool:
        return self._entry_path(name).is_file()

    def open_file(self, name: str, mode: FileMode) -> BinaryIO:
        path = self._entry_path(name)
        stream = open(path, mode.raw_mode)
        self._streams.append(stream)
        return stream

    def list_files(self, pattern: str = "*") -> list[str]:
        self._ensure_open()
        return sorted(p.name for p in self._root.glob(pattern) if p.is_file())

    def close(self) -> None:
        """Release the handle, closing any stream the caller left open."""
        for stream in self._streams:
            if not stream.closed:
                stream.close()
        self._streams.clear()
        self._closed = True

    # -- Extras --------------------------------------------------------------

    def stat(self, name: str) -> os.stat_result:
        """Return filesystem metadata for the entry *name*."""
        return self._entry_path(name).stat()

    @property
    def root(self) -> Path:
        """Directory backing this store."""
        return self._root

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def open_stream_count(self) -> int:
        """Number of streams opened through this handle and not yet closed."""
        return sum(1 for stream in self._streams if not stream.closed)

    # -- Internals -----------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageError(f"Isolated store is closed: {self._root}")

    def _entry_path(self, name: str) -> Path:
        self._ensure_open()
        if not name or name in {".", ".."} or _FORBIDDEN_CHARS & set(name):
            raise StorageError(f"Invalid isolated storage entry name: {name!r}")
        return self._root / name
