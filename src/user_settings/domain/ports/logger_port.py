"""Port: Logger — records diagnostic messages on behalf of the helper."""

from __future__ import annotations

from abc import ABC, abstractmethod

from user_settings.domain.models.enums import LogLevel


class LoggerPort(ABC):
    """Contract for the logging collaborator.

    Implementations may record synchronously or hand the record off to a
    background worker; callers never inspect the outcome.
    """

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        template: str,
        *args: object,
        exc: BaseException | None = None,
    ) -> None:
        """Record *template* % *args* at *level*, optionally with *exc* attached."""
        ...
