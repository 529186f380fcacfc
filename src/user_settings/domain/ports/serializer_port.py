"""Port: Serializer — turn settings objects into markup bytes and back."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

T = TypeVar("T")


class SerializerPort(ABC):
    """Contract for full-fidelity settings serialization.

    The persistence helper knows nothing about field layouts; it only hands
    values and the requested type to this port.
    """

    @abstractmethod
    def serialize(self, value: Any) -> bytes:
        """Encode *value* as a complete document."""
        ...

    @abstractmethod
    def deserialize(self, data: bytes, settings_type: type[T]) -> T:
        """Decode *data* into a new instance of *settings_type*."""
        ...
