"""Domain errors — custom exceptions for user settings persistence.

These exceptions are raised by the storage and serialization adapters and
absorbed by the fault suppressor. They carry no infrastructure dependencies.
"""


class UserSettingsError(Exception):
    """Base exception for all user settings errors."""


class StorageError(UserSettingsError):
    """Raised when the isolated store or one of its entries cannot be used."""


class SerializationError(UserSettingsError):
    """Raised when a settings object cannot be written to or read from XML."""


class ConfigurationError(UserSettingsError):
    """Raised when configuration is invalid or missing."""
