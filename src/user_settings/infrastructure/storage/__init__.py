from user_settings.infrastructure.storage.isolated_store import IsolatedStore

__all__ = ["IsolatedStore"]
