"""Configuration loader for user settings storage.

Loads an optional JSON configuration file and returns a validated
StorageConfig instance. Uses module-level caching so a file is only parsed
once per process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from user_settings.config.models import StorageConfig
from user_settings.domain.errors import ConfigurationError

# Module-level cache
_config_cache: dict[str, StorageConfig] = {}

_DEFAULT_KEY = "<defaults>"


def load_config(path: Optional[Path] = None) -> StorageConfig:
    """Load and validate storage config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a JSON config file. If ``None``, built-in defaults are used.

    Returns
    -------
    StorageConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    ConfigurationError
        If the file is not valid JSON or does not match the schema.
    """
    if path is None:
        if _DEFAULT_KEY not in _config_cache:
            _config_cache[_DEFAULT_KEY] = StorageConfig()
        return _config_cache[_DEFAULT_KEY]

    config_path = Path(path)
    cache_key = str(config_path.resolve())
    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = StorageConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc

    _config_cache[cache_key] = config
    return config


def get_config() -> StorageConfig:
    """Get the default storage configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
