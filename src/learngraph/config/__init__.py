"""Application configuration helpers."""

from __future__ import annotations

from .catalog import CatalogConfig, get_catalog_config
from .env import env_flag, optional_env_var
from .errors import ConfigurationError
from .http_client import HttpClientConfig
from .logging import configure_logging
from .storage import StorageConfig, get_cache_uri, get_storage_config

__all__ = [
    "CatalogConfig",
    "ConfigurationError",
    "HttpClientConfig",
    "StorageConfig",
    "configure_logging",
    "env_flag",
    "get_cache_uri",
    "get_catalog_config",
    "get_storage_config",
    "optional_env_var",
]
