"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "learngraph"
CACHE_DB_FILENAME: Final[str] = "cache.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    cache_filename: str = CACHE_DB_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def cache_path(self, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return base / self.cache_filename

    def cache_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.cache_path()}"


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("LEARNGRAPH_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else _default_data_dir()
    return StorageConfig(data_dir=data_dir)


def get_cache_uri(*, storage: StorageConfig | None = None) -> str:
    """Compute the key-value cache database URI, respecting overrides."""

    env_uri = os.getenv("LEARNGRAPH_CACHE_URI")
    if env_uri:
        return env_uri
    storage_config = storage if storage is not None else get_storage_config()
    return storage_config.cache_uri()
