"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Literal

from .errors import ConfigurationError

APP_DIR_NAME: Final[str] = "explainthis"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"

type HttpCacheMode = Literal["memory", "sqlite", "off"]
_CACHE_MODES: Final[frozenset[str]] = frozenset({"memory", "sqlite", "off"})


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    http_cache: HttpCacheMode = "memory"
    http_cache_filename: str = HTTP_CACHE_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def http_cache_path(self, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return base / self.http_cache_filename


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("EXPLAINTHIS_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else _default_data_dir()
    mode = (os.getenv("EXPLAINTHIS_HTTP_CACHE") or "memory").strip().lower()
    if mode not in _CACHE_MODES:
        raise ConfigurationError(f"Unsupported EXPLAINTHIS_HTTP_CACHE value: {mode}")
    return StorageConfig(data_dir=data_dir, http_cache=mode)  # type: ignore[arg-type]
