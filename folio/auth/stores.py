"""Token store implementations and registry."""

from __future__ import annotations

import json
from pathlib import Path

from ..config import AuthConfig
from .base import TokenStore


class MemoryTokenStore(TokenStore):
    """Process-local store; nothing survives the process."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileTokenStore(TokenStore):
    """Stores values in a small JSON object on disk.

    Attributes:
        path: Location of the JSON file; parent folders are created on write
    """

    def __init__(self, path: Path):
        self.path = path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) and value else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        if data:
            self._write(data)
        else:
            self.path.unlink(missing_ok=True)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only before any token is written
        self.path.touch(mode=0o600, exist_ok=True)
        self.path.chmod(0o600)
        self.path.write_text(json.dumps(data, ensure_ascii=True), encoding="utf-8")


def _file_store(cfg: AuthConfig) -> TokenStore:
    return FileTokenStore(Path(cfg.token_path).expanduser())


def _memory_store(cfg: AuthConfig) -> TokenStore:
    return MemoryTokenStore()


_STORE_REGISTRY = {
    "file": _file_store,
    "memory": _memory_store,
}


def available_stores() -> list[str]:
    """Return the registered token store names."""
    return sorted(_STORE_REGISTRY.keys())


def create_token_store(cfg: AuthConfig) -> TokenStore:
    """Build a token store from config."""
    name = cfg.store.lower().strip()
    builder = _STORE_REGISTRY.get(name)
    if builder is None:
        supported = ", ".join(available_stores())
        raise ValueError(f"Unsupported token store: {cfg.store}. Supported: {supported}")
    return builder(cfg)
