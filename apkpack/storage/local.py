"""
Local filesystem storage backend.

Writes build plans under an output directory, one subdirectory per module.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TypeVar

import aiofiles
from pydantic import BaseModel

from .interface import StorageBackend

T = TypeVar("T", bound=BaseModel)


class LocalStorageBackend(StorageBackend):
    """Local filesystem storage backend."""

    def __init__(self, base_path: Path) -> None:
        """Initialize local storage.

        Args:
            base_path: Base directory for all storage operations
        """
        self.base_path = base_path.resolve()
        self._metadata_suffix = ".meta.json"

    def _get_full_path(self, key: str) -> Path:
        """Map a key to a path inside the base directory.

        Keys that would resolve outside the base directory are flattened
        into a single file name within it.
        """
        clean_key = key.lstrip("/\\").replace("..", "").replace(":", "")
        full_path = (self.base_path / clean_key).resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError:
            full_path = self.base_path / clean_key.replace("/", "_").replace("\\", "_")
        return full_path

    def _get_metadata_path(self, key: str) -> Path:
        return self._get_full_path(key + self._metadata_suffix)

    async def _store_metadata(self, key: str, metadata: dict[str, Any]) -> None:
        meta_path = self._get_metadata_path(key)
        meta_path.parent.mkdir(parents=True, exist_ok=True)

        metadata["_stored_at"] = datetime.now(timezone.utc).isoformat()
        metadata["_key"] = key

        async with aiofiles.open(meta_path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(metadata, indent=2, default=str))

    async def store_text(self, key: str, content: str, metadata: dict[str, Any] | None = None) -> str:
        full_path = self._get_full_path(key)
        full_path.parent.mkdir(parents=True, exist_ok=True)

        async with aiofiles.open(full_path, "w", encoding="utf-8") as f:
            await f.write(content)

        meta = dict(metadata or {})
        meta["size_chars"] = len(content)
        meta["hash"] = self.compute_hash(content.encode("utf-8"))
        await self._store_metadata(key, meta)
        return key

    async def store_model(self, key: str, model: BaseModel, metadata: dict[str, Any] | None = None) -> str:
        meta = dict(metadata or {})
        meta["model_type"] = type(model).__name__
        return await self.store_text(key, model.model_dump_json(indent=2), meta)

    async def load_text(self, key: str) -> str:
        full_path = self._get_full_path(key)
        if not full_path.exists():
            raise FileNotFoundError(f"Key not found: {key}")

        async with aiofiles.open(full_path, "r", encoding="utf-8") as f:
            return await f.read()

    async def load_model(self, key: str, model_type: type[T]) -> T:
        return model_type.model_validate_json(await self.load_text(key))

    async def exists(self, key: str) -> bool:
        return self._get_full_path(key).exists()

    async def list_keys(self, prefix: str = "") -> list[str]:
        search_path = self._get_full_path(prefix) if prefix else self.base_path
        if not search_path.exists():
            return []

        keys = []
        for path in search_path.rglob("*"):
            if path.is_file() and not path.name.endswith(self._metadata_suffix):
                keys.append(path.relative_to(self.base_path).as_posix())
        return sorted(keys)

    async def get_metadata(self, key: str) -> dict[str, Any]:
        meta_path = self._get_metadata_path(key)
        if not meta_path.exists():
            return {}

        async with aiofiles.open(meta_path, "r", encoding="utf-8") as f:
            return json.loads(await f.read())
