"""
Storage backend interface.

Defines the abstract interface for persisting generated build plans, so an
external executor can pick up invocations without re-evaluating modules.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic import BaseModel

from ..models.actions import BuildActions

T = TypeVar("T", bound=BaseModel)

ACTIONS_FILE = "actions.json"


class StorageBackend(ABC):
    """Abstract storage backend interface."""

    @abstractmethod
    async def store_text(self, key: str, content: str, metadata: dict[str, Any] | None = None) -> str:
        """Store text content and return the storage key.

        Args:
            key: Storage key/path.
            content: Text content to store.
            metadata: Optional metadata to associate.

        Returns:
            The final storage key.
        """
        ...

    @abstractmethod
    async def store_model(self, key: str, model: BaseModel, metadata: dict[str, Any] | None = None) -> str:
        """Store a Pydantic model as JSON and return the storage key."""
        ...

    @abstractmethod
    async def load_text(self, key: str) -> str:
        """Load text content from storage.

        Raises:
            FileNotFoundError: If the key does not exist.
        """
        ...

    @abstractmethod
    async def load_model(self, key: str, model_type: type[T]) -> T:
        """Load a Pydantic model stored with store_model."""
        ...

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check whether a key exists."""
        ...

    @abstractmethod
    async def list_keys(self, prefix: str = "") -> list[str]:
        """List stored keys under prefix, sorted."""
        ...

    @abstractmethod
    async def get_metadata(self, key: str) -> dict[str, Any]:
        """Get metadata stored alongside a key; empty if there is none."""
        ...

    async def store_build_actions(self, actions: BuildActions) -> list[str]:
        """Persist a module's build plan and one invocation log per invocation.

        Returns:
            The keys written, plan first.
        """
        name = actions.module_name
        keys = [
            await self.store_model(
                f"{name}/{ACTIONS_FILE}",
                actions,
                {"module": name, "invocations": len(actions.invocations)},
            )
        ]
        for invocation in actions.invocations:
            keys.append(
                await self.store_text(
                    f"{name}/{invocation.kind.value}.cmd",
                    invocation.render() + "\n",
                    {"module": name, "kind": invocation.kind.value},
                )
            )
        return keys

    async def load_build_actions(self, module_name: str) -> BuildActions:
        """Load a plan stored by store_build_actions."""
        return await self.load_model(f"{module_name}/{ACTIONS_FILE}", BuildActions)

    @staticmethod
    def compute_hash(data: bytes) -> str:
        """Compute SHA-256 hash of data."""
        return hashlib.sha256(data).hexdigest()
