"""
Core type definitions for apkpack.

Result wrappers and the build-action state machine shared by the packaging
core and the module walker.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar


class ActionState(str, Enum):
    """States walked while emitting one app module's build actions."""

    INIT = "init"
    FLAGS_COMPUTED = "flags_computed"
    RESOURCES_PRESENT = "resources_present"
    NO_RESOURCES = "no_resources"
    EXPORT_PACKAGE = "export_package"
    MAIN_PACKAGE_BUILT = "main_package_built"
    INSTALLED = "installed"


T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """Result wrapper for per-module evaluation.

    Carries success/failure status, the result data, and any error.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, data: T, **metadata: Any) -> ServiceResult[T]:
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def fail(cls, error: str, **metadata: Any) -> ServiceResult[T]:
        """Create a failed result."""
        return cls(success=False, error=error, metadata=metadata)
