"""
Custom exception hierarchy for apkpack.

All exceptions inherit from ApkPackError so a module walker can report any
packaging failure uniformly. Each exception carries context for logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ApkPackError(Exception):
    """Base exception for all apkpack errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class ConfigurationError(ApkPackError):
    """Raised when a module declaration cannot be turned into build actions."""

    module_name: str = ""
    property_name: str | None = None

    def __str__(self) -> str:
        base = super().__str__()
        where = f"{self.module_name}.{self.property_name}" if self.property_name else self.module_name
        if where:
            return f"Configuration error in '{where}': {base}"
        return f"Configuration error: {base}"


@dataclass
class ManifestNotFoundError(ApkPackError):
    """Raised when an app module's manifest does not exist."""

    module_name: str = ""
    manifest_path: str = ""

    def __str__(self) -> str:
        return f"Module '{self.module_name}' has no manifest at '{self.manifest_path}'"


@dataclass
class BuildActionError(ApkPackError):
    """Raised when build action generation for a module fails.

    Nothing is published for the module; the next build re-evaluates it
    from scratch.
    """

    module_name: str = ""
    state: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"[{self.module_name}] build actions failed after state '{self.state}': {base}"
