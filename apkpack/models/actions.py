"""
Build action models.

What the packaging core hands to the external command executor and
installer for one app module.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from ..core.types import ActionState
from .app import CertificateSet


class InvocationKind(str, Enum):
    """Categories of packaging tool invocations."""

    RESOURCE_COMPILE = "resource_compile"
    EXPORT_PACKAGE = "export_package"
    APP_PACKAGE = "app_package"


class PackagingInvocation(BaseModel):
    """A single packaging tool run: flags plus the files that must retrigger it."""

    kind: InvocationKind
    flags: tuple[str, ...] = Field(default=())
    inputs: tuple[Path, ...] = Field(default=(), description="Dependency-file set")
    outputs: tuple[Path, ...] = Field(default=())
    certificates: CertificateSet | None = Field(default=None)

    model_config = {"frozen": True}

    def render(self) -> str:
        """Flags joined the way they appear in invocation logs."""
        return " ".join(self.flags)


class InstallDeclaration(BaseModel):
    """Where the installer places the signed package."""

    source: Path
    destination: Path


class BuildActions(BaseModel):
    """Everything emitted for one app module."""

    module_name: str
    invocations: list[PackagingInvocation] = Field(default_factory=list)
    checkbuild_files: list[Path] = Field(default_factory=list)
    extra_src_lists: list[Path] = Field(
        default_factory=list, description="Generated R-file lists for Java compilation"
    )
    export_package: Path | None = Field(default=None)
    output_file: Path | None = Field(default=None)
    install: InstallDeclaration | None = Field(default=None)
    states: list[ActionState] = Field(default_factory=list)

    def invocation(self, kind: InvocationKind) -> PackagingInvocation | None:
        """Get the invocation of a given kind, if one was emitted."""
        for invocation in self.invocations:
            if invocation.kind == kind:
                return invocation
        return None

    @property
    def has_resources(self) -> bool:
        return ActionState.RESOURCES_PRESENT in self.states
