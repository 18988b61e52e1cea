"""
App module data models.

These models hold the declared configuration of an Android app module and
the values resolved from it: directory lists and signing certificates.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_MANIFEST = "AndroidManifest.xml"


class AppConfig(BaseModel):
    """Packaging properties of an app module, fixed once the declaration is loaded."""

    certificate: str = Field(
        default="",
        description="Certificate path, certificate name in the default directory, or empty",
    )
    additional_certificates: tuple[str, ...] = Field(
        default=(), description="Extra certificates, relative to the module directory"
    )
    export_package_resources: bool = Field(
        default=False, description="Create package-export.apk for dependent modules"
    )
    aaptflags: tuple[str, ...] = Field(default=(), description="Flags passed to aapt verbatim")
    package_splits: tuple[str, ...] = Field(
        default=(), description="Resource labels to generate individual packages for"
    )
    asset_dirs: tuple[str, ...] = Field(
        default=(), description="Asset directories; defaults to 'assets'"
    )
    android_resource_dirs: tuple[str, ...] = Field(
        default=(), description="Resource directories; defaults to 'res'"
    )

    model_config = {"frozen": True}


class ModuleProperties(BaseModel):
    """Properties shared by every module kind."""

    name: str = Field(description="Module name, unique in the graph")
    dir: str = Field(default=".", description="Module directory relative to the source root")
    sdk_version: str = Field(default="", description="SDK to build against; empty means platform")
    manifest: str | None = Field(default=None, description="Manifest relative to the module dir")
    no_standard_libraries: bool = Field(default=False)
    libs: tuple[str, ...] = Field(default=(), description="Names of ordinary dependencies")

    model_config = {"frozen": True}

    @property
    def manifest_file(self) -> str:
        """Manifest name, falling back to the conventional default."""
        return self.manifest if self.manifest is not None else DEFAULT_MANIFEST


class DirectoryCategory(str, Enum):
    """Kinds of directories fed to aapt."""

    ASSETS = "assets"
    RESOURCES = "res"


class Provenance(str, Enum):
    """Where a resolved directory came from."""

    EXPLICIT = "explicit"
    DEFAULT = "default"
    OVERLAY = "overlay"


class DirectoryEntry(BaseModel):
    """One resolved directory and its origin."""

    path: Path
    provenance: Provenance

    model_config = {"frozen": True}


class ResolvedDirectorySet(BaseModel):
    """Ordered directory list for one category; overlays always come first."""

    category: DirectoryCategory
    entries: tuple[DirectoryEntry, ...] = Field(default=())

    model_config = {"frozen": True}

    @property
    def paths(self) -> list[Path]:
        """Directory paths in resolved order."""
        return [entry.path for entry in self.entries]


class CertificateSet(BaseModel):
    """Signing identity of an app: one primary and any additional certificates."""

    primary: str = Field(description="Primary certificate path")
    additional: tuple[str, ...] = Field(default=())

    model_config = {"frozen": True}

    @property
    def all(self) -> list[str]:
        """Certificates in signing order, primary first."""
        return [self.primary, *self.additional]
