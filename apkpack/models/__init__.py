"""Data models for apkpack."""

from .actions import BuildActions, InstallDeclaration, InvocationKind, PackagingInvocation
from .app import (
    DEFAULT_MANIFEST,
    AppConfig,
    CertificateSet,
    DirectoryCategory,
    DirectoryEntry,
    ModuleProperties,
    Provenance,
    ResolvedDirectorySet,
)

__all__ = [
    "BuildActions",
    "InstallDeclaration",
    "InvocationKind",
    "PackagingInvocation",
    "DEFAULT_MANIFEST",
    "AppConfig",
    "CertificateSet",
    "DirectoryCategory",
    "DirectoryEntry",
    "ModuleProperties",
    "Provenance",
    "ResolvedDirectorySet",
]
