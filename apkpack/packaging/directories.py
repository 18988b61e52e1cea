"""
Asset and resource directory resolution.

Turns a module's declared directory lists into the ordered directories passed
to aapt, prepending any product overlay that mirrors a resource directory.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from ..core.exceptions import ConfigurationError
from ..core.logging import get_logger
from ..models.app import DirectoryCategory, DirectoryEntry, Provenance, ResolvedDirectorySet

logger = get_logger(__name__)

DEFAULT_DIRS = {
    DirectoryCategory.ASSETS: "assets",
    DirectoryCategory.RESOURCES: "res",
}


def _explicit_entry(module_dir: Path, raw: str, property_name: str, module_name: str) -> DirectoryEntry:
    normalized = os.path.normpath(raw)
    if os.path.isabs(raw) or normalized == ".." or normalized.startswith(".." + os.sep):
        raise ConfigurationError(
            message=f"directory '{raw}' must be relative to the module directory",
            module_name=module_name,
            property_name=property_name,
        )
    path = module_dir / normalized
    if not path.is_dir():
        raise ConfigurationError(
            message=f"directory '{raw}' does not exist",
            context={"path": str(path)},
            module_name=module_name,
            property_name=property_name,
        )
    return DirectoryEntry(path=path, provenance=Provenance.EXPLICIT)


def base_directories(
    explicit_dirs: Sequence[str],
    default_dir: str,
    module_dir: Path,
    *,
    property_name: str = "",
    module_name: str = "",
) -> list[DirectoryEntry]:
    """Declared directories, or the default one when none are declared and it exists."""
    if explicit_dirs:
        return [_explicit_entry(module_dir, d, property_name, module_name) for d in explicit_dirs]

    default = module_dir / default_dir
    if default.is_dir():
        return [DirectoryEntry(path=default, provenance=Provenance.DEFAULT)]
    return []


def overlay_directories(
    base: Sequence[DirectoryEntry],
    overlay_roots: Sequence[Path],
    source_root: Path,
) -> list[DirectoryEntry]:
    """Overlay directories mirroring the base directories, in overlay-root order."""
    overlays: list[DirectoryEntry] = []
    for overlay_root in overlay_roots:
        for entry in base:
            candidate = overlay_root / os.path.relpath(entry.path, source_root)
            if candidate.is_dir():
                overlays.append(DirectoryEntry(path=candidate, provenance=Provenance.OVERLAY))
    return overlays


def resolve_directories(
    category: DirectoryCategory,
    explicit_dirs: Sequence[str],
    module_dir: Path,
    *,
    overlay_roots: Sequence[Path] = (),
    source_root: Path = Path("."),
    module_name: str = "",
) -> ResolvedDirectorySet:
    """Resolve the ordered directory list for one category.

    Args:
        category: Assets or resources. Assets never get overlays.
        explicit_dirs: Declared directories relative to module_dir; may be empty.
        module_dir: The module's directory.
        overlay_roots: Overlay roots in priority order.
        source_root: Root that overlay-relative paths are computed against.
        module_name: Used in error reports.

    Returns:
        The resolved directory set, overlays ahead of every base directory.

    Raises:
        ConfigurationError: If a declared directory is absolute, escapes the
            module directory or does not exist.
    """
    property_name = "asset_dirs" if category == DirectoryCategory.ASSETS else "android_resource_dirs"
    base = base_directories(
        explicit_dirs,
        DEFAULT_DIRS[category],
        module_dir,
        property_name=property_name,
        module_name=module_name,
    )

    overlays: list[DirectoryEntry] = []
    if category == DirectoryCategory.RESOURCES:
        overlays = overlay_directories(base, overlay_roots, source_root)
        if overlays:
            logger.debug("resource_overlays_found", overlays=[str(o.path) for o in overlays])

    return ResolvedDirectorySet(category=category, entries=tuple(overlays + base))
