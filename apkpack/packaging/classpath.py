"""
Include flags contributed by direct dependencies.

SDK prebuilts put their jars on aapt's include path; the platform resource
module contributes its exported resource package. Every other dependency is
consumed by compilation, not packaging.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..core.exceptions import ConfigurationError
from ..core.logging import get_logger

logger = get_logger(__name__)

FRAMEWORK_RES = "framework-res"


@runtime_checkable
class ClasspathProvider(Protocol):
    """A dependency publishing files for the classpath, like an SDK android.jar."""

    def classpath_files(self) -> list[Path]: ...


@runtime_checkable
class ResourcePackageProvider(Protocol):
    """A dependency that may publish an exported resource package."""

    @property
    def name(self) -> str: ...

    def exported_resource_package(self) -> Path | None: ...


def dependency_files(dep: object) -> list[Path]:
    """Files a single direct dependency contributes to aapt's include path."""
    if isinstance(dep, ClasspathProvider):
        return list(dep.classpath_files())

    if isinstance(dep, ResourcePackageProvider) and dep.name == FRAMEWORK_RES:
        package = dep.exported_resource_package()
        if package is None:
            raise ConfigurationError(
                message=f"'{FRAMEWORK_RES}' does not export a resource package",
                module_name=FRAMEWORK_RES,
                property_name="export_package_resources",
            )
        return [package]

    return []


def resolve_dep_flags(direct_deps: Iterable[object]) -> tuple[list[str], list[Path]]:
    """Collect ``-I`` flags and dependency files from direct dependencies.

    Dependencies are visited once each, in the order given.

    Returns:
        The include flags and the files behind them, in visit order.
    """
    flags: list[str] = []
    deps: list[Path] = []
    for dep in direct_deps:
        files = dependency_files(dep)
        flags.extend(f"-I {path}" for path in files)
        deps.extend(files)
    if deps:
        logger.debug("include_dependencies", files=[str(d) for d in deps])
    return flags, deps
