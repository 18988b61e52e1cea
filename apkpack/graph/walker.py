"""
Dependency-ordered module evaluation.

A small stand-in for a build-graph engine: it wires declared modules to their
direct dependencies and evaluates them one at a time, dependencies first.
"""

from __future__ import annotations

import os
from graphlib import CycleError, TopologicalSorter

from ..core.config import BuildEnvironment
from ..core.exceptions import BuildActionError, ConfigurationError
from ..core.logging import get_logger
from ..core.types import ServiceResult
from ..models.actions import BuildActions
from ..packaging.app import AndroidApp
from ..packaging.context import ModuleContext
from .declarations import (
    AndroidAppDeclaration,
    DeclarationFile,
    JavaLibraryDeclaration,
    SdkPrebuiltDeclaration,
)
from .modules import JavaLibrary, SdkPrebuilt

logger = get_logger(__name__)

Module = AndroidApp | SdkPrebuilt | JavaLibrary


class ModuleGraph:
    """Declared modules and the direct-dependency edges between them."""

    def __init__(self, env: BuildEnvironment, fail_fast: bool = True) -> None:
        self.env = env
        self.fail_fast = fail_fast
        self._modules: dict[str, Module] = {}
        self._dirs: dict[str, str] = {}

    @classmethod
    def from_declarations(
        cls, declarations: DeclarationFile, env: BuildEnvironment, fail_fast: bool = True
    ) -> ModuleGraph:
        graph = cls(env, fail_fast=fail_fast)
        for decl in declarations.modules:
            module: Module
            if isinstance(decl, AndroidAppDeclaration):
                module = AndroidApp(decl.module_properties(), decl.app_config())
            elif isinstance(decl, SdkPrebuiltDeclaration):
                module = SdkPrebuilt(decl.name, decl.jars, decl.libs)
            elif isinstance(decl, JavaLibraryDeclaration):
                module = JavaLibrary(decl.name, decl.libs)
            graph.add(module, decl.dir)
        return graph

    def add(self, module: Module, directory: str = ".") -> None:
        """Register a module.

        Raises:
            ConfigurationError: If the name is already taken or the directory
                is not relative to the source root.
        """
        if module.name in self._modules:
            raise ConfigurationError(message="duplicate module name", module_name=module.name)
        normalized = os.path.normpath(directory)
        if os.path.isabs(directory) or normalized == ".." or normalized.startswith(".." + os.sep):
            raise ConfigurationError(
                message=f"module directory '{directory}' must be relative to the source root",
                module_name=module.name,
                property_name="dir",
            )
        self._modules[module.name] = module
        self._dirs[module.name] = normalized

    def direct_deps(self, name: str) -> list[str]:
        """Direct dependency names of a module, in declaration order, each once.

        Raises:
            ConfigurationError: If a dependency is not declared.
        """
        deps = list(dict.fromkeys(self._modules[name].dependencies()))
        for dep in deps:
            if dep not in self._modules:
                raise ConfigurationError(
                    message=f"depends on undefined module '{dep}'", module_name=name
                )
        return deps

    def order(self, only: str | None = None) -> list[str]:
        """Evaluation order, dependencies first.

        Args:
            only: Restrict to this module and its transitive dependencies.

        Raises:
            ConfigurationError: On unknown modules or dependency cycles.
        """
        if only is not None and only not in self._modules:
            raise ConfigurationError(message=f"unknown module '{only}'")

        roots = [only] if only is not None else list(self._modules)
        sorter: TopologicalSorter[str] = TopologicalSorter()
        seen: set[str] = set()
        pending = list(roots)
        while pending:
            name = pending.pop(0)
            if name in seen:
                continue
            seen.add(name)
            deps = self.direct_deps(name)
            sorter.add(name, *deps)
            pending.extend(deps)

        try:
            return list(sorter.static_order())
        except CycleError as e:
            raise ConfigurationError(
                message="dependency cycle", context={"cycle": e.args[1]}, cause=e
            ) from e

    def context(self, name: str) -> ModuleContext:
        directory = self._dirs[name]
        return ModuleContext(
            name=name,
            module_dir=self.env.source_root / directory,
            env=self.env,
            intermediates_dir=self.env.out_dir / ".intermediates" / directory / name,
            direct_deps=tuple(self._modules[d] for d in self.direct_deps(name)),
        )

    def evaluate(self, only: str | None = None) -> dict[str, ServiceResult[BuildActions]]:
        """Generate build actions for every app module, dependencies first.

        Returns:
            Per-app results keyed by module name. A module whose dependency
            failed is reported as skipped.

        Raises:
            BuildActionError: With fail_fast, the first module failure.
            ConfigurationError: If the graph itself is malformed.
        """
        results: dict[str, ServiceResult[BuildActions]] = {}
        failed: set[str] = set()

        for name in self.order(only):
            module = self._modules[name]
            broken = [d for d in module.dependencies() if d in failed]
            if broken:
                failed.add(name)
                if isinstance(module, AndroidApp):
                    results[name] = ServiceResult.fail(
                        f"skipped: dependency '{broken[0]}' failed", skipped=True
                    )
                continue

            ctx = self.context(name)
            if not isinstance(module, AndroidApp):
                module.prepare(ctx)
                continue

            try:
                actions = module.generate_build_actions(ctx)
            except BuildActionError as e:
                if self.fail_fast:
                    raise
                failed.add(name)
                results[name] = ServiceResult.fail(str(e), state=e.state)
                continue
            results[name] = ServiceResult.ok(actions)

        logger.info(
            "graph_evaluated",
            apps=len(results),
            failed=sum(1 for r in results.values() if not r.success),
        )
        return results