"""Per-module evaluation context handed to modules by the graph walker."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..core.config import BuildEnvironment


@dataclass(frozen=True)
class ModuleContext:
    """Read-only view of one module's place in the build.

    Attributes:
        name: Module name.
        module_dir: Module directory, anchored at the source root.
        env: Build environment.
        intermediates_dir: Where this module's generated files go.
        direct_deps: Direct dependency modules, in declaration order.
    """

    name: str
    module_dir: Path
    env: BuildEnvironment
    intermediates_dir: Path
    direct_deps: tuple[object, ...] = field(default=())
