"""Non-app module kinds the packaging core may meet as dependencies."""

from __future__ import annotations

from pathlib import Path

from ..packaging.context import ModuleContext


class SdkPrebuilt:
    """A prebuilt SDK; its jars go on aapt's include path."""

    def __init__(self, name: str, jars: list[str], libs: list[str] | None = None) -> None:
        self.name = name
        self.jars = list(jars)
        self.libs = list(libs or [])
        self._classpath: list[Path] = []

    def dependencies(self) -> list[str]:
        return list(self.libs)

    def prepare(self, ctx: ModuleContext) -> None:
        self._classpath = [ctx.module_dir / jar for jar in self.jars]

    def classpath_files(self) -> list[Path]:
        return list(self._classpath)


class JavaLibrary:
    """An ordinary library. Compilation consumes it; packaging does not."""

    def __init__(self, name: str, libs: list[str] | None = None) -> None:
        self.name = name
        self.libs = list(libs or [])

    def dependencies(self) -> list[str]:
        return list(self.libs)

    def prepare(self, ctx: ModuleContext) -> None:
        pass
