"""Module declarations and dependency-ordered evaluation."""

from .declarations import DeclarationFile, load_declarations
from .modules import JavaLibrary, SdkPrebuilt
from .walker import ModuleGraph

__all__ = ["DeclarationFile", "load_declarations", "JavaLibrary", "SdkPrebuilt", "ModuleGraph"]
