"""Packaging core: turns app module declarations into aapt invocations."""

from .app import AndroidApp
from .certificates import resolve_certificates
from .classpath import ClasspathProvider, ResourcePackageProvider, resolve_dep_flags
from .context import ModuleContext
from .deps import AAPT_IGNORE_FILENAMES, collect_deps
from .directories import resolve_directories
from .flags import assemble_flags, with_product_flag

__all__ = [
    "AndroidApp",
    "resolve_certificates",
    "ClasspathProvider",
    "ResourcePackageProvider",
    "resolve_dep_flags",
    "ModuleContext",
    "AAPT_IGNORE_FILENAMES",
    "collect_deps",
    "resolve_directories",
    "assemble_flags",
    "with_product_flag",
]
