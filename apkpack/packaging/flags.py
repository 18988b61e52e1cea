"""
aapt flag assembly.

Explicit flags from the module declaration always come first; computed
defaults are appended only for options the explicit flags do not already set.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from ..core.config import BuildEnvironment
from ..models.app import AppConfig, DirectoryCategory, ResolvedDirectorySet

COMPRESS_FLAG = "-z"


def has_flag(flags: Iterable[str], prefix: str) -> bool:
    """Whether any flag starts with prefix."""
    return any(flag.startswith(prefix) for flag in flags)


def assemble_flags(
    cfg: AppConfig,
    dirs: Mapping[DirectoryCategory, ResolvedDirectorySet],
    manifest_path: Path,
    dep_flags: Sequence[str],
    sdk_version: str,
    env: BuildEnvironment,
) -> tuple[str, ...]:
    """Build the base flag sequence shared by every packaging invocation.

    Args:
        cfg: The module's app configuration.
        dirs: Resolved asset and resource directories.
        manifest_path: The module manifest.
        dep_flags: Include flags from direct dependencies.
        sdk_version: Declared SDK version; empty selects the platform version.
        env: Build environment.

    Returns:
        The base flags. Callers extend copies, never this sequence.
    """
    flags = list(cfg.aaptflags)
    has_version_code = has_flag(cfg.aaptflags, "--version-code")
    has_version_name = has_flag(cfg.aaptflags, "--version-name")

    flags.append(COMPRESS_FLAG)
    flags.append(f"-M {manifest_path}")

    assets = dirs.get(DirectoryCategory.ASSETS)
    resources = dirs.get(DirectoryCategory.RESOURCES)
    flags.extend(f"-A {d}" for d in (assets.paths if assets is not None else []))
    flags.extend(f"-S {d}" for d in (resources.paths if resources is not None else []))

    flags.extend(dep_flags)

    sdk_version = sdk_version or env.platform_sdk_version
    flags.append(f"--min-sdk-version {sdk_version}")
    flags.append(f"--target-sdk-version {sdk_version}")

    if not has_version_code:
        flags.append(f"--version-code {env.platform_sdk_version}")
    if not has_version_name:
        flags.append(f"--version-name {env.platform_version}-{env.build_number}")

    return tuple(flags)


def with_product_flag(flags: Sequence[str], characteristics: str) -> list[str]:
    """Copy flags, adding ``--product`` unless these flags already set one.

    Each invocation scans its own copy, so passes never share this decision.
    """
    extended = list(flags)
    if not has_flag(extended, "--product"):
        extended.append(f"--product {characteristics}")
    return extended
