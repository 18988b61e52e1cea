"""
Configuration management for apkpack.

Provides centralized, type-safe configuration with environment variable overrides
and defaults matching the platform build for every packaging input.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()

DEFAULT_CERTIFICATE_DIR = "build/target/product/security"


class BuildEnvironment(BaseModel):
    """Read-only product and platform values consumed by every module evaluation."""

    platform_sdk_version: str = Field(default="25", description="Platform SDK version")
    platform_version: str = Field(default="7.1", description="Platform version string")
    build_number: str = Field(default="eng", description="Build number suffix for version names")
    product_aapt_characteristics: str = Field(
        default="default", description="Value passed to --product when not set explicitly"
    )
    default_app_certificate_dir: str = Field(
        default=DEFAULT_CERTIFICATE_DIR,
        description="Directory searched for bare certificate names",
    )
    default_app_certificate: str = Field(
        default="",
        description="Product-wide certificate; <certificate dir>/testkey when empty",
    )
    source_root: Path = Field(default=Path("."), description="Top of the source tree")
    resource_overlays: list[Path] = Field(
        default_factory=list, description="Resource overlay roots, highest priority first"
    )
    out_dir: Path = Field(default=Path("out"), description="Intermediate output directory")
    install_dir: Path = Field(
        default=Path("out/target/product/generic/system"),
        description="Install root for packaged apps",
    )

    model_config = {"frozen": True}

    @property
    def default_certificate(self) -> str:
        """Certificate used when a module names none."""
        if self.default_app_certificate:
            return self.default_app_certificate
        return os.path.join(self.default_app_certificate_dir, "testkey")

    def overlay_roots(self) -> list[Path]:
        """Overlay roots anchored at the source tree."""
        return [self.source_root / overlay for overlay in self.resource_overlays]


class WalkerConfig(BaseModel):
    """Module evaluation configuration."""

    fail_fast: bool = Field(default=True, description="Stop at the first failed module")


class Config(BaseModel):
    """Root configuration for apkpack."""

    project_name: str = Field(default="apkpack", description="Project identifier")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    environment: BuildEnvironment = Field(default_factory=BuildEnvironment)
    walker: WalkerConfig = Field(default_factory=WalkerConfig)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        overlays = os.environ.get("APKPACK_RESOURCE_OVERLAYS", "")
        return cls(
            log_level=os.environ.get("APKPACK_LOG_LEVEL", "INFO"),  # type: ignore
            environment=BuildEnvironment(
                platform_sdk_version=os.environ.get("APKPACK_PLATFORM_SDK_VERSION", "25"),
                platform_version=os.environ.get("APKPACK_PLATFORM_VERSION", "7.1"),
                build_number=os.environ.get("APKPACK_BUILD_NUMBER", "eng"),
                product_aapt_characteristics=os.environ.get(
                    "APKPACK_PRODUCT_AAPT_CHARACTERISTICS", "default"
                ),
                default_app_certificate_dir=os.environ.get(
                    "APKPACK_DEFAULT_APP_CERTIFICATE_DIR", DEFAULT_CERTIFICATE_DIR
                ),
                default_app_certificate=os.environ.get("APKPACK_DEFAULT_APP_CERTIFICATE", ""),
                source_root=Path(os.environ.get("APKPACK_SOURCE_ROOT", ".")),
                resource_overlays=[Path(p) for p in overlays.split(":") if p],
                out_dir=Path(os.environ.get("APKPACK_OUT_DIR", "out")),
                install_dir=Path(
                    os.environ.get("APKPACK_INSTALL_DIR", "out/target/product/generic/system")
                ),
            ),
            walker=WalkerConfig(
                fail_fast=os.environ.get("APKPACK_FAIL_FAST", "true").lower() == "true",
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
