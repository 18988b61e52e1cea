"""Core infrastructure components for apkpack."""

from .config import BuildEnvironment, Config, get_config
from .exceptions import (
    ApkPackError,
    BuildActionError,
    ConfigurationError,
    ManifestNotFoundError,
)
from .logging import get_logger, setup_logging
from .types import ActionState, ServiceResult

__all__ = [
    "BuildEnvironment",
    "Config",
    "get_config",
    "ApkPackError",
    "BuildActionError",
    "ConfigurationError",
    "ManifestNotFoundError",
    "get_logger",
    "setup_logging",
    "ActionState",
    "ServiceResult",
]
