"""
Runtime Configuration Module

Provides configuration loading and logging setup for segmerkle.
"""

from .runtime import (
    DEFAULT_SEGMENT_SIZE,
    TreeConfig,
    LoggingConfig,
    RuntimeConfig,
    setup_logging,
    get_default_config,
    set_default_config,
)

__all__ = [
    "DEFAULT_SEGMENT_SIZE",
    "TreeConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "setup_logging",
    "get_default_config",
    "set_default_config",
]
