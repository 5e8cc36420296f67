"""
Runtime Configuration

Central configuration for tree construction defaults and logging.
"""

from __future__ import annotations

import copy
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from segmerkle.crypto.hashing import HashFactory, get_hash_factory
from segmerkle.errors import (
    ConfigException,
    InvalidSegmentSizeException,
    UnsupportedHashAlgorithmException,
)
from segmerkle.merkle.segmenter import check_segment_size

load_dotenv()


DEFAULT_SEGMENT_SIZE = 1024
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class TreeConfig:
    """Defaults used when building trees from configuration."""
    segment_size: int = DEFAULT_SEGMENT_SIZE
    hash_algorithm: str = "sha256"

    def __post_init__(self):
        try:
            check_segment_size(self.segment_size)
        except InvalidSegmentSizeException as e:
            raise ConfigException(e.message, field_path="tree.segment_size") from e
        try:
            get_hash_factory(self.hash_algorithm)
        except UnsupportedHashAlgorithmException as e:
            raise ConfigException(e.message, field_path="tree.hash_algorithm") from e


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (and a .env file)
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SEGMERKLE_SEGMENT_SIZE: Default segment size in bytes
        - SEGMERKLE_HASH_ALGORITHM: hashlib algorithm name
        - SEGMERKLE_LOG_LEVEL: Log level (default: INFO)
        - SEGMERKLE_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv("SEGMERKLE_SEGMENT_SIZE"):
            raw = os.getenv("SEGMERKLE_SEGMENT_SIZE", "")
            try:
                segment_size = int(raw)
            except ValueError as e:
                raise ConfigException(
                    f"SEGMERKLE_SEGMENT_SIZE must be an integer, got {raw!r}",
                    field_path="tree.segment_size",
                ) from e
            overrides.setdefault("tree", {})["segment_size"] = segment_size
        if os.getenv("SEGMERKLE_HASH_ALGORITHM"):
            overrides.setdefault("tree", {})["hash_algorithm"] = os.getenv("SEGMERKLE_HASH_ALGORITHM")

        if os.getenv("SEGMERKLE_LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv("SEGMERKLE_LOG_LEVEL")
        if os.getenv("SEGMERKLE_LOG_FILE"):
            overrides.setdefault("logging", {})["log_file"] = os.getenv("SEGMERKLE_LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree", {})
        logging_data = data.get("logging", {})

        try:
            tree = TreeConfig(**tree_data) if tree_data else TreeConfig()
            log_conf = LoggingConfig(**logging_data) if logging_data else LoggingConfig()
        except TypeError as e:
            raise ConfigException(f"Invalid configuration: {e}") from e

        return cls(
            tree=tree,
            logging=log_conf,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "tree" in overrides:
            merged = {
                "segment_size": new_config.tree.segment_size,
                "hash_algorithm": new_config.tree.hash_algorithm,
                **overrides["tree"],
            }
            new_config.tree = TreeConfig(**merged)

        if "logging" in overrides:
            for key, value in overrides["logging"].items():
                setattr(new_config.logging, key, value)

        return new_config

    def hash_factory(self) -> HashFactory:
        """Hash factory for the configured algorithm."""
        return get_hash_factory(self.tree.hash_algorithm)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "segment_size": self.tree.segment_size,
                "hash_algorithm": self.tree.hash_algorithm,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
            },
            "extra": self.extra,
        }


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=DEFAULT_LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env defaults)."""
    global _default_config
    _default_config = config
