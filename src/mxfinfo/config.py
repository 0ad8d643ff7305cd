"""Configuration management for mxfinfo.

Supports loading configuration from:
1. Environment variables (MXFINFO_*)
2. Config file (~/.mxfinfo/config.yaml)
3. Default values

Example config file (~/.mxfinfo/config.yaml):
    resolver:
      default_edit_rate: "25/1"
      project_name_attribute: "_PJ"
    logging:
      level: "INFO"
      format: "simple"
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from mxfinfo.models import Rational

logger = logging.getLogger(__name__)

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".mxfinfo" / "config.yaml",
    Path.home() / ".config" / "mxfinfo" / "config.yaml",
    Path(".mxfinfo.yaml"),
]


@dataclass
class ResolverConfig:
    """Clip resolution configuration."""

    # Starting point of the longest-track search
    default_edit_rate: str = "25/1"
    # Mob attribute holding the project name when the Preface has none
    project_name_attribute: str = "_PJ"

    @property
    def default_edit_rate_value(self) -> Rational:
        return Rational.parse(self.default_edit_rate)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "simple"


@dataclass
class MXFInfoConfig:
    """Main configuration for mxfinfo."""

    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first readable YAML file."""
    for config_path in locations or CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
                    return data if data else {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Ignoring unreadable config file %s: %s", config_path, e)
                continue
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with MXFINFO_ prefix."""
    return os.environ.get(f"MXFINFO_{key}", default)


def load_config(locations: list[Path] | None = None) -> MXFInfoConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (MXFINFO_*)
    2. Config file (~/.mxfinfo/config.yaml)
    3. Default values

    Raises:
        ValueError: If the default edit rate is not a valid ``num/den``
    """
    file_config = _load_yaml_config(locations)

    # Resolver config
    resolver_config = file_config.get("resolver", {})
    resolver = ResolverConfig(
        default_edit_rate=str(
            _get_env("DEFAULT_EDIT_RATE") or resolver_config.get("default_edit_rate", "25/1")
        ),
        project_name_attribute=_get_env("PROJECT_NAME_ATTRIBUTE")
        or resolver_config.get("project_name_attribute", "_PJ"),
    )
    if not resolver.default_edit_rate_value.is_positive:
        raise ValueError(f"Invalid default edit rate: {resolver.default_edit_rate}")

    # Logging config
    logging_config = file_config.get("logging", {})
    log = LoggingConfig(
        level=(_get_env("LOG_LEVEL") or logging_config.get("level", "INFO")).upper(),
        format=_get_env("LOG_FORMAT") or logging_config.get("format", "simple"),
    )

    return MXFInfoConfig(resolver=resolver, logging=log)


# Global config instance (lazy loaded)
_config: MXFInfoConfig | None = None


def get_config() -> MXFInfoConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
