"""System configuration for perfpath.

One configuration object for the whole library, loaded from YAML:

    logging:
      level: DEBUG
      format: json
    analytics:
      business_days: true
      default_frequency: monthly

Lookup order: explicit path, then ``$PERFPATH_CONFIG``, then ``perfpath.yaml``
in the working directory. Missing file means defaults.

A ``logging:`` block in a loaded file is applied with configure_logging();
without one, logging output is left to the host application.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from perfpath.calendar.enums import Frequency
from perfpath.system.log_system import LoggingConfig, configure_logging, get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "PERFPATH_CONFIG"
DEFAULT_CONFIG_FILE = "perfpath.yaml"


class AnalyticsConfig(BaseModel):
    """Defaults applied by the analytics functions when the caller passes none."""

    business_days: bool = Field(
        default=False,
        description="Annualize daily series with 250 business days instead of 365.25 calendar days",
    )
    default_frequency: Frequency = Field(
        default=Frequency.MONTHLY,
        description="Sampling frequency assumed when none is given",
    )


class SystemConfig(BaseModel):
    """Complete library configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "SystemConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping: {path}")
        return cls(**data)


_system_config: SystemConfig | None = None


def _resolve_config_path(path: Path | None) -> Path | None:
    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    candidate = Path.cwd() / DEFAULT_CONFIG_FILE
    if candidate.exists():
        return candidate
    return None


def get_system_config(path: Path | None = None) -> SystemConfig:
    """
    Get the system configuration singleton.

    Loaded on first call; later calls return the cached instance.

    Args:
        path: Optional explicit config file (only honored on first load)

    Returns:
        SystemConfig instance
    """
    global _system_config
    if _system_config is None:
        _system_config = _load(path)
    return _system_config


def reload_system_config(path: Path | None = None) -> SystemConfig:
    """Force reload of the system configuration."""
    global _system_config
    _system_config = _load(path)
    return _system_config


def _load(path: Path | None) -> SystemConfig:
    resolved = _resolve_config_path(path)
    if resolved is None:
        logger.debug("config.defaults_used")
        return SystemConfig()
    if not resolved.exists():
        raise FileNotFoundError(f"Configuration file not found: {resolved}")
    config = SystemConfig.from_yaml(resolved)
    if "logging" in config.model_fields_set:
        configure_logging(config.logging)
    logger.info("config.loaded", path=str(resolved))
    return config
