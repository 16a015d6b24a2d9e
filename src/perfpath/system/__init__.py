"""
System configuration package.

Exports:
    - SystemConfig: Complete library configuration
    - AnalyticsConfig: Analytics defaults (frequency, business-day annualization)
    - get_system_config: Get system config singleton
    - reload_system_config: Force reload system config
    - LoggingConfig: Logging output settings
    - configure_logging / reset_logging: Attach or remove perfpath log output
    - get_logger: Structured logger forwarding to stdlib logging
"""

from perfpath.system.config import AnalyticsConfig, SystemConfig, get_system_config, reload_system_config
from perfpath.system.log_system import LoggingConfig, configure_logging, get_logger, reset_logging

__all__ = [
    "SystemConfig",
    "AnalyticsConfig",
    "get_system_config",
    "reload_system_config",
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
