"""Config module.

This module provides configuration management functionality.
"""

from template_renderers.config.manager import (
    get_logging_config,
    get_rendering_config,
    get_services_config,
    load_config,
)
from template_renderers.config.schema import (
    Config,
    LoggingConfig,
    RenderingConfig,
    ServicesConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Helper functions
    "get_rendering_config",
    "get_services_config",
    "get_logging_config",
    # Configuration models
    "Config",
    "RenderingConfig",
    "ServicesConfig",
    "LoggingConfig",
]
