"""Configuration manager for loading and managing configuration.

This module provides the main configuration loading and management functionality,
including support for JSON configuration files, environment variable overrides,
and configuration validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from template_renderers.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from template_renderers.config.schema import (
    Config,
    LoggingConfig,
    RenderingConfig,
    ServicesConfig,
)
from template_renderers.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable prefix for all configuration overrides
ENV_PREFIX = "TEMPLATE_RENDERERS_"

# Environment variable suffix -> (section, field)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "LOCALE": ("rendering", "locale"),
    "TIMEZONE": ("rendering", "timezone"),
    "QR_CODE_URL": ("services", "qr_code_url"),
    "SHORTEN_URL": ("services", "shorten_url"),
    "USER_AGENT": ("services", "user_agent"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FILE": ("logging", "log_file"),
}


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file and environment variables.

    Configuration is loaded with the following precedence (highest to lowest):
    1. CLI arguments (handled by caller)
    2. Environment variables (TEMPLATE_RENDERERS_* prefix)
    3. Configuration file (JSON)
    4. Default values

    Args:
        config_path: Path to configuration file. If None, uses ./config/config.json

    Returns:
        Validated Config instance

    Raises:
        ConfigurationError: If configuration is invalid or malformed

    Example:
        >>> config = load_config(Path("custom/config.json"))
        >>> locale = config.rendering.locale
    """
    # Load .env file if present in project root
    load_dotenv()

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_PATH)

    config_dict = _load_config_file(config_path)
    config_dict = _apply_env_overrides(config_dict)

    try:
        return Config(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Fix: Check your configuration file at {config_path} and ensure all "
            f"values match the expected format."
        ) from e


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration file or return defaults.

    Raises:
        ConfigurationError: If JSON is malformed or the file cannot be read
    """
    if not config_path.exists():
        logger.info(
            f"Config file not found: {config_path}. Using default configuration."
        )
        # Return a deep copy of defaults to avoid mutation
        return json.loads(json.dumps(DEFAULT_CONFIG))

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_dict = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file: {config_path}\n"
            f"Error: {e}\n"
            f"Fix: Check JSON syntax at line {e.lineno}, column {e.colno}"
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {config_path}\n"
            f"Error: {e}\n"
            f"Fix: Check file permissions and path"
        ) from e

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Invalid config file: {config_path}\n"
            f"Fix: The top-level JSON value must be an object"
        )

    logger.info(f"Loaded configuration from {config_path}")
    return config_dict


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides with TEMPLATE_RENDERERS_ prefix.

    Environment variables follow the pattern: TEMPLATE_RENDERERS_<FIELD>
    For example: TEMPLATE_RENDERERS_LOCALE, TEMPLATE_RENDERERS_LOG_LEVEL

    Returns:
        Updated configuration dictionary with environment overrides applied
    """
    for suffix, (section, field) in ENV_OVERRIDES.items():
        if value := os.getenv(f"{ENV_PREFIX}{suffix}"):
            config_dict.setdefault(section, {})[field] = value
            logger.debug(f"Override: {field} from environment")

    if redact := os.getenv(f"{ENV_PREFIX}REDACT_CARD_NUMBERS"):
        config_dict.setdefault("logging", {})["redact_card_numbers"] = _parse_bool(
            redact
        )
        logger.debug("Override: redact_card_numbers from environment")

    return config_dict


def _parse_bool(value: str) -> bool:
    """Parse boolean value from string (case-insensitive)."""
    return value.lower() in ("true", "1", "yes", "on")


def get_rendering_config(config: Config) -> RenderingConfig:
    """Get locale and time zone configuration."""
    return config.rendering


def get_services_config(config: Config) -> ServicesConfig:
    """Get external web service configuration."""
    return config.services


def get_logging_config(config: Config) -> LoggingConfig:
    """Get logging configuration.

    Example:
        >>> config = load_config()
        >>> logging_cfg = get_logging_config(config)
        >>> log_level = logging_cfg.level
    """
    return config.logging
