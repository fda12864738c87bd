"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, Field, field_validator

from template_renderers.transport.http_client import DEFAULT_USER_AGENT


class RenderingConfig(BaseModel):
    """Configuration for locale-sensitive rendering.

    Attributes:
        locale: Locale identifier for month and weekday names (e.g. en_US, fr_FR)
        timezone: IANA time zone id used by date/time renderers, or None for
            the system zone
    """

    locale: str = Field(default="en_US", description="Locale identifier")
    timezone: Optional[str] = Field(
        default=None, description="IANA time zone id (default: system zone)"
    )

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Validate the locale is known to Babel.

        Raises:
            ValueError: If the locale cannot be parsed or has no locale data
        """
        try:
            Locale.parse(v)
        except (ValueError, UnknownLocaleError) as e:
            raise ValueError(f"Invalid locale: {v}. {e}") from e
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        """Validate the time zone is a known IANA zone id.

        Raises:
            ValueError: If the zone id is unknown
        """
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(
                f"Invalid timezone: {v}. Must be an IANA zone id such as Europe/Paris"
            ) from e
        return v


class ServicesConfig(BaseModel):
    """Configuration for the external web services.

    Attributes:
        qr_code_url: QR code generation endpoint (goQR.me compatible)
        shorten_url: URL shortening endpoint (is.gd compatible)
        user_agent: User-Agent header sent to the services
    """

    qr_code_url: str = Field(
        default="https://api.qrserver.com/v1/create-qr-code/",
        description="QR code service URL",
    )
    shorten_url: str = Field(
        default="https://is.gd/create.php",
        description="URL shortening service URL",
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header")

    @field_validator("qr_code_url", "shorten_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL is valid HTTP/HTTPS.

        Raises:
            ValueError: If URL does not start with http:// or https://
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                f"Invalid URL: {v}. Must start with http:// or https://"
            )
        return v


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_card_numbers: Whether to mask credit card numbers in logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/template-renderers.log"),
        description="Log file path"
    )
    redact_card_numbers: bool = Field(
        default=True,
        description="Mask credit card numbers in logs"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.

        Returns:
            Validated log level (uppercase)

        Raises:
            ValueError: If log level is not valid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.

    Attributes:
        rendering: Locale and time zone configuration
        services: External web service configuration
        logging: Logging configuration

    Example:
        >>> config = Config(rendering=RenderingConfig(locale="fr_FR"))
        >>> config.rendering.locale
        'fr_FR'
    """

    rendering: RenderingConfig = RenderingConfig()
    services: ServicesConfig = ServicesConfig()
    logging: LoggingConfig = LoggingConfig()
