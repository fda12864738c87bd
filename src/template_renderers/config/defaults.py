"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Default configuration dictionary
# This is used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "rendering": {
        # Locale for month and weekday names
        "locale": "en_US",
        # No time zone override: use the system zone
        "timezone": None,
    },
    "services": {
        "qr_code_url": "https://api.qrserver.com/v1/create-qr-code/",
        "shorten_url": "https://is.gd/create.php",
        "user_agent": (
            "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/111.0"
        ),
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/template-renderers.log",
        # Card numbers are masked in logs unless the user opts out
        "redact_card_numbers": True,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"
