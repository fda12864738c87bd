"""Transport module.

This module provides the best-effort HTTP client used by network-backed renderers.
"""

from template_renderers.transport.http_client import (
    DEFAULT_USER_AGENT,
    create_session,
    fetch_url,
)

__all__ = [
    "DEFAULT_USER_AGENT",
    "create_session",
    "fetch_url",
]
