"""Best-effort HTTP GET used by the network-backed renderers.

Each fetch opens its own session and closes it before returning. There is no
connection pooling across calls, no retry and no timeout: a call either
returns the body, or the caller-supplied default content on any failure.
"""

import logging
from typing import Optional
from urllib.parse import urlsplit

import requests
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/111.0"
)

# Inclusive range of status codes treated as success
SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 399


def create_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    """Create a single-use HTTP session with retries disabled.

    Args:
        user_agent: Value of the User-Agent header sent with every request.

    Returns:
        Configured requests.Session. Caller is responsible for closing.

    Example:
        >>> with create_session() as session:
        ...     response = session.get("https://example.com/")
    """
    adapter = HTTPAdapter(max_retries=0)

    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers["User-Agent"] = user_agent
    return session


def fetch_url(
    url: Optional[str],
    default_content: Optional[str],
    *,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Optional[str]:
    """Fetch the body of a URL.

    Args:
        url: URL to fetch.
        default_content: Returned when nothing could be fetched.
        user_agent: User-Agent header value.

    Returns:
        The response body decoded as UTF-8 when the status code is between
        200 and 399, otherwise ``default_content``. Malformed URLs, connection
        failures and other I/O errors also return ``default_content``.

    Example:
        >>> fetch_url("https://example.com/missing", "fallback")
        'fallback'
    """
    host = _host_of(url)
    with create_session(user_agent) as session:
        # Hosts with empty labels raise urllib3 LocationValueError, a ValueError
        try:
            response = session.get(url, timeout=None)
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"An IO error occurred while connecting to {host}: {e}")
            return default_content

        try:
            if SUCCESS_STATUS_MIN <= response.status_code <= SUCCESS_STATUS_MAX:
                logger.debug(f"Fetched {len(response.content)} bytes from {host}")
                return response.content.decode("utf-8", errors="replace")

            logger.warning(
                f"A {response.status_code} status code was returned by {host}"
            )
            return default_content
        finally:
            response.close()


def _host_of(url: Optional[str]) -> str:
    try:
        return urlsplit(url or "").hostname or str(url)
    except ValueError:
        return str(url)
