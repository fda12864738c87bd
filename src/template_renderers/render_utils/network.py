"""Renderers backed by external web services: QR codes and short URLs.

Both fall back to their input whenever the service cannot be reached.
"""

import re
from typing import Optional

from template_renderers.render_utils.encoders import encode_url
from template_renderers.transport.http_client import DEFAULT_USER_AGENT, fetch_url

DEFAULT_QR_CODE_SIZE = "150x150"
QR_CODE_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/"
SHORTEN_URL_SERVICE_URL = "https://is.gd/create.php"

HTTP_URL_PATTERN = re.compile(r"[Hh][Tt][Tt][Pp][Ss]?://\w.*", re.ASCII)


def qr_code(
    src: Optional[str],
    size: str = DEFAULT_QR_CODE_SIZE,
    *,
    service_url: str = QR_CODE_SERVICE_URL,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Optional[str]:
    """Generate an SVG QR code for the given data using goQR.me.

    Args:
        src: Data to encode.
        size: QR code size, e.g. ``150x150``.
        service_url: QR code service endpoint.
        user_agent: User-Agent header value.

    Returns:
        The SVG document, or ``src`` if the service could not be reached.
        None and blank input are returned unchanged.
    """
    if src is None or not src.strip():
        return src

    url = f"{service_url}?format=svg&size={encode_url(size)}&data={encode_url(src.strip())}"
    return fetch_url(url, src, user_agent=user_agent)


def shorten_url(
    url: Optional[str],
    *,
    service_url: str = SHORTEN_URL_SERVICE_URL,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Optional[str]:
    """Shorten an http or https URL using is.gd.

    Args:
        url: URL to shorten.
        service_url: URL shortening service endpoint.
        user_agent: User-Agent header value.

    Returns:
        The short URL, or ``url`` if it is not an http(s) URL or the service
        could not be reached.
    """
    if url is None or not url.strip() or not HTTP_URL_PATTERN.fullmatch(url):
        return url

    request_url = f"{service_url}?format=simple&url={encode_url(url.strip())}"
    return fetch_url(request_url, url, user_agent=user_agent)
