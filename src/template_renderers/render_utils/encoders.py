"""String encoders for HTML, XML, JSON, JavaScript, URLs and friends.

Besides the individual encoders, this module provides ``encode``, which
dispatches on the ``encoding`` property of a renderer's configuration block.
"""

import base64
import json
from enum import Enum
from html import escape as html_escape
from html.entities import codepoint2name
from typing import Optional
from urllib.parse import quote

ENCODING_PROPERTY = "encoding"

_JS_ESCAPES = {
    "'": "\\'",
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\n": "\\n",
    "\t": "\\t",
    "\f": "\\f",
    "\r": "\\r",
}

# Characters handled by html.escape; they keep their XML-compatible entities.
_HTML_SPECIAL = frozenset("&<>\"'")


class Encoding(Enum):
    """Encodings supported by the ``encoding`` property."""

    HTML = "html"
    JS = "js"
    JSON = "json"
    UNICODE = "unicode"
    URL = "url"
    XML = "xml"

    @classmethod
    def from_property(cls, value: str) -> Optional["Encoding"]:
        """Return the encoding for a property value, or None if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


def encode(src: Optional[str], properties: dict[str, str]) -> Optional[str]:
    """Encode a string using the encoding named in the properties.

    Args:
        src: Source string.
        properties: Renderer configuration containing the ``encoding`` key.

    Returns:
        The encoded string. None or blank input, empty properties and unknown
        or missing encodings return the source unchanged.

    Example:
        >>> encode("a = test", {"encoding": "url"})
        'a%20%3D%20test'
    """
    if src is None or not src.strip() or not properties:
        return src

    encoding = Encoding.from_property(properties.get(ENCODING_PROPERTY, ""))
    if encoding is None:
        return src

    if encoding is Encoding.HTML:
        return encode_html(src)
    if encoding is Encoding.JS:
        return encode_js(src)
    if encoding is Encoding.JSON:
        return encode_json(src)
    if encoding is Encoding.UNICODE:
        return encode_unicode(src)
    if encoding is Encoding.URL:
        return encode_url(src)
    return encode_xml(src)


def encode_js(src: Optional[str]) -> Optional[str]:
    """Encode a string for inclusion in a JavaScript/ECMAScript string literal.

    Quotes, backslash, slash and the usual whitespace controls get their
    two-character escapes; other control characters become ``\\uXXXX``.
    Non-ASCII characters pass through unchanged.

    Example:
        >>> encode_js("it's")
        "it\\'s"
    """
    if not src:
        return src

    chars = []
    for char in src:
        escaped = _JS_ESCAPES.get(char)
        if escaped is not None:
            chars.append(escaped)
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            chars.append(f"\\u{ord(char):04X}")
        else:
            chars.append(char)
    return "".join(chars)


def html_entities(src: Optional[str]) -> Optional[str]:
    """Convert every code point to an HTML decimal entity.

    Example:
        >>> html_entities("a@b")
        '&#97;&#64;&#98;'
    """
    if not src:
        return src
    return "".join(f"&#{ord(char)};" for char in src)


def to_quoted_printable(src: Optional[str]) -> Optional[str]:
    """Convert a string to quoted-printable.

    ASCII letters and digits are kept; every other UTF-16 code unit is
    written as ``=`` followed by its uppercase hex value, zero-padded to two
    digits.

    Example:
        >>> to_quoted_printable("a b")
        'a=20b'
    """
    if not src:
        return src

    chars = []
    for unit in _utf16_code_units(src):
        if _is_ascii_alphanumeric(unit):
            chars.append(chr(unit))
        else:
            chars.append(f"={unit:02X}")
    return "".join(chars)


def encode_html(src: Optional[str]) -> Optional[str]:
    """Escape HTML special characters and use named entities where available.

    Example:
        >>> encode_html("<a test &>")
        '&lt;a test &amp;&gt;'
    """
    if not src:
        return src

    chars = []
    for char in src:
        if char in _HTML_SPECIAL:
            chars.append(html_escape(char, quote=char == '"'))
        elif ord(char) > 0x7F and ord(char) in codepoint2name:
            chars.append(f"&{codepoint2name[ord(char)]};")
        else:
            chars.append(char)
    return "".join(chars)


def encode_xml(src: Optional[str]) -> Optional[str]:
    """Escape XML special characters.

    Escapes the following characters:
    - & → &amp;
    - < → &lt;
    - > → &gt;
    - " → &quot;
    - ' → &apos;

    Example:
        >>> encode_xml("Fish & Chips")
        'Fish &amp; Chips'
    """
    if not src:
        return src
    # html.escape converts ' to &#x27;, but XML prefers &apos;
    return html_escape(src, quote=True).replace("&#x27;", "&apos;")


def encode_json(src: Optional[str]) -> Optional[str]:
    """Escape a string for use inside a JSON string literal.

    Example:
        >>> encode_json('This is a "test"')
        'This is a \\\\"test\\\\"'
    """
    if not src:
        return src
    return json.dumps(src)[1:-1]


def encode_unicode(src: Optional[str]) -> Optional[str]:
    """Convert every UTF-16 code unit to a ``\\uXXXX`` escape.

    Example:
        >>> encode_unicode("test")
        '\\\\u0074\\\\u0065\\\\u0073\\\\u0074'
    """
    if not src:
        return src
    return "".join(f"\\u{unit:04X}" for unit in _utf16_code_units(src))


def encode_url(src: Optional[str]) -> Optional[str]:
    """Percent-encode a string as UTF-8, keeping RFC 3986 unreserved characters.

    Example:
        >>> encode_url("a = test")
        'a%20%3D%20test'
    """
    if not src:
        return src
    return quote(src, safe="-_.~")


def encode_base64(src: Optional[str]) -> Optional[str]:
    """Encode the UTF-8 bytes of a string as standard Base64.

    Example:
        >>> encode_base64("This is a test.")
        'VGhpcyBpcyBhIHRlc3Qu'
    """
    if not src:
        return src
    return base64.b64encode(src.encode("utf-8")).decode("ascii")


def _utf16_code_units(src: str) -> list[int]:
    data = src.encode("utf-16-be", errors="surrogatepass")
    return [int.from_bytes(data[i : i + 2], "big") for i in range(0, len(data), 2)]


def _is_ascii_alphanumeric(unit: int) -> bool:
    return (
        ord("0") <= unit <= ord("9")
        or ord("A") <= unit <= ord("Z")
        or ord("a") <= unit <= ord("z")
    )
