"""Render Utils module.

This module provides the value-formatting routines used by the renderers:
text transforms, encoders, date/time and uptime formatters, masking, credit
card validation, slug normalization, network-backed formatters and the
properties-string parser.
"""

from template_renderers.render_utils.credit_card import (
    format_credit_card,
    validate_credit_card,
)
from template_renderers.render_utils.datetime_formats import (
    DEFAULT_LOCALE,
    ISO_8601_DATE_PATTERN,
    ISO_8601_PATTERN,
    ISO_8601_TIME_PATTERN,
    ISO_8601_YEAR_PATTERN,
    RFC_2822_PATTERN,
    beat_time,
    date_iso,
    date_time_iso,
    date_time_rfc2822,
    time_iso,
    year_iso,
)
from template_renderers.render_utils.encoders import (
    ENCODING_PROPERTY,
    Encoding,
    encode,
    encode_base64,
    encode_html,
    encode_js,
    encode_json,
    encode_unicode,
    encode_url,
    encode_xml,
    html_entities,
    to_quoted_printable,
)
from template_renderers.render_utils.masking import mask
from template_renderers.render_utils.network import qr_code, shorten_url
from template_renderers.render_utils.normalizer import COMMON_SEPARATORS, normalize
from template_renderers.render_utils.properties import parse_properties_string
from template_renderers.render_utils.text import (
    abbreviate,
    capitalize_words,
    lowercase,
    plural,
    rot13,
    swap_case,
    trim,
    uncapitalize,
    uppercase,
)
from template_renderers.render_utils.uptime import DEFAULT_UPTIME_LABELS, uptime
from template_renderers.transport.http_client import fetch_url

__all__ = [
    # Text transforms
    "abbreviate",
    "capitalize_words",
    "lowercase",
    "plural",
    "rot13",
    "swap_case",
    "trim",
    "uncapitalize",
    "uppercase",
    # Encoders
    "ENCODING_PROPERTY",
    "Encoding",
    "encode",
    "encode_base64",
    "encode_html",
    "encode_js",
    "encode_json",
    "encode_unicode",
    "encode_url",
    "encode_xml",
    "html_entities",
    "to_quoted_printable",
    # Date/time
    "DEFAULT_LOCALE",
    "ISO_8601_DATE_PATTERN",
    "ISO_8601_PATTERN",
    "ISO_8601_TIME_PATTERN",
    "ISO_8601_YEAR_PATTERN",
    "RFC_2822_PATTERN",
    "beat_time",
    "date_iso",
    "date_time_iso",
    "date_time_rfc2822",
    "time_iso",
    "year_iso",
    # Uptime
    "DEFAULT_UPTIME_LABELS",
    "uptime",
    # Masking, credit cards, normalizer
    "mask",
    "format_credit_card",
    "validate_credit_card",
    "COMMON_SEPARATORS",
    "normalize",
    # Network
    "fetch_url",
    "qr_code",
    "shorten_url",
    # Properties
    "parse_properties_string",
]
