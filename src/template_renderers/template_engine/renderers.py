"""Value renderers: adapters between template tags and the rendering routines.

Each renderer resolves a value from the template, optionally parses the tag's
configuration block, calls one routine and returns the result, passed through
the template's output encoder unless the routine output is already final.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional
from zoneinfo import ZoneInfoNotFoundError

import psutil

from template_renderers.render_utils import (
    abbreviate,
    beat_time,
    capitalize_words,
    date_iso,
    date_time_iso,
    date_time_rfc2822,
    encode,
    encode_base64,
    encode_html,
    encode_js,
    encode_json,
    encode_unicode,
    encode_url,
    encode_xml,
    format_credit_card,
    html_entities,
    lowercase,
    mask,
    normalize,
    qr_code,
    rot13,
    shorten_url,
    swap_case,
    time_iso,
    to_quoted_printable,
    trim,
    uncapitalize,
    uppercase,
    uptime,
    year_iso,
)
from template_renderers.render_utils.datetime_formats import resolve_zone
from template_renderers.render_utils.masking import DEFAULT_MASK
from template_renderers.render_utils.network import DEFAULT_QR_CODE_SIZE
from template_renderers.render_utils.properties import (
    get_bool_property,
    get_int_property,
    parse_properties_string,
)
from template_renderers.utils.exceptions import UnknownRendererError

if TYPE_CHECKING:
    from template_renderers.template_engine.template import Template

logger = logging.getLogger(__name__)

# Template attribute holding a fixed uptime in milliseconds
UPTIME_ATTRIBUTE = "uptime"

DEFAULT_ABBREVIATE_MARK = "..."
DEFAULT_ABBREVIATE_MAX = -1


class ValueRenderer(ABC):
    """Base class for renderers invoked by ``{{render:<name>:...}}`` tags."""

    name: str = ""

    @abstractmethod
    def render(
        self, template: "Template", value_id: str, differentiator: str
    ) -> Optional[str]:
        """Render the value or attribute named by ``differentiator``.

        Args:
            template: Template being rendered
            value_id: Id of the tag, used to look up its configuration block
            differentiator: Name of the value or attribute to render

        Returns:
            The rendered text
        """

    @staticmethod
    def properties(template: "Template", value_id: str) -> dict[str, str]:
        """Parse the configuration block of the tag, empty when there is none."""
        return parse_properties_string(template.get_default_value(value_id))


class TransformRenderer(ValueRenderer):
    """Applies a single-argument routine to the value and encodes the result."""

    transform: Callable[[Optional[str]], Optional[str]]

    def render(self, template, value_id, differentiator):
        value = template.get_value_or_attribute(differentiator)
        return template.encoder.encode(type(self).transform(value))


class EncodingRenderer(ValueRenderer):
    """Applies an encoder; the output is final and bypasses the template encoder.

    When ``chain_encoding`` is set, the ``encoding`` key of the configuration
    block applies a second encoding on top.
    """

    encoder: Callable[[Optional[str]], Optional[str]]
    chain_encoding = True

    def render(self, template, value_id, differentiator):
        value = type(self).encoder(template.get_value_or_attribute(differentiator))
        if not self.chain_encoding:
            return value
        return encode(value, self.properties(template, value_id))


class DateTimeRenderer(ValueRenderer):
    """Formats the current instant in the template's zone and locale."""

    formatter: Callable[..., str]

    def render(self, template, value_id, differentiator):
        context = template.context
        return template.encoder.encode(
            type(self).formatter(tz=context.timezone, locale=context.locale)
        )


class Abbreviate(ValueRenderer):
    """Abbreviates the value to ``max`` characters, ending with ``mark``."""

    name = "abbreviate"

    def render(self, template, value_id, differentiator):
        properties = self.properties(template, value_id)
        mark = properties.get("mark", DEFAULT_ABBREVIATE_MARK)
        max_length = get_int_property(properties, "max", DEFAULT_ABBREVIATE_MAX)
        return template.encoder.encode(
            abbreviate(template.get_value_or_attribute(differentiator), max_length, mark)
        )


class BeatTime(ValueRenderer):
    name = "beatTime"

    def render(self, template, value_id, differentiator):
        return template.encoder.encode(beat_time())


class CapitalizeWords(TransformRenderer):
    name = "capitalizeWords"
    transform = capitalize_words


class DateIso(DateTimeRenderer):
    name = "dateIso"
    formatter = date_iso


class DateTimeIso(DateTimeRenderer):
    """ISO 8601 date and time; the ``tz`` property overrides the zone."""

    name = "dateTimeIso"
    formatter = date_time_iso

    def render(self, template, value_id, differentiator):
        context = template.context
        zone = self.properties(template, value_id).get("tz", context.timezone)
        try:
            resolve_zone(zone)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            logger.warning(f"Unknown time zone {zone!r}, using the default zone")
            zone = context.timezone
        return template.encoder.encode(date_time_iso(tz=zone, locale=context.locale))


class DateTimeRfc2822(DateTimeRenderer):
    name = "dateTimeRfc2822"
    formatter = date_time_rfc2822


class EncodeBase64(EncodingRenderer):
    name = "encodeBase64"
    encoder = encode_base64


class EncodeHtml(EncodingRenderer):
    name = "encodeHtml"
    encoder = encode_html
    chain_encoding = False


class EncodeHtmlEntities(EncodingRenderer):
    name = "encodeHtmlEntities"
    encoder = html_entities


class EncodeJs(EncodingRenderer):
    name = "encodeJs"
    encoder = encode_js


class EncodeJson(EncodingRenderer):
    name = "encodeJson"
    encoder = encode_json


class EncodeQp(EncodingRenderer):
    name = "encodeQp"
    encoder = to_quoted_printable
    chain_encoding = False


class EncodeUnicode(EncodingRenderer):
    name = "encodeUnicode"
    encoder = encode_unicode


class EncodeUrl(EncodingRenderer):
    name = "encodeUrl"
    encoder = encode_url


class EncodeXml(EncodingRenderer):
    name = "encodeXml"
    encoder = encode_xml
    chain_encoding = False


class FormatCreditCard(TransformRenderer):
    name = "formatCreditCard"
    transform = format_credit_card


class Lowercase(TransformRenderer):
    name = "lowercase"
    transform = lowercase


class Mask(ValueRenderer):
    """Masks the value; configured by ``mask``, ``unmasked`` and ``fromStart``."""

    name = "mask"

    def render(self, template, value_id, differentiator):
        properties = self.properties(template, value_id)
        return template.encoder.encode(
            mask(
                template.get_value_or_attribute(differentiator),
                properties.get("mask", DEFAULT_MASK),
                get_int_property(properties, "unmasked", 0),
                get_bool_property(properties, "fromStart", False),
            )
        )


class Normalize(TransformRenderer):
    name = "normalize"
    transform = normalize


class QrCode(ValueRenderer):
    """SVG QR code for the value; ``size`` defaults to 150x150."""

    name = "qrCode"

    def render(self, template, value_id, differentiator):
        size = self.properties(template, value_id).get("size", DEFAULT_QR_CODE_SIZE)
        return qr_code(
            template.get_value_or_attribute(differentiator),
            size,
            service_url=template.context.qr_code_url,
            user_agent=template.context.user_agent,
        )


class Rot13(TransformRenderer):
    name = "rot13"
    transform = rot13


class ShortenUrl(ValueRenderer):
    name = "shortenUrl"

    def render(self, template, value_id, differentiator):
        return shorten_url(
            template.get_value_or_attribute(differentiator),
            service_url=template.context.shorten_url,
            user_agent=template.context.user_agent,
        )


class SwapCase(TransformRenderer):
    name = "swapCase"
    transform = swap_case


class TimeIso(DateTimeRenderer):
    name = "timeIso"
    formatter = time_iso


class Trim(TransformRenderer):
    name = "trim"
    transform = trim


class Uncapitalize(TransformRenderer):
    name = "uncapitalize"
    transform = uncapitalize


class Uppercase(TransformRenderer):
    name = "uppercase"
    transform = uppercase


class Uptime(ValueRenderer):
    """Uptime from the ``uptime`` attribute (milliseconds) or of this process."""

    name = "uptime"

    def render(self, template, value_id, differentiator):
        properties = self.properties(template, value_id)
        millis = process_uptime_millis()
        if template.has_attribute(UPTIME_ATTRIBUTE):
            try:
                millis = int(template.get_attribute(UPTIME_ATTRIBUTE))
            except (TypeError, ValueError):
                logger.warning(
                    f"Invalid {UPTIME_ATTRIBUTE} attribute, using the process uptime"
                )
        return template.encoder.encode(uptime(millis, properties))


class Year(DateTimeRenderer):
    name = "year"
    formatter = year_iso


def process_uptime_millis() -> int:
    """Milliseconds since the current process started."""
    started = psutil.Process().create_time()
    return max(int((time.time() - started) * 1000), 0)


RENDERERS: dict[str, ValueRenderer] = {
    renderer.name: renderer
    for renderer in (
        Abbreviate(),
        BeatTime(),
        CapitalizeWords(),
        DateIso(),
        DateTimeIso(),
        DateTimeRfc2822(),
        EncodeBase64(),
        EncodeHtml(),
        EncodeHtmlEntities(),
        EncodeJs(),
        EncodeJson(),
        EncodeQp(),
        EncodeUnicode(),
        EncodeUrl(),
        EncodeXml(),
        FormatCreditCard(),
        Lowercase(),
        Mask(),
        Normalize(),
        QrCode(),
        Rot13(),
        ShortenUrl(),
        SwapCase(),
        TimeIso(),
        Trim(),
        Uncapitalize(),
        Uppercase(),
        Uptime(),
        Year(),
    )
}


def get_renderer(
    name: str, renderers: Optional[dict[str, ValueRenderer]] = None
) -> ValueRenderer:
    """Look up a renderer by name.

    Raises:
        UnknownRendererError: If no renderer is registered under ``name``
    """
    registry = RENDERERS if renderers is None else renderers
    try:
        return registry[name]
    except KeyError:
        raise UnknownRendererError(
            f"Unknown renderer: {name}. "
            f"Available renderers: {', '.join(sorted(registry))}"
        ) from None
