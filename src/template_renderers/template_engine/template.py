"""Template model: value and attribute storage, output encoding and rendering.

A template is plain text containing tags:

- ``{{name}}`` is replaced with the value (or, failing that, the attribute)
  called ``name``, passed through the template's output encoder.
- ``{{render:<renderer>:<differentiator>/}}`` is replaced with the output of
  the named renderer for the value or attribute called ``<differentiator>``.
- ``{{render:<renderer>:<differentiator>}}<properties>{{/render}}`` does the
  same, with ``<properties>`` as the renderer's configuration block.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from template_renderers.render_utils.datetime_formats import DEFAULT_LOCALE
from template_renderers.render_utils.encoders import (
    encode_html,
    encode_json,
    encode_xml,
)
from template_renderers.render_utils.network import (
    QR_CODE_SERVICE_URL,
    SHORTEN_URL_SERVICE_URL,
)
from template_renderers.template_engine.renderers import ValueRenderer, get_renderer
from template_renderers.transport.http_client import DEFAULT_USER_AGENT
from template_renderers.utils.exceptions import MissingValueError

if TYPE_CHECKING:
    from template_renderers.config.schema import Config

logger = logging.getLogger(__name__)

RENDER_TAG_PREFIX = "render"


class ContentType(Enum):
    """Declared content type of a template, selecting its output encoder."""

    TXT = "txt"
    HTML = "html"
    XML = "xml"
    JSON = "json"

    def encode(self, value: Optional[str]) -> Optional[str]:
        """Escape a value for this content type. Plain text is left as is."""
        if value is None:
            return None
        if self is ContentType.HTML:
            return encode_html(value)
        if self is ContentType.XML:
            return encode_xml(value)
        if self is ContentType.JSON:
            return encode_json(value)
        return value


@dataclass
class RenderContext:
    """Ambient settings threaded through the renderers.

    Attributes:
        locale: Locale for month and weekday names
        timezone: IANA zone id, or None for the system zone
        qr_code_url: QR code service endpoint
        shorten_url: URL shortening service endpoint
        user_agent: User-Agent header for the web services
    """

    locale: str = DEFAULT_LOCALE
    timezone: Optional[str] = None
    qr_code_url: str = QR_CODE_SERVICE_URL
    shorten_url: str = SHORTEN_URL_SERVICE_URL
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_config(cls, config: "Config") -> "RenderContext":
        """Build a render context from the loaded configuration."""
        return cls(
            locale=config.rendering.locale,
            timezone=config.rendering.timezone,
            qr_code_url=config.services.qr_code_url,
            shorten_url=config.services.shorten_url,
            user_agent=config.services.user_agent,
        )


class Template:
    """A text template with values, attributes and renderer tags.

    Values are set explicitly per render; attributes are longer-lived
    fallbacks (for example a fixed uptime for reproducible output). Renderer
    configuration blocks are collected as default values keyed by the tag's
    value id, ``render:<renderer>:<differentiator>``.

    Example:
        >>> template = Template("Hello {{render:uppercase:name/}}!")
        >>> template.set_value("name", "world")
        >>> template.get_content()
        'Hello WORLD!'
    """

    TAG_PATTERN = re.compile(
        r"\{\{render:(?P<renderer>\w+):(?P<differentiator>[^}]*?)/\}\}"
        r"|\{\{render:(?P<block_renderer>\w+):(?P<block_differentiator>[^}]*)\}\}"
        r"(?P<properties>.*?)\{\{/render\}\}"
        r"|\{\{(?P<name>\w+)\}\}",
        re.DOTALL,
    )

    def __init__(
        self,
        source: str,
        content_type: ContentType | str = ContentType.TXT,
        context: Optional[RenderContext] = None,
        strict: bool = False,
        renderers: Optional[dict[str, ValueRenderer]] = None,
    ) -> None:
        """Initialize a template.

        Args:
            source: Template text
            content_type: Content type or its name (txt, html, xml, json)
            context: Locale, zone and service settings; defaults apply when None
            strict: Raise MissingValueError for ``{{name}}`` tags with no
                value or attribute instead of substituting an empty string
            renderers: Renderer registry; defaults to all built-in renderers
        """
        self.source = source
        self.content_type = ContentType(content_type)
        self.context = context or RenderContext()
        self.strict = strict
        self._renderers = renderers
        self._values: dict[str, str] = {}
        self._attributes: dict[str, Any] = {}
        self._default_values = self._collect_default_values(source)

    @property
    def encoder(self) -> ContentType:
        """Output encoder for this template."""
        return self.content_type

    def set_value(self, name: str, value: str) -> None:
        self._values[name] = value

    def get_value(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def has_value(self, name: str) -> bool:
        return name in self._values

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def get_attribute(self, name: str) -> Any:
        return self._attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def get_value_or_attribute(self, name: str) -> Optional[str]:
        """Return the value called ``name``, falling back to the attribute.

        Attributes are converted with ``str``. Returns None when neither exists.
        """
        if name in self._values:
            return self._values[name]
        attribute = self._attributes.get(name)
        if attribute is None:
            return None
        return str(attribute)

    def get_default_value(self, value_id: str) -> Optional[str]:
        """Return the configuration block of a render tag, if it has one."""
        return self._default_values.get(value_id)

    def get_content(self) -> str:
        """Render the template.

        Returns:
            The template text with every tag replaced

        Raises:
            UnknownRendererError: If a tag names an unregistered renderer
            MissingValueError: If strict and a plain tag has no value
        """
        logger.debug(
            f"Rendering template ({len(self.source)} chars, "
            f"content type {self.content_type.value})"
        )
        return self.TAG_PATTERN.sub(self._replace_tag, self.source)

    def _replace_tag(self, match: re.Match[str]) -> str:
        if match.group("name") is not None:
            return self._replace_value(match.group("name"))

        if match.group("renderer") is not None:
            renderer_name = match.group("renderer")
            differentiator = match.group("differentiator")
        else:
            renderer_name = match.group("block_renderer")
            differentiator = match.group("block_differentiator")

        renderer = get_renderer(renderer_name, self._renderers)
        value_id = build_value_id(renderer_name, differentiator)
        result = renderer.render(self, value_id, differentiator)
        return result or ""

    def _replace_value(self, name: str) -> str:
        value = self.get_value_or_attribute(name)
        if value is None:
            if self.strict:
                raise MissingValueError(
                    f"No value or attribute for placeholder: {{{{{name}}}}}. "
                    f"Set it with set_value() or set_attribute()."
                )
            logger.debug(f"No value for placeholder {name}, substituting empty string")
            return ""
        return self.encoder.encode(value) or ""

    @classmethod
    def _collect_default_values(cls, source: str) -> dict[str, str]:
        default_values: dict[str, str] = {}
        for match in cls.TAG_PATTERN.finditer(source):
            if match.group("block_renderer") is None:
                continue
            value_id = build_value_id(
                match.group("block_renderer"), match.group("block_differentiator")
            )
            default_values[value_id] = match.group("properties")
        return default_values


def build_value_id(renderer_name: str, differentiator: str) -> str:
    """Return the value id of a render tag."""
    return f"{RENDER_TAG_PREFIX}:{renderer_name}:{differentiator}"
