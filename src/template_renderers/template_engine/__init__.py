"""Template Engine module.

This module provides the template model, the value renderers invoked by
render tags and template file loading.
"""

from template_renderers.template_engine.loader import TemplateLoader
from template_renderers.template_engine.renderers import (
    RENDERERS,
    UPTIME_ATTRIBUTE,
    ValueRenderer,
    get_renderer,
)
from template_renderers.template_engine.template import (
    ContentType,
    RenderContext,
    Template,
    build_value_id,
)

__all__ = [
    "ContentType",
    "RenderContext",
    "Template",
    "TemplateLoader",
    "ValueRenderer",
    "RENDERERS",
    "UPTIME_ATTRIBUTE",
    "build_value_id",
    "get_renderer",
]
