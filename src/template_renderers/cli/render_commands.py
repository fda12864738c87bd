"""Single-value rendering CLI commands.

Commands:
    render <renderer> <value> - Render one value with a named renderer
    list - List the registered renderers
"""

import logging
from typing import Optional

import click

from template_renderers.template_engine import (
    RENDERERS,
    ContentType,
    RenderContext,
    Template,
    get_renderer,
)
from template_renderers.utils.exceptions import TemplateError

logger = logging.getLogger(__name__)

# Name under which the command-line value is stored in the template
VALUE_NAME = "value"

CONTENT_TYPE_CHOICES = [content_type.value for content_type in ContentType]


def build_render_source(renderer_name: str, properties: Optional[str]) -> str:
    """Return a one-tag template rendering the value with the given renderer."""
    if properties:
        return f"{{{{render:{renderer_name}:{VALUE_NAME}}}}}{properties}{{{{/render}}}}"
    return f"{{{{render:{renderer_name}:{VALUE_NAME}/}}}}"


@click.command(name="render")
@click.argument("renderer")
@click.argument("value")
@click.option(
    "--properties",
    "-p",
    default=None,
    help="Renderer configuration block, one key=value per line",
)
@click.option(
    "--content-type",
    type=click.Choice(CONTENT_TYPE_CHOICES),
    default=ContentType.TXT.value,
    show_default=True,
    help="Output encoding applied to the rendered value",
)
@click.pass_context
def render_command(
    ctx: click.Context,
    renderer: str,
    value: str,
    properties: Optional[str],
    content_type: str,
) -> None:
    """Render VALUE with the RENDERER named renderer.

    Examples:

        template-renderers render capitalizeWords "hello world"

        template-renderers render abbreviate "This is a test." -p $'max=9\\nmark='
    """
    try:
        get_renderer(renderer)
        template = Template(
            build_render_source(renderer, properties),
            content_type=content_type,
            context=RenderContext.from_config(ctx.obj["config"]),
        )
        template.set_value(VALUE_NAME, value)
        logger.info(f"Rendering value with {renderer}")
        click.echo(template.get_content())
    except TemplateError as e:
        click.secho(f"✗ Render failed: {e}", fg="red", err=True)
        logger.error(f"Render failed for {renderer}: {e}")
        raise click.exceptions.Exit(1)


@click.command(name="list")
def list_command() -> None:
    """List the registered renderers."""
    for name in sorted(RENDERERS):
        click.echo(name)
