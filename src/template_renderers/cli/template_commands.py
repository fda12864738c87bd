"""Template rendering CLI commands.

Commands:
    template render <file> - Render a template file with values and attributes
"""

import logging
from pathlib import Path
from typing import Optional

import click

from template_renderers.template_engine import (
    ContentType,
    RenderContext,
    Template,
    TemplateLoader,
)
from template_renderers.utils.exceptions import TemplateError

logger = logging.getLogger(__name__)

# File suffix -> content type used when --content-type is not given
SUFFIX_CONTENT_TYPES = {
    ".html": ContentType.HTML,
    ".htm": ContentType.HTML,
    ".xml": ContentType.XML,
    ".json": ContentType.JSON,
}


def parse_assignments(
    ctx: click.Context, param: click.Parameter, assignments: tuple[str, ...]
) -> dict[str, str]:
    """Parse repeated ``name=value`` options into a dictionary."""
    parsed: dict[str, str] = {}
    for assignment in assignments:
        name, separator, value = assignment.partition("=")
        if not separator or not name:
            raise click.BadParameter(
                f"Expected name=value, got: {assignment}", ctx=ctx, param=param
            )
        parsed[name] = value
    return parsed


def content_type_for(file: Path) -> ContentType:
    """Guess the content type of a template from its file suffix."""
    return SUFFIX_CONTENT_TYPES.get(file.suffix.lower(), ContentType.TXT)


@click.group(name="template")
def template_group() -> None:
    """Template rendering commands."""


@template_group.command(name="render")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--value",
    "-v",
    "values",
    multiple=True,
    callback=parse_assignments,
    help="Template value as name=value (repeatable)",
)
@click.option(
    "--attribute",
    "-a",
    "attributes",
    multiple=True,
    callback=parse_assignments,
    help="Template attribute as name=value (repeatable)",
)
@click.option(
    "--content-type",
    type=click.Choice([content_type.value for content_type in ContentType]),
    default=None,
    help="Output encoding (default: guessed from the file suffix)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail when a {{name}} tag has no value or attribute",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the rendered template to a file instead of stdout",
)
@click.pass_context
def render_template_command(
    ctx: click.Context,
    file: Path,
    values: dict[str, str],
    attributes: dict[str, str],
    content_type: Optional[str],
    strict: bool,
    output: Optional[Path],
) -> None:
    """Render a template file.

    Exit Codes:
        0: Template rendered
        1: Template could not be loaded or rendered

    Examples:
        template-renderers template render card.txt -v card=4342256562440179

        template-renderers template render status.html -a uptime=90000000
    """
    try:
        loader = TemplateLoader()
        source = loader.load_from_file(file)

        template = Template(
            source,
            content_type=content_type or content_type_for(file),
            context=RenderContext.from_config(ctx.obj["config"]),
            strict=strict,
        )
        for name, value in values.items():
            template.set_value(name, value)
        for name, value in attributes.items():
            template.set_attribute(name, value)

        content = template.get_content()

        if output:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(content, encoding="utf-8")
            click.secho(f"✓ Rendered {file} to {output}", fg="green")
            logger.info(f"Rendered template {file} to {output}")
        else:
            click.echo(content, nl=False)
            logger.info(f"Rendered template {file}")

    except TemplateError as e:
        click.secho(f"✗ Render failed: {e}", fg="red", err=True)
        logger.error(f"Template render failed for {file}: {e}")
        raise click.exceptions.Exit(1)
    except OSError as e:
        click.secho(f"✗ Could not write output: {e}", fg="red", err=True)
        logger.error(f"Failed writing rendered template to {output}: {e}")
        raise click.exceptions.Exit(1)
