"""Main CLI entry point for the template renderers.

This module provides the main Click command group for the template-renderers CLI.
"""

from pathlib import Path
from typing import Optional

import click

from template_renderers import __version__
from template_renderers.cli.render_commands import list_command, render_command
from template_renderers.cli.template_commands import template_group
from template_renderers.config import load_config
from template_renderers.logging_config import configure_logging
from template_renderers.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="template-renderers")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-card-numbers",
    is_flag=True,
    help="Mask credit card numbers in logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_card_numbers: bool,
) -> None:
    """Template Renderers - value formatting for text templates.

    Renders single values (case conversion, encoding, masking, dates, credit
    cards, QR codes, short URLs, uptime) or whole templates containing
    {{render:<renderer>:<name>/}} tags.

    Common usage:

        # Render one value
        template-renderers render uppercase "hello world"

        # Render with a configuration block
        template-renderers render mask 4342256562440179 --properties $'unmasked=4'

        # Render a template file
        template-renderers template render page.html -v name=World

    Use --help with any command for more information.
    """
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
        ctx.obj["config"] = config_obj
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj["verbose"] = verbose
    ctx.obj["redact_card_numbers"] = redact_card_numbers
    ctx.obj["log_file"] = log_file

    # Precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_setting = (
        redact_card_numbers
        if redact_card_numbers
        else config_obj.logging.redact_card_numbers
    )

    configure_logging(
        level=log_level, log_file=log_file_path, redact_card_numbers=redact_setting
    )


cli.add_command(render_command)
cli.add_command(list_command)
cli.add_command(template_group)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a configuration file.

    Example:
        template-renderers config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)

        click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
        click.echo(f"\nConfiguration file: {config_file}")

        click.echo("\nRendering:")
        click.echo(f"  Locale:      {config_obj.rendering.locale}")
        click.echo(f"  Time zone:   {config_obj.rendering.timezone or 'System default'}")

        click.echo("\nServices:")
        click.echo(f"  QR code URL: {config_obj.services.qr_code_url}")
        click.echo(f"  Shorten URL: {config_obj.services.shorten_url}")
        click.echo(f"  User agent:  {config_obj.services.user_agent}")

        click.echo("\nLogging:")
        click.echo(f"  Level:       {config_obj.logging.level}")
        click.echo(f"  Log file:    {config_obj.logging.log_file}")
        click.echo(f"  Redact card numbers: {config_obj.logging.redact_card_numbers}")

    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)


cli.add_command(config)


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"template-renderers version {__version__}")


if __name__ == "__main__":
    cli()
