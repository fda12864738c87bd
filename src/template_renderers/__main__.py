"""Entry point for running template_renderers as a module.

This allows the package to be executed as:
    python -m template_renderers
"""

from template_renderers.cli.main import cli

if __name__ == "__main__":
    cli()
