"""Template rendering examples.

This module demonstrates rendering single values with the formatting
routines, rendering templates with renderer tags and configuration blocks,
and pinning the zone, locale and uptime for reproducible output.
"""

import logging
from datetime import datetime, timezone

from template_renderers.config import load_config
from template_renderers.render_utils import (
    abbreviate,
    date_time_rfc2822,
    format_credit_card,
    mask,
    normalize,
    uptime,
)
from template_renderers.template_engine import (
    ContentType,
    RenderContext,
    Template,
)

# Configure logging to see the renderers' warnings
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def example_1_formatting_routines():
    """Example 1: Call the formatting routines directly."""
    print("=" * 80)
    print("EXAMPLE 1: Formatting Routines")
    print("=" * 80)
    print()

    print(f"abbreviate:         {abbreviate('This is a test.', 12, '...')}")
    print(f"mask:               {mask('4342256562440179', '*', 4, False)}")
    print(f"format_credit_card: {format_credit_card('4342 2565 6244 0179')}")
    print(f"normalize:          {normalize('Crème Brûlée (Paris)')}")
    print(f"uptime:             {uptime(90_060_000)}")

    # A fixed instant gives the same output on every run
    now = datetime(2023, 1, 6, 9, 30, tzinfo=timezone.utc)
    print(f"date_time_rfc2822:  {date_time_rfc2822(now=now, tz='Europe/Paris', locale='fr_FR')}")
    print()


def example_2_render_template():
    """Example 2: Render a template with values and configuration blocks.

    Configuration blocks sit between the opening tag and ``{{/render}}`` and
    use the ``key=value`` properties syntax.
    """
    print("=" * 80)
    print("EXAMPLE 2: Rendering a Template")
    print("=" * 80)
    print()

    template = Template(
        "Dear {{render:capitalizeWords:name/}},\n"
        "your card {{render:mask:card}}unmasked=4\nmask=#{{/render}} was charged.\n"
        "Summary: {{render:abbreviate:summary}}max=20{{/render}}\n"
    )
    template.set_value("name", "jane doe")
    template.set_value("card", "4342256562440179")
    template.set_value("summary", "Two tickets for the opera, second balcony")

    print(template.get_content())


def example_3_html_and_encodings():
    """Example 3: HTML output encoding and chained encodings.

    Plain tags and most renderers are escaped for the template's content
    type. Encoding renderers produce final output instead, optionally
    applying a second encoding named by the ``encoding`` property.
    """
    print("=" * 80)
    print("EXAMPLE 3: HTML Templates and Encodings")
    print("=" * 80)
    print()

    template = Template(
        '<p>{{comment}}</p>\n'
        '<a href="/search?q={{render:encodeUrl:comment/}}">search</a>\n'
        "<script>var c = '{{render:encodeJs:comment}}encoding=html{{/render}}';</script>\n",
        content_type=ContentType.HTML,
    )
    template.set_value("comment", "Tom & Jerry's <show>")

    print(template.get_content())


def example_4_reproducible_context():
    """Example 4: Pin zone, locale and uptime for reproducible output."""
    print("=" * 80)
    print("EXAMPLE 4: Render Context")
    print("=" * 80)
    print()

    config = load_config()
    context = RenderContext.from_config(config)
    context.timezone = "America/New_York"
    context.locale = "de_DE"

    template = Template(
        "Today: {{render:dateIso:now/}} ({{render:year:now/}})\n"
        "Server up {{render:uptime:server}}day=\\ Tag\\ \ndays=\\ Tage\\ {{/render}}\n",
        context=context,
    )
    # Uptime in milliseconds; without it the process uptime is used
    template.set_attribute("uptime", 2 * 24 * 60 * 60 * 1000 + 5 * 60 * 1000)

    print(template.get_content())


if __name__ == "__main__":
    example_1_formatting_routines()
    example_2_render_template()
    example_3_html_and_encodings()
    example_4_reproducible_context()
