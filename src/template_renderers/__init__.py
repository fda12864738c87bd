"""Template Renderers - value formatting routines for template rendering.

Provides case conversion, encoding, masking, date/time formatting, credit card
validation, URL shortening, QR code generation and uptime formatting for
values substituted into templates.
"""

__version__ = "0.1.0"
