"""Custom exception classes for Template Renderers.

All exceptions inherit from TemplateRenderersError to allow catching all custom
exceptions. The rendering routines themselves never raise for string input;
these exceptions belong to the configuration and template layers.
"""


class TemplateRenderersError(Exception):
    """Base exception for all Template Renderers custom exceptions."""

    pass


class ConfigurationError(TemplateRenderersError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Invalid configuration file format
        - Unknown locale or time zone
        - Service URL that is not http or https
    """

    pass


class TemplateError(TemplateRenderersError):
    """Base exception for template processing errors.

    Examples:
        - Template file not found
        - Unknown renderer referenced by a template
        - Missing template values
    """

    pass


class TemplateLoadError(TemplateError):
    """Raised when template file cannot be loaded.

    Examples:
        - File not found
        - Permission denied
        - Encoding errors
    """

    pass


class UnknownRendererError(TemplateError):
    """Raised when a template references a renderer that is not registered.

    Examples:
        - {{render:doesNotExist:foo/}}
        - Misspelled renderer name on the command line
    """

    pass


class MissingValueError(TemplateError):
    """Raised when a strict template has a placeholder with no value or attribute.

    Examples:
        - {{first_name}} with neither a value nor an attribute named first_name
    """

    pass
