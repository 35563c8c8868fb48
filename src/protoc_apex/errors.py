from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every error that aborts a generation run."""


class RequestDecodeError(GeneratorError):
    """Raised when the serialized request or descriptor set cannot be parsed."""


class UnknownFileError(GeneratorError):
    """Raised when a file to generate is missing from the schema set."""


class UnresolvedHttpRuleError(GeneratorError):
    """Raised when a google.api.http annotation carries no usable verb/path."""


class TemplateRenderError(GeneratorError):
    """Raised when a class template fails to render."""
