"""Exceptions raised while generating operation sources."""


class GeneratorError(Exception):
    """Base class for fatal generation errors."""


class TransportError(GeneratorError):
    """Raised when the schema endpoint cannot be reached or answers garbage."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class SchemaParseError(GeneratorError):
    """Raised when an introspection result or SDL text cannot be turned into a schema."""


class FormatterError(GeneratorError):
    """Raised when generated source is not syntactically valid."""
