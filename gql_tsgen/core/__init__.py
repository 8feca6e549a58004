"""Core modules for GraphQL operation generation."""

from .config import GeneratorSettings
from .emitter import (
    EmissionDriver,
    EmissionResult,
    generate_artifacts,
    list_operations,
)
from .errors import (
    FormatterError,
    GeneratorError,
    SchemaParseError,
    TransportError,
)
from .formatter import format_source
from .introspection import IntrospectionClient, fetch_schema, introspection_to_document
from .ir import (
    GeneratedArtifact,
    IRArgument,
    IRField,
    IROperation,
    IRSchema,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    TypeCatalog,
    TypeRef,
    upper_first,
)
from .parser import SchemaParser
from .policies import TruncationPolicy, WriteConflictPolicy
from .query_builder import FieldSelection, QueryBuilder

__all__ = [
    # Config
    "GeneratorSettings",
    # Errors
    "GeneratorError",
    "TransportError",
    "SchemaParseError",
    "FormatterError",
    # IR types
    "GeneratedArtifact",
    "IRArgument",
    "IRField",
    "IROperation",
    "IRSchema",
    "ListTypeRef",
    "NamedTypeRef",
    "NonNullTypeRef",
    "TypeCatalog",
    "TypeRef",
    "upper_first",
    # Parser
    "SchemaParser",
    # Query Builder
    "FieldSelection",
    "QueryBuilder",
    "TruncationPolicy",
    # Formatter
    "format_source",
    # Introspection
    "IntrospectionClient",
    "fetch_schema",
    "introspection_to_document",
    # Emission
    "EmissionDriver",
    "EmissionResult",
    "WriteConflictPolicy",
    "generate_artifacts",
    "list_operations",
]
