"""Source formatter for generated operation modules.

The embedded GraphQL document is normalized with graphql-core's parser and
printer, so any syntax error in the generated text surfaces here as a
FormatterError. Formatting already formatted output is a no-op.
"""

import re

from graphql import GraphQLSyntaxError, parse, print_ast

from .errors import FormatterError

INDENT = "  "

# prefix ending in the tag and the opening backtick, the document, the closing backtick
TAGGED_TEMPLATE = re.compile(r"^(?P<prefix>.*?[\w$]`)(?P<body>[^`]*)`;?\s*$", re.DOTALL)


def format_graphql(source: str) -> str:
    """Parse and re-print a GraphQL document."""
    try:
        document = parse(source)
    except GraphQLSyntaxError as e:
        raise FormatterError(f"Generated document is not valid GraphQL: {e.message}") from e
    return print_ast(document)


def format_typescript(source: str) -> str:
    """Normalize a module exporting a tagged GraphQL template literal."""
    match = TAGGED_TEMPLATE.match(source)
    if match is None:
        raise FormatterError("Generated module has no tagged template literal")

    prefix_lines = [line.rstrip() for line in match.group("prefix").splitlines()]
    prefix = "\n".join(prefix_lines).strip()
    document = format_graphql(match.group("body"))
    body = "\n".join(f"{INDENT}{line}" if line else line for line in document.splitlines())
    return f"{prefix}\n{body}\n`;\n"


FORMATTERS = {
    "graphql": format_graphql,
    "typescript": format_typescript,
}


def format_source(source: str, dialect: str = "typescript") -> str:
    """Format source text of the given dialect.

    Raises:
        FormatterError: If the source is not syntactically valid
        ValueError: If the dialect is unknown
    """
    try:
        formatter = FORMATTERS[dialect]
    except KeyError:
        raise ValueError(f"Unsupported dialect: {dialect}") from None
    return formatter(source)
