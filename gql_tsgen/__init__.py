"""Generate graphql-tag query and mutation modules from a live GraphQL schema."""

__version__ = "0.1.0"
