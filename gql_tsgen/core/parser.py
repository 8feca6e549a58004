"""GraphQL schema parser using graphql-core.

Turns a schema document into an IRSchema: the catalog of object types and
the root operations declared on Query and Mutation.
"""

import logging

from graphql import DocumentNode, GraphQLSyntaxError, ObjectTypeDefinitionNode, parse

from .errors import SchemaParseError
from .ir import IRArgument, IRField, IROperation, IRSchema, type_ref_from_node

logger = logging.getLogger(__name__)

ROOT_TYPES = {"Query": "query", "Mutation": "mutation"}


class SchemaParser:
    """Builds the type catalog and operation list from a schema document."""

    def __init__(self, document: DocumentNode):
        self.document = document
        self.ir = IRSchema()

    @classmethod
    def from_sdl(cls, sdl: str) -> "SchemaParser":
        """Create a parser from SDL text."""
        try:
            document = parse(sdl)
        except GraphQLSyntaxError as e:
            raise SchemaParseError(f"Invalid schema SDL: {e.message}") from e
        return cls(document)

    def parse(self) -> IRSchema:
        """Walk the document and return the complete IR."""
        for definition in self.document.definitions:
            if isinstance(definition, ObjectTypeDefinitionNode):
                self._process_object_type(definition)

        logger.debug(
            "Parsed %d types and %d operations",
            len(self.ir.types),
            len(self.ir.operations),
        )
        return self.ir

    def _process_object_type(self, node: ObjectTypeDefinitionNode):
        name = node.name.value
        if name in ROOT_TYPES:
            self._process_operations(node, ROOT_TYPES[name])
        else:
            # Later definitions with the same name replace earlier ones
            self.ir.types[name] = self._process_fields(node.fields or ())

    def _process_fields(self, field_nodes) -> list[IRField]:
        """Process field definitions into the IRField list."""
        return [
            IRField(
                name=node.name.value,
                type=type_ref_from_node(node.type),
            )
            for node in field_nodes
        ]

    def _process_operations(self, node: ObjectTypeDefinitionNode, op_type: str):
        """Process a Query or Mutation type into operations."""
        for field in node.fields or ():
            self.ir.operations.append(
                IROperation(
                    name=field.name.value,
                    operation_type=op_type,
                    arguments=self._process_arguments(field.arguments),
                    return_type=type_ref_from_node(field.type),
                )
            )

    @staticmethod
    def _process_arguments(arg_nodes) -> tuple[IRArgument, ...]:
        return tuple(
            IRArgument(
                name=arg_node.name.value,
                type=type_ref_from_node(arg_node.type),
            )
            for arg_node in arg_nodes or ()
        )
