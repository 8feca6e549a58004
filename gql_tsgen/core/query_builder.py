"""Query builder for GraphQL operations.

Constructs query/mutation documents from operation metadata by selecting
every field of the returned object type, recursively, up to a maximum
depth. The depth limit is the only guard against self-referencing types.
"""

import logging
from dataclasses import dataclass

from jinja2 import Environment, PackageLoader, select_autoescape

from .formatter import format_source
from .ir import IROperation, TypeCatalog
from .policies import TruncationPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSelection:
    """Configuration for how deep the field selection goes."""
    max_depth: int = 2
    truncation: TruncationPolicy = TruncationPolicy.BARE_FIELD


class QueryBuilder:
    """Builds GraphQL operation modules from operation metadata."""

    def __init__(
        self,
        catalog: TypeCatalog,
        selection: FieldSelection | None = None,
        tag_module: str = "graphql-tag",
        tag_name: str = "gql",
    ):
        """Initialize the builder.

        Args:
            catalog: Object type name to field list; any other type name is a leaf
            selection: Depth limit and truncation policy
            tag_module: Module the template tag is imported from
            tag_name: Name of the template tag
        """
        self.catalog = catalog
        self.selection = selection or FieldSelection()
        self.tag_module = tag_module
        self.tag_name = tag_name
        self.env = Environment(
            loader=PackageLoader("gql_tsgen", "templates"),
            autoescape=select_autoescape(),
        )

    def build(self, operation: IROperation) -> str:
        """Build the formatted module source for an operation.

        Raises:
            FormatterError: If the generated document is not valid GraphQL
        """
        template = self.env.get_template("operation.ts.j2")
        source = template.render(
            tag_module=self.tag_module,
            tag_name=self.tag_name,
            document=self.build_document(operation),
        )
        return format_source(source, "typescript")

    def build_document(self, operation: IROperation) -> str:
        """Build the raw, unformatted GraphQL document for an operation."""
        lines = [f"{operation.operation_type} {operation.pascal_name}"]

        if operation.arguments:
            lines.append("(")
            lines.append(",".join(f"${arg.name}: {arg.type}" for arg in operation.arguments))
            lines.append(")")

        lines.append("{")
        lines.append(operation.name)

        if operation.arguments:
            lines.append("(")
            lines.append(",".join(f"{arg.name}: ${arg.name}" for arg in operation.arguments))
            lines.append(")")

        return_type = operation.return_type.named_type
        if return_type in self.catalog:
            selected = self._select_fields(return_type, 0)
            if not selected and self.selection.truncation is TruncationPolicy.OMIT_FIELD:
                # The root field cannot be omitted
                selected = ["__typename"]
            lines.append("{")
            lines.extend(selected)
            lines.append("}")

        lines.append("}")
        return "\n".join(lines)

    def _select_fields(self, type_name: str, depth: int) -> list[str]:
        """Return the selection lines of every field of type_name."""
        lines = []
        for ir_field in self.catalog[type_name]:
            field_type = ir_field.type.named_type

            if field_type not in self.catalog:
                lines.append(ir_field.name)
            elif depth < self.selection.max_depth:
                nested = self._select_fields(field_type, depth + 1)
                if not nested and self.selection.truncation is TruncationPolicy.OMIT_FIELD:
                    logger.debug("Omitting %s, every field of %s was omitted", ir_field.name, field_type)
                    continue
                lines.append(ir_field.name)
                lines.append("{")
                lines.extend(nested)
                lines.append("}")
            else:
                lines.extend(self._truncate(ir_field.name, field_type))
        return lines

    def _truncate(self, field_name: str, field_type: str) -> list[str]:
        """Selection lines for an object-typed field that sits at the depth limit."""
        policy = self.selection.truncation
        logger.debug("Depth limit reached at %s (%s), policy=%s", field_name, field_type, policy.value)

        if policy is TruncationPolicy.OMIT_FIELD:
            return []
        if policy is TruncationPolicy.EXPAND_LEAVES:
            leaves = [f.name for f in self.catalog[field_type] if f.type.named_type not in self.catalog]
            return [field_name, "{", *(leaves or ["__typename"]), "}"]
        return [field_name]
