"""Intermediate Representation (IR) for GraphQL schemas.

This module defines the dataclasses the generator works on: type
references, fields, operations, the type catalog and the generated
artifacts.
"""

from dataclasses import dataclass, field

from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode


def upper_first(text: str) -> str:
    """Uppercase the first character only, e.g. 'getUser' -> 'GetUser'."""
    return text[:1].upper() + text[1:]


@dataclass(frozen=True)
class NamedTypeRef:
    """A bare named type, e.g. ``ID``."""
    name: str

    @property
    def named_type(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListTypeRef:
    """A list wrapper, e.g. ``[ID]``."""
    of_type: "TypeRef"

    @property
    def named_type(self) -> str:
        return self.of_type.named_type

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass(frozen=True)
class NonNullTypeRef:
    """A non-null wrapper, e.g. ``ID!``."""
    of_type: "TypeRef"

    @property
    def named_type(self) -> str:
        return self.of_type.named_type

    def __str__(self) -> str:
        return f"{self.of_type}!"


TypeRef = NamedTypeRef | ListTypeRef | NonNullTypeRef


def type_ref_from_node(node: TypeNode) -> TypeRef:
    """Convert a graphql-core type node into a TypeRef, keeping every wrapper."""
    if isinstance(node, NonNullTypeNode):
        return NonNullTypeRef(type_ref_from_node(node.type))
    if isinstance(node, ListTypeNode):
        return ListTypeRef(type_ref_from_node(node.type))
    assert isinstance(node, NamedTypeNode), f"Expected NamedTypeNode, got {type(node)}"
    return NamedTypeRef(node.name.value)


@dataclass(frozen=True)
class IRArgument:
    """Represents an argument of a root operation."""
    name: str
    type: TypeRef


@dataclass(frozen=True)
class IRField:
    """Represents a field of a GraphQL object type."""
    name: str
    type: TypeRef


@dataclass(frozen=True)
class IROperation:
    """Represents a root field of Query or Mutation."""
    name: str
    operation_type: str  # 'query' or 'mutation'
    arguments: tuple[IRArgument, ...]
    return_type: TypeRef

    @property
    def pascal_name(self) -> str:
        return upper_first(self.name)

    @property
    def logical_name(self) -> str:
        """Name of the generated module, e.g. 'NowQuery'."""
        return f"{upper_first(self.name)}{upper_first(self.operation_type)}"


# Object type name -> its fields, in declaration order
TypeCatalog = dict[str, list[IRField]]


@dataclass
class IRSchema:
    """Type catalog plus the flat list of root operations."""
    types: TypeCatalog = field(default_factory=dict)
    operations: list[IROperation] = field(default_factory=list)

    @property
    def queries(self) -> list[IROperation]:
        return self.operations_of("query")

    @property
    def mutations(self) -> list[IROperation]:
        return self.operations_of("mutation")

    def operations_of(self, kind: str) -> list[IROperation]:
        """Return the operations of one kind, in declaration order."""
        return [op for op in self.operations if op.operation_type == kind]


@dataclass(frozen=True)
class GeneratedArtifact:
    """One generated source file."""
    logical_name: str
    file_name: str
    source: str
