"""
Core schema helpers for code generation.

Wraps the graphql-core schema graph with the small amount of structure
generators need: variant tags, root operation lookup and a deterministic
declaration order.
"""

from enum import Enum
from typing import Dict, List, Optional

from graphql import (
    GraphQLField,
    GraphQLInputField,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    is_non_null_type,
)


class TypeKind(Enum):
    """Variant tags of named schema types.

    The value is the graphql-core class name, which is also the sort key
    for declaration ordering.
    """

    ENUM = "GraphQLEnumType"
    INPUT_OBJECT = "GraphQLInputObjectType"
    INTERFACE = "GraphQLInterfaceType"
    OBJECT = "GraphQLObjectType"
    SCALAR = "GraphQLScalarType"
    UNION = "GraphQLUnionType"


class OperationType(Enum):
    """Root operation categories."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


def variant_tag(named_type: GraphQLNamedType) -> str:
    """Return the raw variant tag of a named type."""
    return type(named_type).__name__


def type_kind(named_type: GraphQLNamedType) -> Optional[TypeKind]:
    """
    Get the TypeKind of a named type.

    Returns:
        The matching TypeKind, or None for unsupported variants
    """
    try:
        return TypeKind(variant_tag(named_type))
    except ValueError:
        return None


def get_root_type(
    schema: GraphQLSchema, operation: OperationType
) -> Optional[GraphQLObjectType]:
    """Get the root type bound to an operation category, if any."""
    if operation == OperationType.QUERY:
        return schema.query_type
    if operation == OperationType.MUTATION:
        return schema.mutation_type
    return schema.subscription_type


def get_root_type_names(schema: GraphQLSchema) -> List[str]:
    """Names of all root operation types present in the schema."""
    names = []
    for operation in OperationType:
        root_type = get_root_type(schema, operation)
        if root_type is not None:
            names.append(root_type.name)
    return names


def is_introspection_name(type_name: str) -> bool:
    return type_name.startswith("__")


def get_declaration_order(
    schema: GraphQLSchema, sort_by_name: bool = False
) -> List[str]:
    """
    Get the names of all types that need a declaration, in output order.

    Introspection types and root operation types are excluded. Types are
    ordered by variant tag, keeping schema map order within a tag. With
    sort_by_name the names are simply sorted alphabetically instead.

    Args:
        schema: Schema to walk
        sort_by_name: Use alphabetical order instead of variant tag order

    Returns:
        List of type names
    """
    root_names = set(get_root_type_names(schema))
    type_map = schema.type_map

    names = [
        name
        for name in type_map
        if not is_introspection_name(name) and name not in root_names
    ]

    if sort_by_name:
        return sorted(names)

    # sorted() is stable, so map order is kept within a variant tag
    return sorted(names, key=lambda name: variant_tag(type_map[name]))


def is_optional_field(field: GraphQLField | GraphQLInputField) -> bool:
    """A field is optional when its type is not wrapped in non-null."""
    return not is_non_null_type(field.type)


def count_types_by_kind(schema: GraphQLSchema) -> Dict[str, int]:
    """Count declared types per variant tag (roots and introspection excluded)."""
    counts: Dict[str, int] = {}
    for name in get_declaration_order(schema):
        tag = variant_tag(schema.type_map[name])
        counts[tag] = counts.get(tag, 0) + 1
    return counts
