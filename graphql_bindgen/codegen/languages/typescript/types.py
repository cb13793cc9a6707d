"""
TypeScript-specific type system for code generation.

Maps schema scalars to TypeScript primitives and renders wrapped type
references into TypeScript type expressions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from graphql import (
    GraphQLInputType,
    GraphQLNonNull,
    GraphQLOutputType,
    is_list_type,
    is_non_null_type,
)


class TypePosition(Enum):
    """Where a type reference is used."""

    OUTPUT = "output"  # read side: object and interface fields, results
    INPUT = "input"  # write side: input object fields, arguments


# Built-in scalar mappings
TYPESCRIPT_SCALAR_MAP = {
    "Int": "number",
    "String": "string",
    "ID": "string | number",
    "Float": "number",
    "Boolean": "boolean",
    "DateTime": "Date | string",
}

ID_OUTPUT_TYPE = "string"


@dataclass
class TypeScriptTypeConfig:
    """Configuration for TypeScript type mapping behavior."""

    # Name of the identifier scalar with asymmetric input/output mapping
    id_scalar_name: str = "ID"

    # Used for scalars with no mapping
    unknown_scalar_type: str = "string"

    # Custom scalar mappings, checked before the built-in table
    scalar_overrides: Dict[str, str] = field(default_factory=dict)

    @property
    def output_suffix(self) -> str:
        return "_Output"

    @property
    def input_suffix(self) -> str:
        return "_Input"


class TypeScriptTypeMapper:
    """
    Maps schema type references to TypeScript type expressions.

    Output and input positions are rendered by separate entry points since
    the identifier scalar and list types render differently for each.
    """

    def __init__(self, config: Optional[TypeScriptTypeConfig] = None):
        """Initialize with type configuration."""
        self.config = config or TypeScriptTypeConfig()
        self._scalar_map = {**TYPESCRIPT_SCALAR_MAP, **self.config.scalar_overrides}

    # Scalars

    def has_mapping(self, scalar_name: str) -> bool:
        """Check if a scalar has an explicit mapping."""
        return scalar_name in self._scalar_map

    def map_scalar(
        self, scalar_name: str, position: TypePosition = TypePosition.INPUT
    ) -> str:
        """
        Map a scalar name to a TypeScript primitive type expression.

        The identifier scalar maps to ``string`` in output position and to
        its table entry otherwise, borrowing the ``ID`` entry when it is
        renamed. Unknown scalars use the fallback type.
        """
        if scalar_name == self.config.id_scalar_name:
            if position == TypePosition.OUTPUT:
                return ID_OUTPUT_TYPE
            return self._scalar_map.get(scalar_name, self._scalar_map["ID"])

        if scalar_name in self._scalar_map:
            return self._scalar_map[scalar_name]

        return self.config.unknown_scalar_type

    # Type references

    def render_output_type(self, type_: GraphQLOutputType) -> str:
        """Render a type reference in output (read) position."""
        if is_non_null_type(type_):
            return self.render_output_type(type_.of_type)
        if is_list_type(type_):
            return f"{self.render_output_type(type_.of_type)}[]"
        return self._render_named(type_.name, TypePosition.OUTPUT)

    def render_input_type(self, type_: GraphQLInputType) -> str:
        """
        Render a type reference in input (write) position.

        Lists also accept a single element, so ``[T]`` renders as
        ``T[] | T``.
        """
        if is_non_null_type(type_):
            return self.render_input_type(type_.of_type)
        if is_list_type(type_):
            inner = self.render_input_type(type_.of_type)
            return f"{inner}[] | {inner}"
        return self._render_named(type_.name, TypePosition.INPUT)

    def render_type(self, type_, position: TypePosition) -> str:
        """Render a type reference for the given position."""
        if position == TypePosition.INPUT:
            return self.render_input_type(type_)
        return self.render_output_type(type_)

    def _render_named(self, type_name: str, position: TypePosition) -> str:
        if type_name != self.config.id_scalar_name:
            return type_name

        if position == TypePosition.OUTPUT:
            return f"{type_name}{self.config.output_suffix}"
        return f"{type_name}{self.config.input_suffix}"

    @staticmethod
    def is_nullable(type_) -> bool:
        """A reference is nullable unless wrapped in non-null."""
        return not isinstance(type_, GraphQLNonNull)


def create_type_config(**kwargs) -> TypeScriptTypeConfig:
    """Create a type config, ignoring keys it does not know."""
    known = {
        key: value
        for key, value in kwargs.items()
        if key in TypeScriptTypeConfig.__dataclass_fields__
    }
    return TypeScriptTypeConfig(**known)
