"""
TypeScript code generator implementation.

Generates TypeScript type declarations and a typed binding factory
for a graphql-binding runtime from a GraphQL schema.
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Any

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    print_schema,
)

from ....logging_config import get_logger
from ...core.generator import CodeGenerator, GeneratorError
from ...core.schema import (
    OperationType,
    TypeKind,
    get_declaration_order,
    get_root_type,
    is_optional_field,
    type_kind,
)
from .types import TypePosition, TypeScriptTypeConfig, TypeScriptTypeMapper

logger = get_logger(__name__)

DOCUMENT_TEMPLATE = "document.ts.j2"


class TypescriptGenerator(CodeGenerator):
    """Code generator for TypeScript binding declarations."""

    def __init__(self, config=None):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)

        self.type_config = self._build_type_config()
        self.type_mapper = TypeScriptTypeMapper(self.type_config)
        self.indent = " " * self.config.indent_size

        self._renderers: Dict[TypeKind, Callable[[Any], str]] = {
            TypeKind.OBJECT: self.render_object,
            TypeKind.INTERFACE: self.render_interface,
            TypeKind.INPUT_OBJECT: self.render_input_object,
            TypeKind.UNION: self.render_union,
            TypeKind.ENUM: self.render_enum,
            TypeKind.SCALAR: self.render_scalar,
        }

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def _build_type_config(self) -> TypeScriptTypeConfig:
        """Build TypeScriptTypeConfig from generator config."""
        return TypeScriptTypeConfig(
            id_scalar_name=self.config.id_scalar_name,
            unknown_scalar_type=self.config.unknown_scalar_type,
            scalar_overrides=dict(self.config.scalar_overrides),
        )

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    # Document assembly

    def generate(self, schema: GraphQLSchema) -> str:
        """Generate the complete binding document using the document template."""
        if not self.template_exists(DOCUMENT_TEMPLATE):
            raise GeneratorError(f"{DOCUMENT_TEMPLATE} template not found")

        context = {
            "imports": self.render_imports(),
            "queries": self.render_operations(schema, OperationType.QUERY),
            "mutations": self.render_operations(schema, OperationType.MUTATION),
            "subscriptions": self.render_operations(
                schema, OperationType.SUBSCRIPTION
            ),
            "exports": self.render_exports(),
            "types": self.render_types(schema),
            "typedefs": self.render_typedefs(schema),
        }

        return self.render_template(DOCUMENT_TEMPLATE, context) + "\n"

    def render_imports(self) -> str:
        """Render the header comment and import statements."""
        lines = []
        if self.config.add_header and self.config.add_comments:
            lines.append(
                f"// Code generated by graphql-bindgen from "
                f"{self.config.input_schema_path}. DO NOT EDIT."
            )
        lines.append(f"import {{ makeBinding }} from '{self.config.binding_module}'")
        lines.append(f"import schema from '{self.get_relative_schema_path()}'")
        return "\n".join(lines)

    def render_exports(self) -> str:
        return (
            "export const Binding = "
            "makeBinding<BindingConstructor<BindingInstance>>({ schema })"
        )

    def render_types(self, schema: GraphQLSchema) -> str:
        """Render every non-root type declaration in declaration order."""
        declarations = []
        for type_name in get_declaration_order(
            schema, sort_by_name=self.config.sort_types_by_name
        ):
            declaration = self.render_type(schema.type_map[type_name])
            if declaration:
                declarations.append(declaration)

        logger.debug("Rendered %d type declarations", len(declarations))
        return "\n\n".join(declarations)

    def render_typedefs(self, schema: GraphQLSchema) -> str:
        """Embed the printed schema as a template literal constant."""
        return f"const typeDefs = `{escape_template_literal(print_schema(schema))}`"

    # Operations

    def render_operations(self, schema: GraphQLSchema, operation: OperationType) -> str:
        """
        Render the signature map of one root operation category.

        Absent categories render as an empty object type.
        """
        root_type = get_root_type(schema, operation)
        if root_type is None:
            return "{}"

        iterator = (
            operation == OperationType.SUBSCRIPTION
            and self.config.async_iterator_subscriptions
        )
        methods = [
            self.render_operation_field(name, field, iterator)
            for name, field in root_type.fields.items()
        ]

        logger.debug("Rendered %d %s fields", len(methods), operation.value)
        return "{\n" + ",\n".join(methods) + f"\n{self.indent}}}"

    def render_operation_field(self, name: str, field, iterator: bool = False) -> str:
        """Render a single `name: (args, info, context) => Promise<...>` entry."""
        return_type = self.type_mapper.render_output_type(field.type)
        if iterator:
            result = f"AsyncIterator<{return_type}>"
        elif self.type_mapper.is_nullable(field.type):
            result = f"{return_type} | null"
        else:
            result = return_type

        return f"{self.indent * 2}{name}: (args, info, context) => Promise<{result}>"

    # Declarations

    def render_type(self, named_type: GraphQLNamedType) -> str:
        """Render one declaration, dispatching on the variant tag."""
        kind = type_kind(named_type)
        renderer = self._renderers.get(kind) if kind else None
        if renderer is None:
            logger.debug("Skipping unsupported type %s", named_type.name)
            return ""
        return renderer(named_type)

    def render_object(self, type_: GraphQLObjectType) -> str:
        fields = self.render_fields(type_.fields, TypePosition.OUTPUT)
        interfaces = [interface.name for interface in type_.interfaces]
        return self.render_interface_wrapper(
            type_.name, type_.description, interfaces, fields
        )

    def render_interface(self, type_: GraphQLInterfaceType) -> str:
        fields = self.render_fields(type_.fields, TypePosition.OUTPUT)
        return self.render_interface_wrapper(type_.name, type_.description, [], fields)

    def render_input_object(self, type_: GraphQLInputObjectType) -> str:
        fields = self.render_fields(type_.fields, TypePosition.INPUT)
        return self.render_type_wrapper(type_.name, type_.description, fields)

    def render_union(self, type_: GraphQLUnionType) -> str:
        members = " | ".join(member.name for member in type_.types)
        return (
            f"{self.render_description(type_.description)}"
            f"export type {type_.name} = {members}"
        )

    def render_enum(self, type_: GraphQLEnumType) -> str:
        values = f" |\n{self.indent}".join(f"'{name}'" for name in type_.values)
        return (
            f"{self.render_description(type_.description)}"
            f"export type {type_.name} = {values}"
        )

    def render_scalar(self, type_: GraphQLScalarType) -> str:
        description = self.render_description(type_.description)

        if type_.name == self.type_config.id_scalar_name:
            input_type = self.type_mapper.map_scalar(type_.name, TypePosition.INPUT)
            output_type = self.type_mapper.map_scalar(type_.name, TypePosition.OUTPUT)
            return (
                f"{description}"
                f"export type {type_.name}{self.type_config.input_suffix} = {input_type}\n"
                f"export type {type_.name}{self.type_config.output_suffix} = {output_type}"
            )

        mapped = self.type_mapper.map_scalar(type_.name)
        return f"{description}export type {type_.name} = {mapped}"

    def render_fields(self, fields, position: TypePosition) -> str:
        """Render `name[?]: type` lines for an ordered field map."""
        lines = []
        for name, field in fields.items():
            marker = "?" if is_optional_field(field) else ""
            field_type = self.type_mapper.render_type(field.type, position)
            lines.append(f"{self.indent}{name}{marker}: {field_type}")
        return "\n".join(lines)

    def render_interface_wrapper(
        self,
        type_name: str,
        description: Optional[str],
        interfaces: List[str],
        fields: str,
    ) -> str:
        extends = f" extends {', '.join(interfaces)}" if interfaces else ""
        return (
            f"{self.render_description(description)}"
            f"export interface {type_name}{extends} {{\n{fields}\n}}"
        )

    def render_type_wrapper(
        self, type_name: str, description: Optional[str], fields: str
    ) -> str:
        return (
            f"{self.render_description(description)}"
            f"export type {type_name} = {{\n{fields}\n}}"
        )

    def render_description(self, description: Optional[str]) -> str:
        """Render a block comment, or nothing when there is no description."""
        if not description or not self.config.add_comments:
            return ""
        # A literal */ would end the comment early
        lines = description.replace("*/", "*\\/").split("\n")
        body = "".join(f" * {line}\n" for line in lines)
        return f"/*\n{body} */\n"

    # Validation

    def validate_schema(self, schema: GraphQLSchema) -> List[str]:
        """Validate a schema for TypeScript generation."""
        warnings = super().validate_schema(schema)

        for type_name in get_declaration_order(schema):
            named_type = schema.type_map[type_name]
            kind = type_kind(named_type)

            if kind == TypeKind.SCALAR and not self.type_mapper.has_mapping(type_name):
                warnings.append(
                    f"Scalar '{type_name}' has no mapping, using "
                    f"{self.type_config.unknown_scalar_type}"
                )
            elif kind in (TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.INPUT_OBJECT):
                if not named_type.fields:
                    warnings.append(f"Type '{type_name}' has no fields")

        return warnings


def escape_template_literal(text: str) -> str:
    """Escape text for use inside a JavaScript template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def create_typescript_generator(
    config: Optional[Dict[str, Any]] = None,
) -> TypescriptGenerator:
    """Create a TypeScript generator with default configuration."""
    default_config = {
        "add_comments": True,
        "add_header": True,
        "async_iterator_subscriptions": False,
        "sort_types_by_name": False,
    }

    merged_config = default_config.copy()
    if config:
        merged_config.update(config)

    return TypescriptGenerator(merged_config)


def create_subscription_generator(
    config: Optional[Dict[str, Any]] = None,
) -> TypescriptGenerator:
    """Create a generator typing subscriptions as async iterators."""
    return create_typescript_generator(
        {**(config or {}), "async_iterator_subscriptions": True}
    )
