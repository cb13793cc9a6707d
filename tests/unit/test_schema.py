"""
Unit tests for core schema helpers.

Tests cover:
- Variant tags and kinds
- Root operation lookup
- Declaration order
- Type counting
"""

from graphql import build_schema

from graphql_bindgen.codegen.core.schema import (
    OperationType,
    TypeKind,
    count_types_by_kind,
    get_declaration_order,
    get_root_type,
    get_root_type_names,
    is_introspection_name,
    is_optional_field,
    variant_tag,
)


class TestVariantTags:
    def test_variant_tag_is_class_name(self, user_schema):
        assert variant_tag(user_schema.type_map["User"]) == "GraphQLObjectType"
        assert variant_tag(user_schema.type_map["Role"]) == "GraphQLEnumType"

    def test_tag_order_is_lexical(self):
        """Kind values sort in the order declarations are emitted."""
        values = [kind.value for kind in TypeKind]
        assert values == sorted(values)


class TestRootTypes:
    def test_root_lookup(self, user_schema):
        assert get_root_type(user_schema, OperationType.QUERY).name == "Query"
        assert get_root_type(user_schema, OperationType.MUTATION).name == "Mutation"
        assert get_root_type(user_schema, OperationType.SUBSCRIPTION) is None

    def test_root_names(self, user_schema):
        assert get_root_type_names(user_schema) == ["Query", "Mutation"]

    def test_renamed_roots(self):
        schema = build_schema(
            """
            schema { query: RootQuery }
            type RootQuery { a: Int }
            """
        )
        assert get_root_type_names(schema) == ["RootQuery"]
        assert "RootQuery" not in get_declaration_order(schema)


class TestDeclarationOrder:
    """Tests for get_declaration_order."""

    def test_excludes_roots_and_introspection(self, user_schema):
        names = get_declaration_order(user_schema)

        assert "Query" not in names
        assert "Mutation" not in names
        assert not any(is_introspection_name(name) for name in names)

    def test_grouped_by_tag(self, user_schema):
        names = get_declaration_order(user_schema)
        tags = [variant_tag(user_schema.type_map[name]) for name in names]
        assert tags == sorted(tags)

    def test_stable_within_tag(self, user_schema):
        names = get_declaration_order(user_schema)
        assert names.index("User") < names.index("Post")

    def test_builtin_scalars_included(self, user_schema):
        names = get_declaration_order(user_schema)
        for name in ("ID", "String", "Boolean", "DateTime", "JSON"):
            assert name in names

    def test_sort_by_name(self, user_schema):
        names = get_declaration_order(user_schema, sort_by_name=True)
        assert names == sorted(names)

    def test_repeatable(self, user_schema):
        assert get_declaration_order(user_schema) == get_declaration_order(user_schema)


class TestFieldHelpers:
    def test_is_optional_field(self, user_schema):
        fields = user_schema.type_map["User"].fields
        assert is_optional_field(fields["name"])
        assert is_optional_field(fields["tags"])
        assert not is_optional_field(fields["id"])

    def test_input_fields(self, user_schema):
        fields = user_schema.type_map["UserInput"].fields
        assert not is_optional_field(fields["friendIds"])
        assert is_optional_field(fields["tags"])

    def test_count_types_by_kind(self, user_schema):
        counts = count_types_by_kind(user_schema)

        assert counts["GraphQLObjectType"] == 2
        assert counts["GraphQLInterfaceType"] == 1
        assert counts["GraphQLUnionType"] == 1
        assert counts["GraphQLEnumType"] == 1
        assert counts["GraphQLInputObjectType"] == 1
