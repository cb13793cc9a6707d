"""
GraphQL Binding Code Generation Module

Generates typed binding code in various languages from a GraphQL schema.
"""

from typing import Any, Dict, Optional, Union

from graphql import GraphQLSchema

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.schema import TypeKind, OperationType
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config


def generate_from_schema(
    schema: GraphQLSchema,
    language: str = "typescript",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str]] = None,
) -> GenerationResult:
    """
    Generate code from a built schema.

    Args:
        schema: GraphQL schema to generate bindings for
        language: Target language name
        config: Generator configuration dict, GeneratorConfig or config file path

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(language, config)
    return generate_code(generator, schema)


def generate_binding(
    schema: GraphQLSchema,
    input_schema_path: str,
    output_binding_path: str,
    language: str = "typescript",
    **options,
) -> str:
    """
    Generate binding source for a schema.

    Args:
        schema: GraphQL schema to generate bindings for
        input_schema_path: Schema module path, used for header and import text
        output_binding_path: Where the caller will write the result
        language: Target language
        **options: Generator options

    Returns:
        Generated code string

    Raises:
        GeneratorError: If generation fails
    """
    config = {
        **options,
        "input_schema_path": input_schema_path,
        "output_binding_path": output_binding_path,
    }
    result = generate_from_schema(schema, language, config)

    if result.success:
        return result.code
    raise GeneratorError(result.error_message) from result.exception


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "TypeKind",
    "OperationType",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "generate_code",
    "generate_from_schema",
    "generate_binding",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
]
