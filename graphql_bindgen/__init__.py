"""
graphql_bindgen

Generates typed binding code (TypeScript declarations and a binding
factory) from a GraphQL schema.
"""

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    generate_binding,
    generate_from_schema,
    list_supported_languages,
)
from .utils import SchemaLoaderError, load_schema

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "SchemaLoaderError",
    "generate_binding",
    "generate_from_schema",
    "list_supported_languages",
    "load_schema",
    "__version__",
]
