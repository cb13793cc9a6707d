"""
TypeScript code generator module.

Generates TypeScript declarations and a graphql-binding factory from a
GraphQL schema.
"""

from .generator import (
    TypescriptGenerator,
    create_typescript_generator,
    create_subscription_generator,
    escape_template_literal,
)
from .types import (
    TYPESCRIPT_SCALAR_MAP,
    TypePosition,
    TypeScriptTypeConfig,
    TypeScriptTypeMapper,
    create_type_config,
)

__all__ = [
    "TypescriptGenerator",
    "create_typescript_generator",
    "create_subscription_generator",
    "escape_template_literal",
    # Type system
    "TYPESCRIPT_SCALAR_MAP",
    "TypePosition",
    "TypeScriptTypeConfig",
    "TypeScriptTypeMapper",
    "create_type_config",
]
