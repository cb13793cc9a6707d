"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    TypeKind,
    OperationType,
    type_kind,
    variant_tag,
    get_root_type,
    get_root_type_names,
    get_declaration_order,
    is_optional_field,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema helpers
    "TypeKind",
    "OperationType",
    "type_kind",
    "variant_tag",
    "get_root_type",
    "get_root_type_names",
    "get_declaration_order",
    "is_optional_field",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
