"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

import posixpath
from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Union
from pathlib import Path

from graphql import GraphQLNamedType, GraphQLSchema

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .schema import (
    OperationType,
    count_types_by_kind,
    get_declaration_order,
    get_root_type,
    type_kind,
)
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize generator with optional configuration."""
        if isinstance(config, GeneratorConfig):
            self.config = config
        else:
            self.config = load_config(self.language_name, custom_config=config)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, schema: GraphQLSchema) -> str:
        """
        Generate the complete binding document for a schema.

        Args:
            schema: Fully built schema

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def render_type(self, named_type: GraphQLNamedType) -> str:
        """
        Render the declaration of a single named type.

        Returns:
            Declaration text, or an empty string for unsupported variants
        """
        pass

    def get_relative_schema_path(self) -> str:
        """
        Module path of the input schema as seen from the output binding.

        Pure path arithmetic, the file system is never touched.
        """
        input_path = Path(self.config.input_schema_path).as_posix()
        output_dir = posixpath.dirname(Path(self.config.output_binding_path).as_posix())
        relative = posixpath.relpath(input_path, output_dir or ".")
        stem, _ = posixpath.splitext(relative)
        if not stem.startswith("."):
            stem = f"./{stem}"
        return stem

    def validate_schema(self, schema: GraphQLSchema) -> List[str]:
        """
        Check a schema for things worth reporting before generation.

        Language generators should override this to add their own checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if get_root_type(schema, OperationType.QUERY) is None:
            warnings.append("Schema has no query root type")

        for name in get_declaration_order(schema):
            named_type = schema.type_map[name]
            if type_kind(named_type) is None:
                warnings.append(
                    f"Type '{name}' has unsupported kind "
                    f"{type(named_type).__name__} and will be skipped"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        The default returns the code unchanged: documents embed the printed
        schema, which must survive byte for byte.
        """
        return code

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: GraphQLSchema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)

        code = generator.generate(schema)
        formatted_code = generator.format_code(code)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "type_count": len(get_declaration_order(schema)),
            "types_by_kind": count_types_by_kind(schema),
            "operations": [
                operation.value
                for operation in OperationType
                if get_root_type(schema, operation) is not None
            ],
            "input_schema_path": generator.config.input_schema_path,
            "output_binding_path": generator.config.output_binding_path,
        }

        logger.info(
            "Generated %s binding with %d types (%d warnings)",
            generator.language_name,
            metadata["type_count"],
            len(warnings),
        )
        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
