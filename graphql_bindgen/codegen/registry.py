"""
Generator registry.

Maps target language names and their aliases to generator classes and
builds configured generator instances.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator

logger = get_logger(__name__)

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry of binding generators keyed by language."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator class under a language name.

        Args:
            language: Primary language name (e.g. 'typescript')
            generator_class: CodeGenerator subclass
            aliases: Alternative names for the language
            replace: Overwrite an existing registration instead of keeping it

        Raises:
            RegistryError: If the class is not a generator or an alias clashes
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()
        if language_key in self._generators and not replace:
            return

        self._generators[language_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                owner = self._aliases.get(alias_key)
                if owner is not None and owner != language_key:
                    raise RegistryError(f"Alias '{alias}' already points to '{owner}'")

            self._aliases[alias_key] = language_key

        logger.debug(
            "Registered generator %s for %s", generator_class.__name__, language_key
        )

    def unregister(self, language: str):
        """Remove a language and every alias pointing at it."""
        language_key = self.resolve_language(language)
        self._generators.pop(language_key, None)
        self._aliases = {
            alias: target
            for alias, target in self._aliases.items()
            if target != language_key
        }

    def resolve_language(self, language: str) -> str:
        """Resolve a language name or alias to its primary name."""
        language_key = language.lower()
        return self._aliases.get(language_key, language_key)

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """
        Look up the generator class for a language name or alias.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        generator_class = self._generators.get(self.resolve_language(language))
        if generator_class is None:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )
        return generator_class

    def create_generator(
        self, language: str, config: ConfigSource = None
    ) -> CodeGenerator:
        """
        Create a configured generator.

        Args:
            language: Language name or alias
            config: GeneratorConfig, override dict, JSON config file path or None

        Raises:
            RegistryError: If the language is unknown or construction fails
        """
        generator_class = self.get_generator_class(language)
        language_key = self.resolve_language(language)

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(language_key, config_file=config)
            elif isinstance(config, dict) or config is None:
                final_config = load_config(language_key, custom_config=config)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return generator_class(final_config)

        except RegistryError:
            raise
        except Exception as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Sorted primary language names."""
        return sorted(self._generators)

    def get_aliases_for_language(self, language: str) -> List[str]:
        language_key = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == language_key
        )

    def list_all_names(self) -> Dict[str, List[str]]:
        """Map each primary language to its name followed by its aliases."""
        return {
            language: [language] + self.get_aliases_for_language(language)
            for language in self._generators
        }

    def is_supported(self, language: str) -> bool:
        return self.resolve_language(language) in self._generators

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a registered language.

        Returns:
            Dict with name, class, file_extension, aliases and module
        """
        generator_class = self.get_generator_class(language)
        language_key = self.resolve_language(language)
        generator = self.create_generator(language_key)

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(language_key),
            "module": generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing it on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generators."""
    from .languages.typescript import TypescriptGenerator

    registry.register("typescript", TypescriptGenerator, aliases=["ts"])


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Register a generator in the global registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Create a configured generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Describe every supported language, skipping ones that fail to load."""
    result = {}
    for language in list_supported_languages():
        try:
            result[language] = get_language_info(language)
        except RegistryError as e:
            logger.warning("Skipping language %s: %s", language, e)
    return result
