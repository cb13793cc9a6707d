"""
Unit tests for the generator registry.

Tests cover:
- Built-in registration and aliases
- Generator creation with different config types
- Error handling
"""

import json

import pytest

from graphql_bindgen.codegen import (
    GeneratorConfig,
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_supported_languages,
)
from graphql_bindgen.codegen.languages.typescript import TypescriptGenerator


class TestGlobalRegistry:
    """Tests for the auto-registered generators."""

    def test_typescript_registered(self):
        assert "typescript" in list_supported_languages()

    def test_alias(self):
        assert isinstance(get_generator("ts"), TypescriptGenerator)
        assert isinstance(get_generator("TypeScript"), TypescriptGenerator)

    def test_language_info(self):
        info = get_language_info("ts")

        assert info["name"] == "typescript"
        assert info["file_extension"] == ".ts"
        assert info["class"] == "TypescriptGenerator"
        assert info["aliases"] == ["ts"]

    def test_unknown_language(self):
        with pytest.raises(RegistryError, match="No generator registered"):
            get_generator("cobol")


class TestGeneratorCreation:
    """Tests for create_generator config handling."""

    def test_dict_config(self):
        generator = get_generator("typescript", {"add_comments": False})
        assert generator.config.add_comments is False

    def test_dataclass_config(self):
        config = GeneratorConfig(indent_size=4)
        assert get_generator("typescript", config).config is config

    def test_file_config(self, tmp_path):
        path = tmp_path / "bindgen.json"
        path.write_text(json.dumps({"binding_module": "my-binding"}), encoding="utf-8")

        generator = get_generator("typescript", str(path))
        assert generator.config.binding_module == "my-binding"

    def test_bad_config_file_is_wrapped(self, tmp_path):
        with pytest.raises(RegistryError, match="Failed to create"):
            get_generator("typescript", str(tmp_path / "missing.json"))

    def test_invalid_config_type(self):
        with pytest.raises(RegistryError, match="Invalid config type"):
            get_generator("typescript", 42)


class TestRegistration:
    def test_register_and_unregister(self):
        registry = GeneratorRegistry()
        registry.register("typescript", TypescriptGenerator, aliases=["ts", "tsx"])

        assert registry.is_supported("tsx")
        assert registry.resolve_language("TSX") == "typescript"
        assert registry.list_all_names() == {"typescript": ["typescript", "ts", "tsx"]}

        registry.unregister("typescript")
        assert not registry.is_supported("ts")

    def test_rejects_non_generator(self):
        registry = GeneratorRegistry()
        with pytest.raises(RegistryError):
            registry.register("text", str)

    def test_alias_conflict(self):
        registry = GeneratorRegistry()
        registry.register("typescript", TypescriptGenerator, aliases=["ts"])

        with pytest.raises(RegistryError, match="already points"):
            registry.register("other", TypescriptGenerator, aliases=["ts"])
