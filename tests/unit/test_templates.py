"""Unit tests for the template engine."""

import pytest

from graphql_bindgen.codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    create_template_engine,
)
from graphql_bindgen.codegen.languages.typescript import TypescriptGenerator


class TestTemplateEngine:
    def test_memory_template(self):
        engine = create_template_engine()
        engine.add_template("greeting.j2", "Hello {{ name }}")

        assert engine.template_exists("greeting.j2")
        assert engine.render_template("greeting.j2", {"name": "schema"}) == "Hello schema"

    def test_missing_template(self):
        engine = TemplateEngine()
        assert not engine.template_exists("nope.j2")

        with pytest.raises(TemplateError):
            engine.render_template("nope.j2", {})

    def test_undefined_variable_is_an_error(self):
        engine = TemplateEngine()
        with pytest.raises(TemplateError):
            engine.render_string("{{ missing }}", {})

    def test_no_escaping(self):
        engine = TemplateEngine()
        assert engine.render_string("{{ code }}", {"code": "a < b && c"}) == "a < b && c"

    def test_generator_templates_on_disk(self):
        engine = TypescriptGenerator().template_engine
        assert engine.template_exists("document.ts.j2")

    def test_memory_template_overrides_file(self):
        engine = TypescriptGenerator().template_engine
        engine.add_template("document.ts.j2", "{{ exports }}")

        assert engine.render_template("document.ts.j2", {"exports": "x"}) == "x"

    def test_environment_has_no_custom_filters(self):
        engine = TemplateEngine()
        with pytest.raises(TemplateError):
            engine.render_string("{{ text | comment }}", {"text": "a"})
