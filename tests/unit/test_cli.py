"""
Unit tests for the command-line interface.

Tests cover:
- Writing bindings to a file and to stdout
- Generation options
- Error exit codes
"""

import json

from graphql import introspection_from_schema

from graphql_bindgen.codegen.cli_integration import create_parser, main


class TestParser:
    def test_defaults(self):
        args = create_parser().parse_args(["schema.graphql"])

        assert args.file == "schema.graphql"
        assert args.language == "typescript"
        assert args.scalar == []
        assert args.output is None

    def test_repeatable_scalars(self):
        args = create_parser().parse_args(
            ["schema.graphql", "--scalar", "JSON=any", "--scalar", "Long=number"]
        )
        assert args.scalar == ["JSON=any", "Long=number"]


class TestGenerate:
    """Tests for successful generation runs."""

    def test_writes_output_file(self, sdl_file, tmp_path):
        output = tmp_path / "generated" / "binding.ts"

        exit_code = main([str(sdl_file), "-o", str(output)])

        assert exit_code == 0
        code = output.read_text(encoding="utf-8")
        assert "export interface User extends Node {" in code
        assert "import schema from '../schema'" in code

    def test_writes_to_stdout(self, sdl_file, capsys):
        exit_code = main([str(sdl_file), "--no-comments"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert out.startswith("import { makeBinding } from 'graphql-binding'")
        assert "const typeDefs = `" in out

    def test_scalar_option(self, sdl_file, tmp_path):
        output = tmp_path / "binding.ts"

        main([str(sdl_file), "-o", str(output), "--scalar", "JSON=any"])

        assert "export type JSON = any" in output.read_text(encoding="utf-8")

    def test_schema_module_option(self, sdl_file, tmp_path):
        output = tmp_path / "binding.ts"

        main([str(sdl_file), "-o", str(output), "--schema-module", "src/schema.ts"])

        code = output.read_text(encoding="utf-8")
        assert "from src/schema.ts. DO NOT EDIT." in code

    def test_config_file(self, sdl_file, tmp_path):
        config = tmp_path / "bindgen.json"
        config.write_text(json.dumps({"binding_module": "my-binding"}), encoding="utf-8")
        output = tmp_path / "binding.ts"

        exit_code = main([str(sdl_file), "-o", str(output), "--config", str(config)])

        assert exit_code == 0
        assert "from 'my-binding'" in output.read_text(encoding="utf-8")

    def test_introspection_input(self, user_schema, tmp_path):
        source = tmp_path / "schema.json"
        source.write_text(json.dumps(introspection_from_schema(user_schema)), encoding="utf-8")
        output = tmp_path / "binding.ts"

        assert main([str(source), "-o", str(output), "-l", "ts"]) == 0
        assert "export type SearchResult = User | Post" in output.read_text(encoding="utf-8")

    def test_list_languages(self):
        assert main(["--list-languages"]) == 0


class TestErrors:
    def test_no_input(self):
        assert main([]) == 1

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.graphql")]) == 1

    def test_unsupported_language(self, sdl_file):
        assert main([str(sdl_file), "--language", "cobol"]) == 1

    def test_bad_scalar_option(self, sdl_file):
        assert main([str(sdl_file), "--scalar", "JSON"]) == 1

    def test_missing_config_file(self, sdl_file, tmp_path):
        assert main([str(sdl_file), "--config", str(tmp_path / "nope.json")]) == 1
