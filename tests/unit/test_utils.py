"""
Unit tests for schema loading.

Tests cover:
- SDL and introspection files
- Endpoint introspection over HTTP
- Error handling
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests
from graphql import introspection_from_schema

from graphql_bindgen.utils import (
    SchemaLoaderError,
    build_schema_from_introspection,
    load_schema,
    load_schema_from_file,
    load_schema_from_url,
)


def mock_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class TestLoadFromFile:
    """Tests for load_schema_from_file."""

    def test_sdl_file(self, sdl_file):
        source, schema = load_schema_from_file(sdl_file)

        assert str(sdl_file) in source
        assert "User" in schema.type_map
        assert schema.query_type.name == "Query"

    def test_introspection_file(self, user_schema, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(introspection_from_schema(user_schema)), encoding="utf-8")

        _, schema = load_schema_from_file(path)

        assert schema.type_map["User"].description == "A person using the service"
        assert list(schema.mutation_type.fields) == ["createUser", "deleteUser"]

    def test_introspection_file_with_data_envelope(self, user_schema, tmp_path):
        path = tmp_path / "schema.json"
        payload = {"data": introspection_from_schema(user_schema)}
        path.write_text(json.dumps(payload), encoding="utf-8")

        _, schema = load_schema_from_file(path)
        assert "SearchResult" in schema.type_map

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema_from_file(tmp_path / "missing.graphql")

    def test_invalid_sdl(self, tmp_path):
        path = tmp_path / "broken.graphql"
        path.write_text("type Query {", encoding="utf-8")

        with pytest.raises(SchemaLoaderError, match="Invalid schema"):
            load_schema_from_file(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(SchemaLoaderError, match="Invalid JSON"):
            load_schema_from_file(path)


class TestIntrospectionResults:
    def test_missing_schema_entry(self):
        with pytest.raises(SchemaLoaderError, match="__schema"):
            build_schema_from_introspection({"data": {}})

    def test_error_response(self):
        with pytest.raises(SchemaLoaderError, match="Not authorized"):
            build_schema_from_introspection({"errors": [{"message": "Not authorized"}]})


class TestLoadFromUrl:
    """Tests for load_schema_from_url with a mocked transport."""

    @patch("graphql_bindgen.utils.requests.post")
    def test_introspects_endpoint(self, mock_post, user_schema):
        mock_post.return_value = mock_response({"data": introspection_from_schema(user_schema)})

        source, schema = load_schema_from_url(
            "https://api.example.com/graphql", headers={"Authorization": "Bearer x"}
        )

        assert "https://api.example.com/graphql" in source
        assert "UserInput" in schema.type_map
        _, kwargs = mock_post.call_args
        assert "__schema" in kwargs["json"]["query"]
        assert kwargs["headers"] == {"Authorization": "Bearer x"}
        assert kwargs["timeout"] == 30

    def test_invalid_url(self):
        with pytest.raises(SchemaLoaderError, match="Invalid URL"):
            load_schema_from_url("not-a-url")

    @patch("graphql_bindgen.utils.requests.post")
    def test_timeout(self, mock_post):
        mock_post.side_effect = requests.exceptions.Timeout()

        with pytest.raises(SchemaLoaderError, match="timeout"):
            load_schema_from_url("https://api.example.com/graphql", timeout=1)

    @patch("graphql_bindgen.utils.requests.post")
    def test_http_error(self, mock_post):
        response = mock_response({})
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            response=MagicMock(status_code=500)
        )
        mock_post.return_value = response

        with pytest.raises(SchemaLoaderError, match="HTTP error 500"):
            load_schema_from_url("https://api.example.com/graphql")


class TestLoadSchema:
    def test_requires_a_source(self):
        with pytest.raises(SchemaLoaderError, match="must be provided"):
            load_schema()

    def test_rejects_both_sources(self, sdl_file):
        with pytest.raises(SchemaLoaderError, match="both"):
            load_schema(file_path=sdl_file, url="https://api.example.com/graphql")

    def test_file_source(self, sdl_file):
        _, schema = load_schema(file_path=sdl_file)
        assert "Role" in schema.type_map
