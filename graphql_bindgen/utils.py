"""Utility functions for loading GraphQL schemas.

This module provides functions for loading a schema from SDL files,
introspection result files and live endpoints, with proper error handling.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests
from graphql import (
    GraphQLError,
    GraphQLSchema,
    build_client_schema,
    build_schema,
    get_introspection_query,
)

from .logging_config import get_logger

logger = get_logger(__name__)

SDL_SUFFIXES = {".graphql", ".graphqls", ".gql"}
INTROSPECTION_SUFFIXES = {".json"}


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def build_schema_from_introspection(result: Any) -> GraphQLSchema:
    """Build a schema from an introspection result.

    Accepts either the bare ``{"__schema": ...}`` payload or a full GraphQL
    response with a ``data`` envelope.

    Raises:
        SchemaLoaderError: If the payload is not an introspection result.
    """
    if isinstance(result, dict) and "errors" in result and not result.get("data"):
        messages = [error.get("message", str(error)) for error in result["errors"]]
        raise SchemaLoaderError(f"Introspection failed: {'; '.join(messages)}")

    if isinstance(result, dict) and "data" in result:
        result = result["data"]

    if not isinstance(result, dict) or "__schema" not in result:
        raise SchemaLoaderError("Introspection result has no __schema entry")

    try:
        return build_client_schema(result)
    except (GraphQLError, TypeError, KeyError) as e:
        raise SchemaLoaderError(f"Invalid introspection result: {e}") from e


def load_schema_from_file(file_path: str | Path) -> tuple[str, GraphQLSchema]:
    """Load a schema from a local SDL or introspection JSON file.

    Args:
        file_path: Path to the schema file.

    Returns:
        Tuple of (source description, schema).

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read or the schema is invalid.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load schema from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in SDL_SUFFIXES | INTROSPECTION_SUFFIXES:
        # Might still be valid SDL
        logger.warning(f"Unrecognized schema file extension, reading as SDL: {file_path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    if suffix in INTROSPECTION_SUFFIXES:
        try:
            schema = build_schema_from_introspection(json.loads(content))
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
            raise SchemaLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    else:
        try:
            schema = build_schema(content)
        except (GraphQLError, TypeError) as e:
            logger.error(f"Invalid schema in file {file_path}: {e}", exc_info=True)
            raise SchemaLoaderError(f"Invalid schema in file {file_path}: {e}") from e

    logger.info(f"Successfully loaded schema from {file_path}")
    return f"📄 {file_path}", schema


def load_schema_from_url(
    url: str, timeout: int = 30, headers: dict[str, str] | None = None
) -> tuple[str, GraphQLSchema]:
    """Load a schema by running the introspection query against an endpoint.

    Args:
        url: GraphQL endpoint URL.
        timeout: Request timeout in seconds.
        headers: Extra HTTP headers, e.g. for authorization.

    Returns:
        Tuple of (source description, schema).

    Raises:
        SchemaLoaderError: If URL is invalid, request fails, or the response
            isn't a valid introspection result.
    """
    logger.debug(f"Attempting to introspect schema from URL: {url}")

    # Validate URL
    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.post(
            url,
            json={"query": get_introspection_query(descriptions=True)},
            headers=headers or {},
            timeout=timeout,
        )
        response.raise_for_status()
        payload = response.json()

    except requests.exceptions.Timeout:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaLoaderError(f"Request timeout for URL: {url}")
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    schema = build_schema_from_introspection(payload)
    logger.info(f"Successfully introspected schema from {url}")
    return f"🌐 {url}", schema


def load_schema(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
    headers: dict[str, str] | None = None,
) -> tuple[str, GraphQLSchema]:
    """Load a schema from either a file or an endpoint URL.

    Args:
        file_path: Path to local schema file (mutually exclusive with url).
        url: Endpoint to introspect (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).
        headers: Extra HTTP headers (only used for URLs).

    Returns:
        Tuple of (source description, schema).

    Raises:
        SchemaLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise SchemaLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise SchemaLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_schema_from_file(file_path)
    else:
        return load_schema_from_url(url, timeout, headers)
