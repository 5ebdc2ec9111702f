"""Utility functions for loading GraphQL schemas.

This module provides functions for loading schemas from SDL files and
introspection results with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Sequence

from graphql import GraphQLError, GraphQLSchema, build_client_schema, build_schema

from .logging_config import get_logger

logger = get_logger(__name__)

SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def read_sdl_file(file_path: str | Path) -> str:
    """Read SDL source from a local file.

    Args:
        file_path: Path to the schema file.

    Returns:
        File contents.

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug("Reading schema source from %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() not in SDL_SUFFIXES:
        # Don't raise, the contents may still be valid SDL
        logger.warning("File does not have a GraphQL extension: %s", file_path)

    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e, exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e


def load_schema_from_introspection(file_path: str | Path) -> GraphQLSchema:
    """Build a schema from a JSON introspection result.

    Both the bare `{"__schema": ...}` object and a full response wrapped
    in `data` are accepted.

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If the JSON is invalid or not an introspection result.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    if isinstance(data, dict) and "data" in data:
        data = data["data"]
    if not isinstance(data, dict) or "__schema" not in data:
        raise SchemaLoaderError(f"Not an introspection result: {file_path}")

    try:
        schema = build_client_schema(data)
    except (GraphQLError, TypeError) as e:
        raise SchemaLoaderError(f"Invalid introspection result in {file_path}: {e}") from e
    logger.info("Loaded schema from introspection result %s", file_path)
    return schema


def load_schema_from_files(file_paths: Sequence[str | Path]) -> tuple[str, GraphQLSchema]:
    """Load a schema from one or more files.

    SDL files are concatenated in the given order and built as one
    document. A single `.json` file is read as an introspection result.

    Args:
        file_paths: Schema files.

    Returns:
        Tuple of (source description, schema).

    Raises:
        SchemaLoaderError: If no files are given or the schema is invalid.
        FileNotFoundError: If a file doesn't exist.
    """
    if not file_paths:
        raise SchemaLoaderError("At least one schema file must be provided")

    paths = [Path(p) for p in file_paths]
    source = ", ".join(str(p) for p in paths)

    if len(paths) == 1 and paths[0].suffix.lower() == ".json":
        return source, load_schema_from_introspection(paths[0])

    sdl = "\n".join(read_sdl_file(p) for p in paths)
    try:
        schema = build_schema(sdl)
    except GraphQLError as e:
        logger.error("Invalid schema in %s: %s", source, e)
        raise SchemaLoaderError(f"Invalid schema in {source}: {e}") from e

    logger.info("Loaded schema from %d file(s)", len(paths))
    return source, schema
