from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Sequence

from graphql import GraphQLSchema
from rich.console import Console

from .codegen import cli_integration
from .codegen.cli_integration import add_codegen_args, generate_and_output, list_languages
from .logging_config import get_logger, setup_logging
from .utils import SchemaLoaderError, load_schema_from_files

logger = get_logger(__name__)


class CLIHandler:
    """Handle command-line interface (CLI) operations for schema generation."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Console for user-facing output (defaults to stdout).
        """
        self.schema: GraphQLSchema | None = None
        self.source: str | None = None
        self.console = console or cli_integration.console
        logger.debug("CLIHandler initialized")

    def load(self, paths: Sequence[str]) -> bool:
        """Load the schema from the given files.

        Args:
            paths: SDL files, or one JSON introspection result.

        Returns:
            True when the schema was loaded.
        """
        try:
            self.source, self.schema = load_schema_from_files(paths)
        except (SchemaLoaderError, FileNotFoundError) as e:
            self.console.print(f"❌ [red]{e}[/red]")
            logger.debug("Schema loading failed", exc_info=True)
            return False
        logger.info("Schema loaded from: %s", self.source)
        return True

    def run(self, args: Any) -> int:
        """Run CLI mode operations based on parsed arguments.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if getattr(args, "list_languages", False):
            return list_languages()

        if not args.schema:
            self.console.print("❌ [red]No schema files given[/red]")
            return 1

        if not self.load(args.schema):
            return 1

        return generate_and_output(self.schema, args)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the gql-typegen command."""
    parser = argparse.ArgumentParser(
        prog="gql-typegen",
        description="Generate TypeScript type declarations from a GraphQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gql-typegen schema.graphql
  gql-typegen schema.graphql extensions.graphql -o types.ts
  gql-typegen schema.graphql --config codegen.json --set enumsAsTypes=true
  gql-typegen --list-languages
        """.strip(),
    )
    parser.add_argument("schema", nargs="*", help="SDL files (or one introspection JSON)")
    add_codegen_args(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the gql-typegen command."""
    args = create_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    return CLIHandler().run(args)


if __name__ == "__main__":
    sys.exit(main())
