"""
CLI integration for code generation functionality.

Provides the generation-related arguments and output handling used by
the command-line interface.
"""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

from graphql import GraphQLSchema
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ..logging_config import get_logger
from .core.config import ConfigError, GeneratorConfig, load_config
from .core.generator import GenerationResult, generate_code
from .registry import RegistryError, get_generator, get_language_info, list_supported_languages

logger = get_logger(__name__)

# Syntax lexer per generator language
SYNTAX_LEXERS = {"typescript": "typescript"}


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add code generation arguments to a CLI parser."""
    codegen_group = parser.add_argument_group("code generation")

    codegen_group.add_argument(
        "--language",
        "-l",
        default="typescript",
        help="Target language (default: typescript; use --list-languages to see options)",
    )

    codegen_group.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )

    codegen_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )

    codegen_group.add_argument(
        "--set",
        dest="options",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Override a configuration option; VALUE is parsed as JSON when possible",
    )

    codegen_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata and debug logging",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )


def parse_option_overrides(options: List[str]) -> Dict[str, Any]:
    """
    Parse KEY=VALUE pairs into a configuration mapping.

    Values that parse as JSON keep their JSON type; anything else is a string.

    Raises:
        CLIError: If an entry has no '=' or an empty key
    """
    overrides = {}
    for option in options:
        key, sep, raw_value = option.partition("=")
        key = key.strip()
        if not sep or not key:
            raise CLIError(f"Invalid option '{option}', expected KEY=VALUE")
        try:
            value = json.loads(raw_value)
        except json.JSONDecodeError:
            value = raw_value
        overrides[key] = value
    return overrides


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and --set overrides."""
    try:
        return load_config(
            args.language,
            custom_config=parse_option_overrides(args.options),
            config_file=args.config,
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def list_languages() -> int:
    """List supported languages with details."""
    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {language}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] gql-typegen [dim]schema.graphql[/dim] "
            "--output [cyan]types.ts[/cyan] --set [cyan]enumsAsTypes=true[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def generate_and_output(schema: GraphQLSchema, args: argparse.Namespace) -> int:
    """Generate code and handle output with rich formatting."""
    try:
        config = build_config(args)
        generator = get_generator(args.language, config)
    except (CLIError, RegistryError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    result = generate_code(generator, schema)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {generator.language_name} code saved to "
            f"[cyan]{output_path}[/cyan]"
        )
    elif console.is_terminal:
        lexer = SYNTAX_LEXERS.get(generator.language_name, "text")
        console.print(Syntax(result.code, lexer, theme="monokai", word_wrap=True))
    else:
        # Redirected output stays byte-exact
        console.file.write(result.code)

    if args.verbose:
        _print_metadata(result)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def _print_metadata(result: GenerationResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)
