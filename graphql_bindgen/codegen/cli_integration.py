"""
CLI integration for code generation functionality.

Provides the command-line interface for generating bindings from a schema.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import (
    generate_from_schema,
    list_supported_languages,
    list_all_language_info,
    load_config,
    ConfigError,
    GeneratorConfig,
    GeneratorError,
    RegistryError,
)
from .registry import get_registry, is_language_supported
from ..logging_config import get_logger, setup_logging
from ..utils import SchemaLoaderError, load_schema

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Status and errors go to stderr so generated code can be piped from stdout
console = Console(stderr=True)
output_console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the graphql-bindgen command."""
    parser = argparse.ArgumentParser(
        prog="graphql-bindgen",
        description="Generate typed bindings from a GraphQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graphql-bindgen schema.graphql -o src/generated/binding.ts
  graphql-bindgen --url https://api.example.com/graphql -o binding.ts
  graphql-bindgen schema.graphql --scalar JSON=any --scalar Long=number
  graphql-bindgen --list-languages
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument(
        "file", nargs="?", help="Schema file (SDL or introspection JSON)"
    )
    input_group.add_argument("--url", help="GraphQL endpoint to introspect")

    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="HTTP header for --url requests (repeatable)",
    )
    parser.add_argument(
        "--timeout", type=int, default=30, help="Request timeout in seconds"
    )

    # Core generation options
    parser.add_argument(
        "--language",
        "-l",
        default="typescript",
        help="Target language for code generation (default: typescript)",
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--schema-module",
        metavar="PATH",
        help="Schema module the binding imports (default: the input file)",
    )

    # Generation options
    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't emit descriptions or the header comment",
    )
    gen_group.add_argument(
        "--scalar",
        action="append",
        default=[],
        metavar="NAME=TYPE",
        help="Map a custom scalar to a target type (repeatable)",
    )
    gen_group.add_argument(
        "--async-iterator-subscriptions",
        action="store_true",
        help="Type subscription fields as Promise<AsyncIterator<T>>",
    )
    gen_group.add_argument(
        "--sort-by-name",
        action="store_true",
        help="Order declarations by type name instead of by kind",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )
    info_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Handle code generation from parsed CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if args.list_languages:
            return _list_languages()

        if not (args.file or args.url):
            raise CLIError("Input source required (schema file or --url)")

        language = args.language.lower()
        if not _validate_language(language):
            return 1

        config = _build_config(args, language)
        return _generate_and_output(args, language, config)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("CLI error", exc_info=True)
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["file_extension"], info["class"], aliases)

    output_console.print()
    output_console.print(table)
    output_console.print()
    output_console.print(
        Panel(
            "[bold]Usage:[/bold] graphql-bindgen [dim]schema.graphql[/dim] "
            "--language [cyan]LANGUAGE[/cyan] -o [dim]binding.ts[/dim]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    if not is_language_supported(language):
        supported = list_supported_languages()
        if not silent:
            console.print(f"[red]✗ Unsupported language '{language}'[/red]")
            console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _parse_pairs(values: List[str], option: str) -> dict[str, str]:
    """Parse repeated NAME=VALUE options."""
    pairs = {}
    for value in values:
        name, sep, target = value.partition("=")
        if not sep or not name.strip() or not target.strip():
            raise CLIError(f"Invalid {option} value '{value}', expected NAME=VALUE")
        pairs[name.strip()] = target.strip()
    return pairs


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {}

    input_path = args.schema_module or args.file
    if input_path:
        overrides["input_schema_path"] = input_path
    if args.output:
        overrides["output_binding_path"] = args.output
        overrides["output_file"] = args.output

    if args.no_comments:
        overrides["add_comments"] = False
    if args.async_iterator_subscriptions:
        overrides["async_iterator_subscriptions"] = True
    if args.sort_by_name:
        overrides["sort_types_by_name"] = True

    scalars = _parse_pairs(args.scalar, "--scalar")

    try:
        config = load_config(
            get_registry().resolve_language(language),
            custom_config=overrides,
            config_file=args.config,
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    if scalars:
        config.scalar_overrides = {**config.scalar_overrides, **scalars}

    return config


def _generate_and_output(
    args: argparse.Namespace, language: str, config: GeneratorConfig
) -> int:
    """Load the schema, generate code and handle output with rich formatting."""
    headers = _parse_pairs(args.header, "--header")

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            load_task = progress.add_task("[cyan]Loading schema...", total=None)
            source, schema = load_schema(
                file_path=args.file, url=args.url, timeout=args.timeout, headers=headers
            )
            progress.remove_task(load_task)

            gen_task = progress.add_task(
                f"[green]Generating {language} code...", total=None
            )
            result = generate_from_schema(schema, language, config)
            progress.remove_task(gen_task)

    except (SchemaLoaderError, FileNotFoundError) as e:
        console.print(f"[red]✗ Failed to load schema:[/red] {e}")
        return 1
    except (RegistryError, GeneratorError) as e:
        console.print(f"[red]✗[/red] {e}")
        return 1

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {language} binding from {source} "
            f"saved to [cyan]{output_path}[/cyan]"
        )
    elif output_console.is_terminal:
        output_console.print(Syntax(result.code, language, theme="monokai"))
    else:
        # Piped output stays byte-exact
        sys.stdout.write(result.code)

    if args.verbose and result.metadata:
        _print_metadata(result.metadata)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def _print_metadata(metadata: dict) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the graphql-bindgen command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return handle_codegen_command(args)
