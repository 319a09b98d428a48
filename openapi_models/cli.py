"""
Command-line interface for model generation.

Prints a JSON result object to stdout for tooling, and a human-readable
summary (or error with traceback) to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from .codegen import generate
from .codegen.core.config import OutputMode, load_config
from .codegen.core.output import EmitResult, resolve_mode
from .logging_config import configure_logging, get_logger
from .utils import extract_schema_map, load_schema_document

logger = get_logger(__name__)

DEFAULT_OUTPUT = "api-models.ts"

# Human-readable output goes to stderr, stdout is reserved for the JSON result
console = Console(stderr=True)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="openapi-models",
        description="Generate TypeScript models from an OpenAPI document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  openapi-models openapi.json
  openapi-models openapi.json src/models.ts
  openapi-models openapi.json src/models --mode folder
  openapi-models https://api.example.com/openapi.json models.ts
        """.strip(),
    )

    parser.add_argument("input", nargs="?", help="OpenAPI/Swagger JSON file or URL")
    parser.add_argument(
        "output",
        nargs="?",
        default=DEFAULT_OUTPUT,
        help=f"Output file or directory (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--mode",
        "-m",
        metavar="{single,folder,auto}",
        help="Output layout, overriding the configuration file",
    )
    parser.add_argument(
        "--config",
        "-c",
        metavar="FILE",
        help="JSON configuration merged over the bundled defaults",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )
    return parser


def run(args: argparse.Namespace) -> EmitResult:
    """
    Load input and configuration, then generate.

    Raises:
        CLIError: If no input was given
        SchemaLoaderError: If the input document cannot be loaded
        ConfigError: If the configuration or the requested mode is invalid
    """
    if not args.input:
        raise CLIError("Input file is required")

    config = load_config(config_file=args.config)
    mode = resolve_mode(args.output, config.output, args.mode)
    document = load_schema_document(args.input)
    schemas = extract_schema_map(document)
    logger.debug("Found %d schemas in %s", len(schemas), args.input)

    return generate(schemas, args.output, config, mode)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the ``openapi-models`` command.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = create_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        result = run(args)
    except Exception as e:
        _print_json({"success": False, "error": str(e)})
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        if not isinstance(e, CLIError):
            console.print_exception()
        return 1

    _print_json(result.to_dict())
    _print_summary(result)
    return 0


def _print_json(payload: dict[str, Any]) -> None:
    print(json.dumps(payload))


def _print_summary(result: EmitResult) -> None:
    """Print a short summary of what was generated."""
    console.print(
        f"[green]✓[/green] Generated {result.interface_count} interfaces, "
        f"{result.enum_count} enums ([cyan]{result.mode.value}[/cyan] mode) "
        f"→ [cyan]{escape(result.destination)}[/cyan]"
    )

    if result.mode == OutputMode.FOLDER and result.files:
        table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
        table.add_column("Generated file", style="green")
        for file_name in result.files:
            table.add_row(escape(file_name))
        console.print(table)

    if result.warnings:
        console.print("[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")
