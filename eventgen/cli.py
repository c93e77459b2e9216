"""
Command-line interface for the events generator.

Subcommands:
    generate   Generate event modules from a schema
    base       Generate only the shared base event module
    inspect    Show how a schema's events resolve
    languages  List supported target languages
"""

import argparse
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core.config import ConfigError, GeneratorConfig, load_config
from .core.errors import GeneratorError
from .core.schema import parse_schema
from .core.templates import TemplateError
from .core.writer import MemoryWriter
from .generator import EventsGenerator
from .logging_config import get_logger, setup_logging
from .registry import (
    RegistryError,
    get_registry,
    list_all_language_info,
    list_supported_languages,
)
from .utils import SchemaLoaderError, load_schema_text

logger = get_logger(__name__)

console = Console()

HANDLED_ERRORS = (
    ConfigError,
    GeneratorError,
    RegistryError,
    SchemaLoaderError,
    TemplateError,
    OSError,
    UnicodeError,
)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def _add_target_args(parser: argparse.ArgumentParser):
    """Options shared by every command that writes files."""
    parser.add_argument(
        "--destination",
        "-d",
        metavar="DIR",
        help="Directory the package tree is written to (default: generated)",
    )
    parser.add_argument(
        "--package",
        "-p",
        dest="package_name",
        metavar="NAME",
        help="Dotted package the generated modules live in",
    )
    parser.add_argument(
        "--language",
        "-l",
        metavar="LANGUAGE",
        help="Target language (use 'eventgen languages' to see options)",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging and metadata"
    )


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="eventgen",
        description="Generate typed analytics event classes from a JSON schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  eventgen generate analytics.json -d src -p myapp.analytics
  eventgen generate --url https://example.com/events.json -l kotlin -p com.app.events
  eventgen inspect analytics.json
  eventgen languages
        """.strip(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    generate = subparsers.add_parser(
        "generate", help="Generate event modules from a schema"
    )
    input_group = generate.add_mutually_exclusive_group()
    input_group.add_argument("schema", nargs="?", help="Schema JSON file")
    input_group.add_argument("--url", help="URL to fetch the schema from")
    _add_target_args(generate)
    generate.add_argument(
        "--strict-screen-name",
        action="store_true",
        help="Fail when an event has no screen_name parameter",
    )
    generate.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add comments to generated code",
    )
    generate.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated code instead of writing files",
    )
    generate.set_defaults(func=_handle_generate)

    base = subparsers.add_parser("base", help="Generate only the base event module")
    _add_target_args(base)
    base.set_defaults(func=_handle_base)

    inspect = subparsers.add_parser(
        "inspect", help="Show how the events in a schema resolve"
    )
    inspect_input = inspect.add_mutually_exclusive_group()
    inspect_input.add_argument("schema", nargs="?", help="Schema JSON file")
    inspect_input.add_argument("--url", help="URL to fetch the schema from")
    inspect.add_argument("--language", "-l", metavar="LANGUAGE")
    inspect.add_argument("--verbose", "-v", action="store_true")
    inspect.set_defaults(func=_handle_inspect)

    languages = subparsers.add_parser("languages", help="List supported languages")
    languages.set_defaults(func=_handle_languages)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    setup_logging(verbose=getattr(args, "verbose", False))

    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except HANDLED_ERRORS as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]✗ {type(e).__name__}:[/red] {escape(str(e))}")
        return 1


def _resolve_language(language: Optional[str]) -> Optional[str]:
    if not language:
        return None
    registry = get_registry()
    if not registry.is_supported(language):
        raise CLIError(
            f"Unsupported language '{language}'. "
            f"Supported languages: {', '.join(list_supported_languages())}"
        )
    return registry.resolve_language(language)


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the config file and command-line overrides."""
    overrides = {}

    if getattr(args, "destination", None):
        overrides["destination_path"] = args.destination
    if getattr(args, "package_name", None):
        overrides["package_name"] = args.package_name
    if getattr(args, "strict_screen_name", False):
        overrides["strict_screen_name"] = True
    if getattr(args, "no_comments", False):
        overrides["add_comments"] = False

    language = _resolve_language(getattr(args, "language", None))
    config = load_config(
        language, custom_config=overrides, config_file=getattr(args, "config", None)
    )

    if not language:
        # The language may also come from the config file
        config.language = _resolve_language(config.language)
    return config


def _load_schema(args: argparse.Namespace, config: GeneratorConfig) -> str:
    schema_file = getattr(args, "schema", None)
    url = getattr(args, "url", None)

    if not schema_file and not url:
        schema_file = config.schema_file
    if not schema_file and not url:
        raise CLIError(
            "Input source required (SCHEMA file, --url, or schema_file in config)"
        )

    return load_schema_text(file_path=schema_file, url=url)


def _handle_generate(args: argparse.Namespace) -> int:
    config = _build_config(args)
    writer = MemoryWriter() if args.dry_run else None

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        load_task = progress.add_task("[cyan]Loading schema...", total=None)
        schema_text = _load_schema(args, config)
        progress.remove_task(load_task)

        gen_task = progress.add_task(
            f"[green]Generating {config.language} events...", total=None
        )
        result = EventsGenerator(config, writer=writer).generate(schema_text)
        progress.remove_task(gen_task)

    if args.dry_run:
        for generated in result.files:
            console.print(
                Panel(
                    Syntax(generated.content, config.language, theme="monokai"),
                    title=f"📄 {generated.relative_path}",
                    border_style="green",
                )
            )
    else:
        for location in result.locations:
            console.print(f"[green]✓[/green] Wrote [cyan]{location}[/cyan]")

    if args.verbose and result.metadata:
        _print_metadata(result.metadata)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")

    return 0


def _handle_base(args: argparse.Namespace) -> int:
    config = _build_config(args)
    generated = EventsGenerator(config).generate_base_type()
    console.print(
        f"[green]✓[/green] Wrote [cyan]{generated.relative_path}[/cyan] "
        f"to [cyan]{config.destination_path}[/cyan]"
    )
    return 0


def _handle_inspect(args: argparse.Namespace) -> int:
    config = _build_config(args)
    categories = parse_schema(_load_schema(args, config))
    generator = EventsGenerator(config, writer=MemoryWriter())

    table = Table(
        title="📋 Schema Events",
        box=box.ROUNDED,
        title_style="bold cyan",
    )
    table.add_column("Category", style="bold green", no_wrap=True)
    table.add_column("Event", style="cyan")
    table.add_column("Type", style="bold")
    table.add_column("Shape", style="blue")
    table.add_column("Screen", style="dim")
    table.add_column("Fields")

    constant_count = 0
    for category in categories:
        module = generator.build_category_module(category)
        constant_count += len(module.constants)
        for event_type in module.event_types:
            table.add_row(
                escape(category.name),
                escape(event_type.event_name),
                f"{module.container_name}.{event_type.name}",
                "singleton" if event_type.is_simple else "record",
                escape(event_type.screen_name) or "[dim]none[/dim]",
                ", ".join(f.name for f in event_type.fields) or "[dim]-[/dim]",
            )

    console.print(table)
    console.print(
        f"[bold]{len(categories)}[/bold] categories, "
        f"[bold]{constant_count}[/bold] predefined values"
    )
    return 0


def _handle_languages(args: argparse.Namespace) -> int:
    language_info = list_all_language_info()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")
    table.add_column("Default Package")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info.aliases) if info.aliases else "[dim]none[/dim]"
        table.add_row(
            lang_name,
            info.file_extension,
            info.class_name,
            aliases,
            info.package_name,
        )

    console.print(table)
    return 0


def _print_metadata(metadata: dict):
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
