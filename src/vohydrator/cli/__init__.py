"""
vohydrator CLI - Main application entry point.

Developer tooling around the hydration engine: build a value object from a
JSON document, or inspect how a target type will be hydrated.

    vohydrator hydrate app.models:Order order.json
    cat order.json | vohydrator hydrate app.models:Order
    vohydrator describe app.models:Order
"""

import importlib
import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.pretty import Pretty
from rich.table import Table

from vohydrator import __version__
from vohydrator.cli.errors import (
    ExitCode,
    print_error,
    print_missing_value_error,
    print_target_not_found_error,
)
from vohydrator.core.config import VohydratorConfig, load_config, load_layered_env
from vohydrator.core.hydrate import HydrationError, Hydrator, MissingValue, format_path
from vohydrator.core.values import TypeCategory, describe

app = typer.Typer(
    name="vohydrator",
    help="Build validated value objects from raw data",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def resolve_target(target: str) -> Any:
    """
    Import a target type from a 'package.module:Qualified.Name' string.

    Raises:
        ValueError: If the string is not in module:name form
        ImportError: If the module cannot be imported
        AttributeError: If the name does not exist in the module
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError("Expected the form 'package.module:ClassName'")

    obj: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    return obj


def read_data(source: str) -> Any:
    """Read and decode a JSON document from a file path, or stdin for '-'."""
    text = sys.stdin.read() if source == "-" else Path(source).read_text()
    return json.loads(text)


def _resolve_or_exit(target: str) -> Any:
    try:
        return resolve_target(target)
    except (ValueError, ImportError, AttributeError) as e:
        print_target_not_found_error(target, str(e))
        raise typer.Exit(ExitCode.USER_ERROR) from e


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging of hydration decisions",
    ),
) -> None:
    """
    vohydrator - build validated value objects from raw data.

    Targets are given as 'package.module:ClassName' and must be importable
    from the current environment.
    """
    # Precedence: OS env > project .env > user .env
    load_layered_env()
    config = load_config()

    level = logging.DEBUG if debug else getattr(logging, config.logging.level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    ctx.obj = {"config": config, "debug": debug}


@app.command(name="hydrate")
def hydrate_command(
    ctx: typer.Context,
    target: str = typer.Argument(..., help="Target type as 'package.module:ClassName'"),
    data: str = typer.Argument("-", help="JSON file to read, or '-' for stdin"),
    max_depth: int | None = typer.Option(
        None,
        "--max-depth",
        min=1,
        help="Maximum nesting depth (overrides config)",
    ),
    strict_nulls: bool = typer.Option(
        False,
        "--strict-nulls",
        help="Reject explicit nulls for non-nullable fields instead of treating them as missing",
    ),
) -> None:
    """Hydrate TARGET from a JSON document and print the result."""
    config: VohydratorConfig = ctx.obj["config"]
    target_type = _resolve_or_exit(target)

    try:
        raw = read_data(data)
    except (OSError, json.JSONDecodeError) as e:
        print_error(
            "Cannot read input data",
            reason=str(e),
            solution="Pass a valid JSON file or pipe JSON to stdin",
        )
        raise typer.Exit(ExitCode.USER_ERROR) from e

    overrides: dict[str, Any] = {}
    if max_depth is not None:
        overrides["max_depth"] = max_depth
    if strict_nulls:
        overrides["null_as_missing"] = False
    hydration_config = config.hydration.model_copy(update=overrides)

    try:
        result = Hydrator(hydration_config).hydrate(target_type, raw)
    except MissingValue as e:
        print_missing_value_error(e.parameter, format_path(e.path))
        raise typer.Exit(ExitCode.USER_ERROR) from e
    except HydrationError as e:
        print_error(f"Cannot hydrate {target}", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e

    console.print(Pretty(result))


@app.command(name="describe")
def describe_command(
    target: str = typer.Argument(..., help="Target type as 'package.module:ClassName'"),
) -> None:
    """Show how TARGET is classified and which parameters it is built from."""
    target_type = _resolve_or_exit(target)
    descriptor = describe(target_type)

    console.print(f"[bold]{descriptor.name}[/bold]: {descriptor.category.value}")

    if descriptor.category is TypeCategory.UNSUPPORTED:
        console.print("[yellow]Not a value object; it cannot be hydrated.[/yellow]")
        raise typer.Exit(ExitCode.USER_ERROR)

    if descriptor.item_type is not None:
        console.print(f"Items: {descriptor.item_type.__qualname__}")

    if descriptor.category is TypeCategory.ENUM:
        for case in target_type:
            console.print(f"  {case.name} = {case.value!r}")
        return

    if not descriptor.parameters:
        return

    table = Table(title="Parameters")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Nullable")
    table.add_column("Default")

    for parameter in descriptor.parameters:
        type_name = getattr(parameter.declared_type, "__qualname__", repr(parameter.declared_type))
        table.add_row(
            str(parameter.position),
            parameter.name,
            escape(type_name),
            "yes" if parameter.nullable else "no",
            escape(repr(parameter.default)) if parameter.has_default else "-",
        )

    console.print(table)


@app.command()
def version() -> None:
    """Show vohydrator version and exit."""
    console.print(f"vohydrator version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main", "read_data", "resolve_target"]
