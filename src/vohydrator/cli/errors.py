"""
Standardized error handling and exit codes for the vohydrator CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for vohydrator CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """The target could not be built from the data."""

    USER_ERROR = 2
    """Bad input: unknown target, unreadable data, or a missing required value."""

    SIGINT = 130
    """Terminated by SIGINT (Ctrl+C) - Unix standard."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened, printed verbatim
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Cannot import 'app.models:Order'",
        ...     reason="No module named 'app'",
        ...     solution="Run from the project root or install the package",
        ... )
    """
    console.print(f"[red]Error:[/red] {problem}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_target_not_found_error(target: str, reason: str) -> None:
    """Print error when a target type cannot be resolved."""
    print_error(
        f"Cannot resolve target '{target}'",
        reason=reason,
        solution="Use the form 'package.module:ClassName'",
    )


def print_missing_value_error(parameter: str, location: str) -> None:
    """Print error when the data lacks a required field."""
    print_error(
        f"Missing required value '{parameter}'",
        reason=f"No value, default, or null allowed at '{location}'",
        solution=f"Add '{parameter}' to the input data",
    )
