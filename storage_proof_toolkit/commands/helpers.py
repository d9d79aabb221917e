"""Shared command helpers and utilities."""

import sys
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from storage_proof_toolkit.shared.exceptions import ProofParamsException

# Errors go to stderr so stdout only ever carries parameters
err_console = Console(stderr=True)


def handle_command_error(
    error: Exception, show_usage_fn: Optional[Callable[[], None]] = None
) -> None:
    """
    Standard error handling for commands.

    Args:
        error: The exception that occurred
        show_usage_fn: Optional function to display usage instructions
    """
    if isinstance(error, (ProofParamsException, ValueError)):
        label = "Error:"
    else:
        label = "Unexpected error:"
    err_console.print(
        f"[red]{label}[/red] {escape(str(error))}", highlight=False
    )

    if show_usage_fn:
        show_usage_fn()

    sys.exit(1)


def report_block_not_found(message: str) -> None:
    """Report a missing block; this is a clean exit, not a failure."""
    err_console.print(f"[yellow]Block not found![/yellow] {escape(message)}")
    sys.exit(0)
