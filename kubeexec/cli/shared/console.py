"""Shared console output for the CLI.

Notices, warnings, errors and prompts go to stderr so that stdout carries
only command output (the dry-run rendering, or the remote command's own
output).
"""

from collections.abc import Callable

import typer
from rich.console import Console, ConsoleRenderable
from rich.markup import escape
from rich.panel import Panel

from kubeexec.core.errors import KubeExecError


class CLIConsole:
    """Rich console wrapper for consistent CLI output."""

    def __init__(self) -> None:
        """Initialize the CLI console."""
        self.console = Console(stderr=True)
        self.out = Console(highlight=False, soft_wrap=True)

    def print(self, msg: ConsoleRenderable | str | None = None) -> None:
        self.console.print(msg)

    def emit(self, text: str) -> None:
        """Write plain text to stdout, without markup or wrapping."""
        self.out.print(text, markup=False, emoji=False)

    def info(self, msg: str) -> None:
        self.console.print(f"[cyan]note:[/cyan] {escape(msg)}")

    def error(self, msg: str) -> None:
        self.console.print(f"[bold red]error:[/bold red] {escape(msg)}")

    def input(self, prompt: str) -> str:
        """Prompt on stderr and read one line from stdin.

        Raises:
            EOFError: At end of input
        """
        return self.console.input(escape(prompt))

    def handle_error(
        self, message: str, details: str | None = None, exit_code: int = 1
    ) -> None:
        """Handle an error by printing a message and exiting.

        Args:
            message: Error message to display
            details: Optional additional details
            exit_code: Exit code to use
        """
        self.error(message)
        if details:
            self.console.print(
                Panel(escape(details), title="Details", border_style="red")
            )
        raise typer.Exit(exit_code)


def with_error_handling(func: Callable[..., None]) -> Callable[..., None]:
    """Decorator to wrap command functions with standard error handling.

    Catches KubeExecError and reports it with the error's exit code.

    Args:
        func: The command function to wrap

    Returns:
        Wrapped function with error handling
    """
    from functools import wraps

    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> None:
        try:
            func(*args, **kwargs)
        except KubeExecError as e:
            console.handle_error(e.message, e.details, e.exit_code)
        except KeyboardInterrupt:
            console.print("\n[dim]Operation cancelled by user.[/dim]")
            raise typer.Exit(130) from None

    return wrapper


# Shared console instance for consistent output
console = CLIConsole()
