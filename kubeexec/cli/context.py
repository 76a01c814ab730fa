"""CLI context and dependency container."""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

from kubeexec.cli.shared.console import CLIConsole, console
from kubeexec.cli.shared.terminal import StdioTerminal
from kubeexec.cli.shell_commands import ShellCommands


@dataclass(frozen=True)
class CLIContext:
    """Runtime dependencies for the exec command.

    ``remote_command`` holds everything after ``--`` on the command line;
    it is split off before Typer parses the flags.
    """

    console: CLIConsole
    terminal: StdioTerminal
    commands: ShellCommands
    remote_command: tuple[str, ...] = ()


def build_cli_context(remote_command: tuple[str, ...] = ()) -> CLIContext:
    """Build a fresh CLIContext."""
    terminal = StdioTerminal(console)
    return CLIContext(
        console=console,
        terminal=terminal,
        commands=ShellCommands(terminal),
        remote_command=remote_command,
    )


def get_cli_context(ctx: typer.Context | None = None) -> CLIContext:
    """Return the CLIContext from Typer, falling back to a new instance."""
    context = ctx or click.get_current_context(silent=True)
    if context and isinstance(context.obj, CLIContext):
        return context.obj
    return build_cli_context()
