"""Main CLI application module.

This module provides the entry point for kubeexec, also installed as the
``kubectl xc`` plugin (``kubectl-xc``).

Usage:
    kubeexec                          select a pod and exec into it
    kubeexec <POD>                    exec into a specific pod (exact or partial)
    kubeexec --context <CTX>          use a specific context (exact or partial)
    kubeexec --context                select a context from a list
    kubeexec <POD> -- <CMD> [ARGS]    run a command in a specific pod
    kubeexec -A <NS>/<POD>            target a pod across all namespaces directly
"""

import sys
from collections.abc import Sequence

import typer

from kubeexec.runtime.log_config import configure_logging

from .commands import NOTES, exec_command
from .context import build_cli_context
from .shared.argv import (
    display_name,
    normalize_optional_value_flags,
    reject_deprecated_args,
    split_command_args,
)
from .shared.console import console

# Create the main CLI application
app = typer.Typer(
    help="Select a Kubernetes pod and container, then exec into it.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command(name="exec", epilog=NOTES)(exec_command)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the CLI.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
    """
    configure_logging()
    raw_args = list(sys.argv[1:] if argv is None else argv)

    flag_args, remote_command = split_command_args(raw_args)
    error = reject_deprecated_args(flag_args)
    if error:
        console.error(error)
        raise SystemExit(2)

    app(
        args=normalize_optional_value_flags(flag_args),
        prog_name=display_name(sys.argv[0]),
        obj=build_cli_context(tuple(remote_command)),
    )


if __name__ == "__main__":
    main()
