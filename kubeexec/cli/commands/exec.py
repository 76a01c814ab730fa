"""The exec command: resolve a pod/container and run a command in it."""

from typing import Annotated

import typer

from kubeexec import __version__
from kubeexec.cli.context import get_cli_context
from kubeexec.cli.shared.console import with_error_handling
from kubeexec.core.models import ResolutionRequest
from kubeexec.core.services.confirm import ConfirmationGate
from kubeexec.core.services.dispatch import ExecutionDispatcher
from kubeexec.core.services.pipeline import run
from kubeexec.runtime.config.settings import BOOL_VALUE_HINT, parse_bool, resolve_settings

NOTES = """\
[bold]Notes[/bold]

- A kubectl context must be set unless --context is provided
- Uses the context namespace when -n is not provided
- If --context or POD is ambiguous, the fzf picker is used
- If fzf is disabled and selection is required, the command exits with an error
- If a pod has multiple containers, its default is used when declared; otherwise the picker is shown
- Config precedence: flag > env > ~/.config/kubeexec/kubeexec.yaml
"""


def _bool_value(
    ctx: typer.Context, param: typer.CallbackParam, value: str | None
) -> bool | None:
    """Validate true/True/1/on/ON/false/False/0/off/OFF flag values."""
    if value is None or ctx.resilient_parsing:
        return None
    parsed = parse_bool(value)
    if parsed is None:
        raise typer.BadParameter(f"invalid value {value!r} (use {BOOL_VALUE_HINT})")
    return parsed


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@with_error_handling
def exec_command(
    ctx: typer.Context,
    pod: Annotated[
        str | None,
        typer.Argument(
            help="Pod name (exact or partial). With -A, also <namespace>/<pod>.",
            show_default=False,
        ),
    ] = None,
    context: Annotated[
        str | None,
        typer.Option(
            "--context",
            help="Kubernetes context (exact or partial); bare --context opens a picker",
            show_default=False,
        ),
    ] = None,
    namespace: Annotated[
        str,
        typer.Option(
            "--namespace",
            "-n",
            help="Kubernetes namespace (defaults to the context namespace)",
        ),
    ] = "",
    container: Annotated[
        str,
        typer.Option(
            "--container",
            "-c",
            help="Container name (defaults to the pod's default)",
        ),
    ] = "",
    selector: Annotated[
        str,
        typer.Option(
            "--selector",
            "-l",
            help="Label selector for pods (e.g. app=api)",
        ),
    ] = "",
    all_namespaces: Annotated[
        bool,
        typer.Option(
            "--all-namespaces",
            "-A",
            help="List pods across all namespaces",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Print the kubectl command without executing it",
        ),
    ] = False,
    confirm_context: Annotated[
        str | None,
        typer.Option(
            "--confirm-context",
            help="Confirm when context/namespace looks like prod "
            "(env: KUBEEXEC_CONFIRM_CONTEXT)",
            callback=_bool_value,
            show_default=False,
        ),
    ] = None,
    non_interactive: Annotated[
        str | None,
        typer.Option(
            "--non-interactive",
            help="Run without stdin (no -i), useful for scripts "
            "(env: KUBEEXEC_NON_INTERACTIVE)",
            callback=_bool_value,
            show_default=False,
        ),
    ] = None,
    ignore_fzf: Annotated[
        str | None,
        typer.Option(
            "--ignore-fzf",
            help="Never open the fzf picker; ambiguity is an error "
            "(env: KUBEEXEC_IGNORE_FZF)",
            callback=_bool_value,
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Print version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Select a pod and exec into it.

    Everything after [bold]--[/bold] is run in the container instead of a shell.
    """
    if pod == "version":
        typer.echo(__version__)
        return

    cli = get_cli_context(ctx)
    # the callbacks above turn the raw strings into bool | None
    settings = resolve_settings(
        confirm_context=confirm_context,  # type: ignore[arg-type]
        non_interactive=non_interactive,  # type: ignore[arg-type]
        ignore_fzf=ignore_fzf,  # type: ignore[arg-type]
    )
    request = ResolutionRequest(
        context=context or "",
        context_requested=context is not None,
        namespace=namespace,
        selector=selector,
        pod=pod or "",
        container=container,
        all_namespaces=all_namespaces,
        command=cli.remote_command,
        dry_run=dry_run,
    )

    gate = ConfirmationGate(
        cli.terminal,
        enabled=settings.confirm_context,
        keywords=settings.confirm_keywords,
    )
    dispatcher = ExecutionDispatcher(
        cli.commands.kubectl, gate, cli.terminal, emit=cli.console.emit
    )
    status = run(
        request,
        settings,
        lister=cli.commands.kubectl,
        picker=cli.commands.fzf,
        dispatcher=dispatcher,
        notify=cli.console.info,
    )
    if status:
        raise typer.Exit(status)
