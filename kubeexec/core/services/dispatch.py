"""Final command composition and hand-off.

``exec_args`` is the single place the ``kubectl exec`` argument list is
built; the dry-run renderer and the real executor both use it.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable, Sequence

from loguru import logger

from kubeexec.core.interfaces import Executor, Terminal
from kubeexec.core.models import ResolutionResult

from .confirm import ConfirmationGate

DEFAULT_SHELL_COMMAND: tuple[str, ...] = (
    "sh",
    "-c",
    "command -v bash >/dev/null 2>&1 && exec bash || exec sh",
)


def kubectl_args(context: str, *args: str) -> list[str]:
    """Prefix ``args`` with ``--context`` when a context is set."""
    if not context:
        return list(args)
    return ["--context", context, *args]


def exec_args(
    context: str,
    namespace: str,
    pod: str,
    container: str,
    command: Sequence[str],
    non_interactive: bool,
    *,
    tty: bool,
) -> list[str]:
    """Build the ``kubectl`` arguments for the remote exec.

    Args:
        tty: Both local stdin and stdout are terminals; adds ``-t``

    Returns:
        Arguments without the leading ``kubectl``
    """
    args = ["exec"]
    if not non_interactive:
        args.append("-i")
    if tty:
        args.append("-t")
    if namespace:
        args.extend(["-n", namespace])
    args.append(pod)
    if container:
        args.extend(["-c", container])
    args.append("--")
    args.extend(command or DEFAULT_SHELL_COMMAND)
    return kubectl_args(context, *args)


def render_command(args: Sequence[str]) -> str:
    return shlex.join(["kubectl", *args])


class ExecutionDispatcher:
    """Prints the command (dry run) or confirms and runs it."""

    def __init__(
        self,
        executor: Executor,
        gate: ConfirmationGate,
        terminal: Terminal,
        emit: Callable[[str], None],
    ) -> None:
        self.executor = executor
        self.gate = gate
        self.terminal = terminal
        self.emit = emit

    def dispatch(
        self,
        target: ResolutionResult,
        command: Sequence[str],
        *,
        dry_run: bool,
        non_interactive: bool,
    ) -> int:
        """Render or execute the exec for ``target``.

        Returns:
            Exit status of the remote command (0 for a dry run)
        """
        if dry_run:
            tty = self.terminal.stdin_is_tty() and self.terminal.stdout_is_tty()
            args = exec_args(
                target.context,
                target.namespace,
                target.pod,
                target.container,
                command,
                non_interactive,
                tty=tty,
            )
            self.emit(render_command(args))
            return 0

        self.gate.check(target.context, target.namespace)
        logger.debug(f"Executing in {target}")
        return self.executor.run_remote(
            target.context,
            target.namespace,
            target.pod,
            target.container,
            command,
            non_interactive,
        )
