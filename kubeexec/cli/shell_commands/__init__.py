"""Shell command abstractions for cluster listing, picking and exec.

This package provides the subprocess-backed collaborators used by the
resolution pipeline:

- kubectl: context/pod/container listing and remote exec
- fzf: interactive selection
- runner: shared subprocess execution with timeouts

Usage:
    from kubeexec.cli.shell_commands import ShellCommands

    commands = ShellCommands(terminal)
    contexts = commands.kubectl.list_contexts()
"""

from __future__ import annotations

from kubeexec.core.interfaces import Terminal

from .fzf import FzfCommands
from .kubectl import KubectlCommands
from .runner import CommandRunner
from .types import CommandResult


class ShellCommands:
    """Unified interface for all shell command operations.

    Attributes:
        kubectl: Lister and Executor backed by kubectl
        fzf: Picker backed by fzf
    """

    def __init__(self, terminal: Terminal) -> None:
        """Initialize the shell commands executor.

        Args:
            terminal: Terminal probe used to decide on ``kubectl exec -t``
        """
        self._runner = CommandRunner()
        self.kubectl = KubectlCommands(self._runner, terminal)
        self.fzf = FzfCommands(self._runner)


__all__ = [
    "ShellCommands",
    "CommandResult",
    "CommandRunner",
    "FzfCommands",
    "KubectlCommands",
]
