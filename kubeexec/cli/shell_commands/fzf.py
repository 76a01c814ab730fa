"""fzf picker command."""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from typing import TYPE_CHECKING

from kubeexec.core.errors import KubeExecError, ToolUnavailableError

if TYPE_CHECKING:
    from .runner import CommandRunner

# fzf exits 1 when nothing matched and 130 when the user hit Esc/Ctrl-C
FZF_CANCEL_CODES = frozenset({1, 130})


class FzfCommands:
    """Interactive selection through ``fzf``.

    The picker is unbounded in time: it waits for the operator.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def is_available(self) -> bool:
        return shutil.which("fzf") is not None

    def choose(self, items: Sequence[str], header: str) -> tuple[str, bool]:
        """Show ``items`` in fzf.

        Returns:
            ``(selection, cancelled)``; a cancel is not an error

        Raises:
            ToolUnavailableError: If fzf is not on PATH
            KubeExecError: If fzf failed for another reason
        """
        if not self.is_available():
            raise ToolUnavailableError("fzf not found")

        cmd = ["fzf", "--ansi", "--no-preview"]
        if header:
            cmd.extend(["--header", header])

        result = self._runner.run(
            cmd, input_data="\n".join(items) + "\n", capture_stderr=False
        )
        if result.returncode in FZF_CANCEL_CODES:
            return "", True
        if not result.success:
            raise KubeExecError(f"fzf failed: exit status {result.returncode}")
        return result.stdout.strip(), False
