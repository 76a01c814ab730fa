"""Command runner for executing shell commands.

This module provides the base command execution functionality used by
the kubectl and fzf command modules.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from loguru import logger

from kubeexec.core.errors import CommandTimeoutError, ToolUnavailableError

from .types import CommandResult


class CommandRunner:
    """Low-level command executor with consistent result handling.

    Captured runs are bounded by an optional timeout; a timeout raises
    CommandTimeoutError and is never retried. Interactive runs inherit the
    process's standard streams and are unbounded.
    """

    def run(
        self,
        cmd: Sequence[str],
        *,
        timeout: float | None = None,
        input_data: str | None = None,
        capture_stderr: bool = True,
    ) -> CommandResult:
        """Execute a command and return a structured result.

        Args:
            cmd: Command and arguments as a sequence
            timeout: Seconds before the command is killed
            input_data: Text fed to the command's stdin
            capture_stderr: Capture stderr; when False it goes to the
                            terminal (pickers draw their UI there)

        Returns:
            CommandResult with success status, output, and return code

        Raises:
            CommandTimeoutError: If the command ran longer than ``timeout``
            ToolUnavailableError: If the executable does not exist
        """
        logger.debug(f"Running {' '.join(cmd)} (timeout={timeout})")
        try:
            result = subprocess.run(
                list(cmd),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE if capture_stderr else None,
                text=True,
                input=input_data,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            stderr = e.stderr.decode() if isinstance(e.stderr, bytes) else e.stderr
            message = f"{cmd[0]} timed out after {timeout:g}s"
            if stderr and stderr.strip():
                message = f"{message}: {stderr.strip()}"
            raise CommandTimeoutError(message) from e
        except FileNotFoundError as e:
            raise ToolUnavailableError(f"{cmd[0]} not found") from e

        return CommandResult(
            success=result.returncode == 0,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            returncode=result.returncode,
        )

    def run_interactive(self, cmd: Sequence[str]) -> int:
        """Execute a command attached to this process's stdin/stdout/stderr.

        Returns:
            The command's exit status
        """
        logger.debug(f"Running interactively: {' '.join(cmd)}")
        try:
            completed = subprocess.run(list(cmd), check=False)
        except FileNotFoundError as e:
            raise ToolUnavailableError(f"{cmd[0]} not found") from e
        return completed.returncode
