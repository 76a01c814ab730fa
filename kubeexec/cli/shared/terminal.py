"""Local terminal probe backed by the process's standard streams."""

from __future__ import annotations

import sys

from .console import CLIConsole


class StdioTerminal:
    """Reports whether stdin/stdout are TTYs and reads confirmation lines."""

    def __init__(self, console: CLIConsole) -> None:
        self.console = console

    def stdin_is_tty(self) -> bool:
        return _isatty(sys.stdin)

    def stdout_is_tty(self) -> bool:
        return _isatty(sys.stdout)

    def read_line(self, prompt: str) -> str:
        """Prompt on stderr and read one line from stdin.

        Raises:
            EOFError: At end of input
        """
        return self.console.input(prompt)


def _isatty(stream: object) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False
