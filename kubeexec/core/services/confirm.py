"""Typed confirmation for production-like targets."""

from __future__ import annotations

import re
from collections.abc import Iterable

from loguru import logger

from kubeexec.core.errors import ConfirmationFailedError, ConfirmationRequiredError
from kubeexec.core.interfaces import Terminal
from kubeexec.core.models import DEFAULT_CONFIRM_KEYWORDS

_SEGMENT_SEPARATORS = re.compile(r"[-_./]")


def name_segments(value: str) -> list[str]:
    """Split a context or namespace name into lower-cased segments."""
    return [s for s in _SEGMENT_SEPARATORS.split(value.lower()) if s]


def confirm_context_match(
    context: str,
    namespace: str,
    keywords: Iterable[str] = DEFAULT_CONFIRM_KEYWORDS,
) -> bool:
    """Whether any name segment equals a keyword.

    Segments must match whole, so ``reproduce`` does not match ``prod``.
    """
    wanted = {k.lower() for k in keywords}
    segments = name_segments(context) + name_segments(namespace)
    return any(segment in wanted for segment in segments)


class ConfirmationGate:
    """Blocks execution against dangerous targets until the operator types
    the target back."""

    def __init__(
        self,
        terminal: Terminal,
        *,
        enabled: bool,
        keywords: Iterable[str] = DEFAULT_CONFIRM_KEYWORDS,
    ) -> None:
        self.terminal = terminal
        self.enabled = enabled
        self.keywords = tuple(keywords)

    def should_confirm(self, context: str, namespace: str) -> bool:
        return self.enabled and confirm_context_match(context, namespace, self.keywords)

    def confirm(self, context: str, namespace: str) -> None:
        """Prompt for ``context/namespace`` and require an exact echo.

        Raises:
            ConfirmationRequiredError: If stdin or stdout is not a terminal
            ConfirmationFailedError: On mismatch or end of input
        """
        if not (self.terminal.stdin_is_tty() and self.terminal.stdout_is_tty()):
            raise ConfirmationRequiredError(
                "confirmation required but no TTY available"
            )

        expected = f"{context}/{namespace}"
        prompt = (
            f"confirm context {context!r} namespace {namespace!r}: "
            f"type {expected!r} to continue: "
        )
        try:
            answer = self.terminal.read_line(prompt)
        except EOFError:
            answer = ""
        if answer.strip() != expected:
            raise ConfirmationFailedError("context confirmation failed")
        logger.debug(f"Confirmed target {expected}")

    def check(self, context: str, namespace: str) -> None:
        """Run the prompt only when the target looks dangerous."""
        if self.should_confirm(context, namespace):
            self.confirm(context, namespace)
