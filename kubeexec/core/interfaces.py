"""Collaborator contracts for the resolution pipeline.

Production code satisfies these with subprocess adapters (see
``kubeexec.cli.shell_commands``); tests use in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import PodItem


class Lister(Protocol):
    """Read-only cluster metadata."""

    def list_contexts(self) -> list[str]: ...

    def current_context(self) -> str: ...

    def current_namespace(self, context: str) -> str: ...

    def list_pods(
        self,
        context: str,
        namespace: str,
        selector: str,
        all_namespaces: bool,
    ) -> list[PodItem]: ...

    def list_containers(
        self, context: str, namespace: str, pod: str
    ) -> tuple[list[str], str]: ...


class Picker(Protocol):
    """Interactive chooser.

    ``choose`` returns ``(selection, cancelled)``. Cancellation is not an error.
    """

    def choose(self, items: Sequence[str], header: str) -> tuple[str, bool]: ...


class Executor(Protocol):
    """Runs the final command against the cluster."""

    def run_remote(
        self,
        context: str,
        namespace: str,
        pod: str,
        container: str,
        command: Sequence[str],
        non_interactive: bool,
    ) -> int: ...


class Terminal(Protocol):
    """Local terminal probe and line input."""

    def stdin_is_tty(self) -> bool: ...

    def stdout_is_tty(self) -> bool: ...

    def read_line(self, prompt: str) -> str: ...
