"""Data types shared by every resolution stage.

All types are frozen: they are built once per invocation and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CONFIRM_KEYWORDS: tuple[str, ...] = ("prod", "production", "live")


@dataclass(frozen=True)
class Settings:
    """Resolved behaviour switches for one run.

    Attributes:
        confirm_context: Require typed confirmation for production-like targets
        non_interactive: Run the remote command without -i (scripts, pipes)
        ignore_fzf: Never launch the picker; ambiguity becomes an error
        confirm_keywords: Lower-cased segments that mark a target as dangerous
    """

    confirm_context: bool = False
    non_interactive: bool = False
    ignore_fzf: bool = False
    confirm_keywords: tuple[str, ...] = DEFAULT_CONFIRM_KEYWORDS

    @property
    def picker_enabled(self) -> bool:
        """Whether ambiguous matches may be resolved interactively."""
        return not (self.ignore_fzf or self.non_interactive)


@dataclass(frozen=True)
class PodItem:
    """One row of a pod listing.

    Attributes:
        name: Pod name
        namespace: Namespace the pod lives in
        ready: Ready fraction as rendered by format_ready (e.g. "1/2")
        status: Pod phase (Running, Pending, ...)
        display: Column-aligned line shown in the picker
    """

    name: str
    namespace: str = ""
    ready: str = "-"
    status: str = ""
    display: str = ""


@dataclass(frozen=True)
class ResolutionRequest:
    """Raw user input for a single invocation."""

    context: str = ""
    context_requested: bool = False
    namespace: str = ""
    selector: str = ""
    pod: str = ""
    container: str = ""
    all_namespaces: bool = False
    command: tuple[str, ...] = field(default_factory=tuple)
    dry_run: bool = False


@dataclass(frozen=True)
class ResolutionResult:
    """Concrete target ready for execution."""

    context: str
    namespace: str
    pod: str
    container: str
