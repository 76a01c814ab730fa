"""Raw argv handling done before Typer parses the command line."""

from __future__ import annotations

import os
from collections.abc import Sequence

PLUGIN_PREFIX = "kubectl-"

# Flags whose value may be omitted: a bare flag means "empty" (pick interactively)
EMPTY_VALUE_FLAGS = frozenset({"--context", "--container"})

# Boolean flags that also accept an explicit value: a bare flag means "true"
OPTIONAL_BOOL_FLAGS = frozenset({"--confirm-context", "--non-interactive", "--ignore-fzf"})


def split_command_args(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split at the first ``--`` into (flag args, remote command)."""
    for i, arg in enumerate(args):
        if arg == "--":
            return list(args[:i]), list(args[i + 1 :])
    return list(args), []


def normalize_optional_value_flags(args: Sequence[str]) -> list[str]:
    """Give bare optional-value flags an explicit value.

    ``--context`` followed by nothing or by another flag becomes
    ``--context=``; ``--confirm-context`` without ``=`` becomes
    ``--confirm-context=true``.
    """
    normalized: list[str] = []
    for i, arg in enumerate(args):
        if arg in EMPTY_VALUE_FLAGS:
            if i + 1 >= len(args) or args[i + 1].startswith("-"):
                normalized.append(f"{arg}=")
                continue
        elif arg in OPTIONAL_BOOL_FLAGS:
            normalized.append(f"{arg}=true")
            continue
        normalized.append(arg)
    return normalized


def reject_deprecated_args(args: Sequence[str]) -> str | None:
    """Return an error message for single-dash long flags we no longer accept."""
    for arg in args:
        if arg == "-version":
            return "unknown flag: -version (use -v or --version)"
    return None


def display_name(argv0: str) -> str:
    """``kubectl xc`` when invoked as a kubectl plugin, else ``kubeexec``."""
    name = os.path.basename(argv0)
    if name.startswith(PLUGIN_PREFIX):
        return "kubectl " + name[len(PLUGIN_PREFIX) :]
    return "kubeexec"
