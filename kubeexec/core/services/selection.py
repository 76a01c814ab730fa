"""Shared matching and picking helpers used by every resolver."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from kubeexec.core.errors import AmbiguousSelectionError, NoSelectionError
from kubeexec.core.interfaces import Picker


def contains(items: Sequence[str] | None, item: str) -> bool:
    return item in (items or ())


def filter_by_query(items: Sequence[str], query: str) -> list[str]:
    """Return items containing query as a substring, in listing order."""
    return [item for item in items if query in item]


def pick_one(
    picker: Picker,
    items: Sequence[str],
    header: str,
    *,
    enabled: bool,
    what: str,
) -> str:
    """Ask the picker for one of ``items``.

    Args:
        picker: Interactive chooser
        items: Candidate lines
        header: Header shown above the candidates
        enabled: Whether interactive selection is allowed this run
        what: Noun used in error messages ("pod", "context", ...)

    Raises:
        AmbiguousSelectionError: If selection is disabled
        NoSelectionError: If the picker was cancelled, returned nothing, or
                          returned a line that is not one of ``items``
    """
    if not enabled:
        raise AmbiguousSelectionError(
            f"{what} selection required but interactive selection is disabled",
            details=f"{len(items)} candidates: {', '.join(items)}" if items else None,
        )
    logger.debug(f"Picking {what} from {len(items)} candidates")
    choice, cancelled = picker.choose(list(items), header)
    if cancelled or not choice:
        raise NoSelectionError(f"no {what} selected")
    if choice not in items:
        raise NoSelectionError(f"picked {what} {choice!r} is not in the listing")
    return choice
