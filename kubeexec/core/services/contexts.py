"""Kubernetes context resolution."""

from __future__ import annotations

from loguru import logger

from kubeexec.core.errors import NotFoundError
from kubeexec.core.interfaces import Lister, Picker
from kubeexec.core.models import Settings

from .selection import contains, filter_by_query, pick_one


def resolve_context(
    query: str, lister: Lister, picker: Picker, settings: Settings
) -> str:
    """Narrow a (possibly empty) context query to one context name.

    An empty query means "pick from all contexts". An exact name wins over
    any substring matches.
    """
    contexts = lister.list_contexts()
    if not contexts:
        raise NotFoundError("no kubernetes contexts found")

    if not query:
        return pick_one(
            picker, contexts, "context", enabled=settings.picker_enabled, what="context"
        )

    if contains(contexts, query):
        logger.debug(f"Context {query!r} matched exactly")
        return query

    matches = filter_by_query(contexts, query)
    if not matches:
        raise NotFoundError(f"no contexts match {query!r}")
    if len(matches) == 1:
        logger.debug(f"Context query {query!r} resolved to {matches[0]!r}")
        return matches[0]

    return pick_one(
        picker,
        matches,
        f"context query: {query}",
        enabled=settings.picker_enabled,
        what="context",
    )
