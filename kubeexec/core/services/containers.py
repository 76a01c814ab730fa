"""Container resolution within a single pod."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from kubeexec.core.errors import NotFoundError
from kubeexec.core.interfaces import Lister, Picker
from kubeexec.core.models import Settings

from .selection import contains, pick_one


def resolve_container(
    context: str,
    namespace: str,
    pod: str,
    override: str,
    *,
    lister: Lister,
    picker: Picker,
    settings: Settings,
    notify: Callable[[str], None] | None = None,
) -> str:
    """Pick the container to exec into.

    Order: explicit override, the only container, the cluster-declared
    default (when it is one of the listed containers), then the picker.

    Args:
        notify: Receives the informational note when the declared default
                is used for a multi-container pod
    """
    containers, declared_default = lister.list_containers(context, namespace, pod)
    if not containers:
        raise NotFoundError(f"no containers found in pod {pod!r}")

    if override:
        if not contains(containers, override):
            raise NotFoundError(
                f"container {override!r} not found in pod {pod!r} "
                f"(available: {', '.join(containers)})"
            )
        return override

    if len(containers) == 1:
        return containers[0]

    if declared_default and contains(containers, declared_default):
        if notify:
            notify(
                f"pod has multiple containers ({', '.join(containers)}); "
                f"using default {declared_default!r}. Use -c to select another."
            )
        return declared_default
    if declared_default:
        logger.debug(
            f"Declared default container {declared_default!r} is not in pod {pod!r}; ignoring"
        )

    return pick_one(
        picker,
        containers,
        f"pod: {pod}",
        enabled=settings.picker_enabled,
        what="container",
    )
