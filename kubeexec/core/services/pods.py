"""Namespace and pod resolution.

Pod listings are rendered into column-aligned display lines once per listing;
the same lines are shown in the picker and used to map a picked line back to
its PodItem.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from kubeexec.core.errors import MalformedArgumentError, NoSelectionError, NotFoundError
from kubeexec.core.interfaces import Lister, Picker
from kubeexec.core.models import PodItem, Settings

from .selection import pick_one

DEFAULT_NAMESPACE = "default"

_PLACEHOLDER_READY = frozenset({"", "<none>", "-"})


# =============================================================================
# Formatting
# =============================================================================


def format_ready(raw: str) -> str:
    """Render per-container readiness as a ``ready/total`` fraction.

    ``"true,false"`` becomes ``"1/2"``. Values that are already fractions or
    numbers pass through; empty and placeholder values become ``"-"``.
    """
    raw = raw.strip()
    if raw in _PLACEHOLDER_READY:
        return "-"
    if "/" in raw:
        return raw

    total = 0
    ready = 0
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        total += 1
        lowered = token.lower()
        if lowered == "true":
            ready += 1
        elif lowered != "false" and token.isdigit():
            return raw
    if total == 0:
        return "-"
    return f"{ready}/{total}"


def build_pod_items(
    rows: Iterable[tuple[str, str, str, str]], *, all_namespaces: bool
) -> list[PodItem]:
    """Build PodItems with aligned display lines.

    Args:
        rows: ``(namespace, name, raw_ready, status)`` tuples in listing order
        all_namespaces: Prefix each display line with the namespace column

    Returns:
        PodItems whose display columns are padded to the widest value seen
    """
    parsed = [
        (namespace, name, format_ready(raw_ready), status)
        for namespace, name, raw_ready, status in rows
    ]
    if not parsed:
        return []

    widths = [max(len(row[i]) for row in parsed) for i in range(4)]
    start = 0 if all_namespaces else 1

    pods = []
    for row in parsed:
        columns = [row[i].ljust(widths[i]) for i in range(start, 4)]
        pods.append(
            PodItem(
                name=row[1],
                namespace=row[0],
                ready=row[2],
                status=row[3],
                display="  ".join(columns).rstrip(),
            )
        )
    return pods


def build_pod_header(
    context: str,
    namespace: str,
    selector: str,
    pod_query: str,
    all_namespaces: bool = False,
) -> str:
    """Compose the picker header, omitting empty parts."""
    parts = []
    if context:
        parts.append(f"context: {context}")
    if all_namespaces:
        parts.append("namespace: all")
    elif namespace:
        parts.append(f"namespace: {namespace}")
    if selector:
        parts.append(f"selector: {selector}")
    if pod_query:
        parts.append(pod_query)
    return "  ".join(parts)


def pod_displays(pods: Sequence[PodItem]) -> list[str]:
    return [pod.display or pod.name for pod in pods]


def pod_from_choice(pods: Sequence[PodItem], choice: str) -> PodItem | None:
    """Map a picked display line back to its PodItem."""
    choice = choice.strip()
    if not choice:
        return None
    for pod in pods:
        if (pod.display or pod.name).strip() == choice:
            return pod
    return None


# =============================================================================
# Matching
# =============================================================================


def split_pod_namespace_arg(value: str) -> tuple[str, str, bool]:
    """Split ``namespace/pod``.

    Returns:
        ``(namespace, pod, True)``, or ``("", "", False)`` when either half
        is blank or there is no slash
    """
    namespace, sep, pod = value.partition("/")
    namespace, pod = namespace.strip(), pod.strip()
    if not sep or not namespace or not pod:
        return "", "", False
    return namespace, pod, True


def find_pod(pods: Sequence[PodItem], namespace: str, name: str) -> PodItem | None:
    for pod in pods:
        if pod.namespace == namespace and pod.name == name:
            return pod
    return None


def filter_pods_by_query(pods: Sequence[PodItem], query: str) -> list[PodItem]:
    return [pod for pod in pods if query in pod.name]


# =============================================================================
# Resolution
# =============================================================================


def resolve_namespace(context: str, lister: Lister) -> str:
    """Namespace configured for ``context``, falling back to ``default``."""
    namespace = lister.current_namespace(context)
    if not namespace:
        logger.debug(f"No namespace configured for context {context!r}; using default")
        return DEFAULT_NAMESPACE
    return namespace


def resolve_pod(
    pods: Sequence[PodItem],
    query: str,
    *,
    all_namespaces: bool,
    picker: Picker,
    settings: Settings,
    context: str = "",
    namespace: str = "",
    selector: str = "",
) -> PodItem:
    """Narrow a pod query to exactly one PodItem from the listing.

    Raises:
        MalformedArgumentError: Bad ``namespace/pod`` in cross-namespace mode
        NotFoundError: No pod matches
        AmbiguousSelectionError: Several match and the picker is disabled
        NoSelectionError: The picker was cancelled
    """
    if all_namespaces and "/" in query:
        pod_namespace, pod_name, ok = split_pod_namespace_arg(query)
        if not ok:
            raise MalformedArgumentError(
                f"invalid pod argument {query!r} (expected <namespace>/<pod>)"
            )
        pod = find_pod(pods, pod_namespace, pod_name)
        if pod is None:
            raise NotFoundError(
                f"pod {pod_name!r} not found in namespace {pod_namespace!r}"
            )
        return pod

    if not query:
        header = build_pod_header(context, namespace, selector, "", all_namespaces)
        return _pick_pod(pods, header, picker, settings)

    if not all_namespaces:
        for pod in pods:
            if pod.name == query:
                logger.debug(f"Pod {query!r} matched exactly")
                return pod

    matches = filter_pods_by_query(pods, query)
    if not matches:
        raise NotFoundError(f"no pods match {query!r}")
    if len(matches) == 1:
        logger.debug(f"Pod query {query!r} resolved to {matches[0].name!r}")
        return matches[0]

    header = build_pod_header(
        context, namespace, selector, f"pod: {query}", all_namespaces
    )
    return _pick_pod(matches, header, picker, settings)


def _pick_pod(
    pods: Sequence[PodItem], header: str, picker: Picker, settings: Settings
) -> PodItem:
    choice = pick_one(
        picker, pod_displays(pods), header, enabled=settings.picker_enabled, what="pod"
    )
    pod = pod_from_choice(pods, choice)
    if pod is None:
        raise NoSelectionError("no pod selected")
    return pod
