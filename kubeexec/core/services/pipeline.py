"""End-to-end resolution pipeline.

Stages run strictly in order, each finishing (including any picker round
trip) before the next begins:

1. pre-flight tool check
2. context
3. namespace
4. pod listing and pod
5. container
6. confirmation gate and dispatch
"""

from __future__ import annotations

import shutil
from collections.abc import Callable

from loguru import logger

from kubeexec.core.errors import KubectlError, NotFoundError, ToolUnavailableError
from kubeexec.core.interfaces import Lister, Picker
from kubeexec.core.models import ResolutionRequest, ResolutionResult, Settings

from .containers import resolve_container
from .contexts import resolve_context
from .dispatch import ExecutionDispatcher
from .pods import resolve_namespace, resolve_pod

REQUIRED_TOOLS: tuple[str, ...] = ("kubectl",)


def ensure_tools(
    tools: tuple[str, ...] = REQUIRED_TOOLS,
    which: Callable[[str], str | None] | None = None,
) -> None:
    """Fail fast when a required binary is missing from PATH."""
    for tool in tools:
        if (which or shutil.which)(tool) is None:
            raise ToolUnavailableError(f"{tool} not found")


def _select_context(
    request: ResolutionRequest, lister: Lister, picker: Picker, settings: Settings
) -> str:
    if request.context_requested:
        context = resolve_context(request.context, lister, picker, settings)
        if context:
            return context

    if request.namespace and not request.all_namespaces:
        # kubectl can still target an explicit namespace without a current context
        try:
            return lister.current_context()
        except KubectlError as e:
            logger.debug(f"No current context: {e.message}")
            return ""

    context = lister.current_context()
    if not context:
        raise NotFoundError("no kubernetes context is set")
    return context


def resolve_target(
    request: ResolutionRequest,
    settings: Settings,
    *,
    lister: Lister,
    picker: Picker,
    notify: Callable[[str], None] | None = None,
) -> ResolutionResult:
    """Narrow the request to one (context, namespace, pod, container)."""
    context = _select_context(request, lister, picker, settings)

    if request.all_namespaces:
        namespace = ""
    elif request.namespace:
        namespace = request.namespace
    else:
        namespace = resolve_namespace(context, lister)
    logger.debug(f"Listing pods: context={context!r} namespace={namespace!r}")

    pods = lister.list_pods(
        context, namespace, request.selector, request.all_namespaces
    )
    if not pods:
        raise NotFoundError("no pods found")

    pod = resolve_pod(
        pods,
        request.pod,
        all_namespaces=request.all_namespaces,
        picker=picker,
        settings=settings,
        context=context,
        namespace=namespace,
        selector=request.selector,
    )
    pod_namespace = pod.namespace or namespace

    container = resolve_container(
        context,
        pod_namespace,
        pod.name,
        request.container,
        lister=lister,
        picker=picker,
        settings=settings,
        notify=notify,
    )
    return ResolutionResult(
        context=context, namespace=pod_namespace, pod=pod.name, container=container
    )


def run(
    request: ResolutionRequest,
    settings: Settings,
    *,
    lister: Lister,
    picker: Picker,
    dispatcher: ExecutionDispatcher,
    notify: Callable[[str], None] | None = None,
    which: Callable[[str], str | None] | None = None,
) -> int:
    """Resolve the target and dispatch the command.

    Returns:
        Exit status of the remote command, or 0 for a dry run
    """
    ensure_tools(which=which)
    target = resolve_target(
        request, settings, lister=lister, picker=picker, notify=notify
    )
    return dispatcher.dispatch(
        target,
        request.command,
        dry_run=request.dry_run,
        non_interactive=settings.non_interactive,
    )
