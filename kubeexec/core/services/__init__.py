"""Resolution stages and the pipeline that chains them.

Stages, in pipeline order:
- contexts: context name disambiguation
- pods: namespace fallback, pod listing display and pod matching
- containers: default-container policy
- confirm: production keyword gate
- dispatch: dry-run rendering or real exec
"""

from .confirm import ConfirmationGate, confirm_context_match
from .containers import resolve_container
from .contexts import resolve_context
from .dispatch import ExecutionDispatcher, exec_args
from .pipeline import resolve_target, run
from .pods import format_ready, resolve_namespace, resolve_pod, split_pod_namespace_arg

__all__ = [
    "ConfirmationGate",
    "ExecutionDispatcher",
    "confirm_context_match",
    "exec_args",
    "format_ready",
    "resolve_container",
    "resolve_context",
    "resolve_namespace",
    "resolve_pod",
    "resolve_target",
    "run",
    "split_pod_namespace_arg",
]
