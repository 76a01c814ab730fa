"""Kubectl command abstractions.

This module implements the listing and execution collaborators on top of
``kubectl`` subprocess calls. Metadata lookups use a short timeout; pod
listing gets a longer one since it can be slow on large clusters.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from kubeexec.core.errors import KubectlError
from kubeexec.core.models import PodItem
from kubeexec.core.services.dispatch import exec_args, kubectl_args
from kubeexec.core.services.pods import build_pod_items

if TYPE_CHECKING:
    from kubeexec.core.interfaces import Terminal

    from .runner import CommandRunner

KUBECTL_TIMEOUT_DEFAULT = 5.0
KUBECTL_TIMEOUT_PODS = 15.0

DEFAULT_CONTAINER_ANNOTATION = "kubectl.kubernetes.io/default-container"

_POD_COLUMNS = (
    "NAME:.metadata.name,"
    "READY:.status.containerStatuses[*].ready,"
    "STATUS:.status.phase"
)
_POD_COLUMNS_ALL_NAMESPACES = f"NAMESPACE:.metadata.namespace,{_POD_COLUMNS}"

_CONTAINERS_JSONPATH = (
    "jsonpath={.metadata.annotations.kubectl\\.kubernetes\\.io/default-container}"
    '{"\\n"}{range .spec.containers[*]}{.name}{"\\n"}{end}'
)


class KubectlCommands:
    """Kubectl-related shell commands.

    Provides operations for:
    - Context listing and the current context/namespace
    - Pod listing with aligned display lines
    - Container introspection
    - Remote exec with inherited standard streams
    """

    def __init__(self, runner: CommandRunner, terminal: Terminal) -> None:
        """Initialize kubectl commands.

        Args:
            runner: Command runner used for every kubectl call
            terminal: Terminal probe deciding whether to allocate a TTY
        """
        self._runner = runner
        self._terminal = terminal

    def _run_kubectl(self, args: Sequence[str], *, timeout: float, what: str) -> str:
        """Run kubectl and return stdout, raising KubectlError on failure."""
        result = self._runner.run(["kubectl", *args], timeout=timeout)
        if not result.success:
            message = f"kubectl {what} failed: exit status {result.returncode}"
            stderr = result.stderr.strip()
            if stderr:
                message = f"{message}: {stderr}"
            raise KubectlError(message)
        return result.stdout

    # =========================================================================
    # Contexts and namespaces
    # =========================================================================

    def list_contexts(self) -> list[str]:
        """Get all context names from the kubeconfig."""
        out = self._run_kubectl(
            ["config", "get-contexts", "-o", "name"],
            timeout=KUBECTL_TIMEOUT_DEFAULT,
            what="config get-contexts",
        )
        return [line.strip() for line in out.splitlines() if line.strip()]

    def current_context(self) -> str:
        """Get the current kubectl context name."""
        out = self._run_kubectl(
            ["config", "current-context"],
            timeout=KUBECTL_TIMEOUT_DEFAULT,
            what="config current-context",
        )
        return out.strip()

    def current_namespace(self, context: str) -> str:
        """Get the namespace configured for ``context`` ("" when unset)."""
        args = kubectl_args(
            context,
            "config",
            "view",
            "--minify",
            "--output",
            "jsonpath={..namespace}",
        )
        out = self._run_kubectl(
            args, timeout=KUBECTL_TIMEOUT_DEFAULT, what="config view"
        )
        return out.strip()

    # =========================================================================
    # Pods and containers
    # =========================================================================

    def list_pods(
        self,
        context: str,
        namespace: str,
        selector: str,
        all_namespaces: bool,
    ) -> list[PodItem]:
        """List pods as PodItems, optionally across all namespaces."""
        columns = _POD_COLUMNS_ALL_NAMESPACES if all_namespaces else _POD_COLUMNS
        args = ["get", "pods", "-o", f"custom-columns={columns}", "--no-headers"]
        if all_namespaces:
            args.append("--all-namespaces")
        elif namespace:
            args.extend(["-n", namespace])
        if selector:
            args.extend(["-l", selector])

        out = self._run_kubectl(
            kubectl_args(context, *args),
            timeout=KUBECTL_TIMEOUT_PODS,
            what="get pods",
        )

        rows: list[tuple[str, str, str, str]] = []
        for line in out.splitlines():
            fields = line.split()
            if not fields:
                continue
            if all_namespaces:
                if len(fields) < 2:
                    continue
                pod_namespace, fields = fields[0], fields[1:]
            else:
                pod_namespace = namespace
            name = fields[0]
            ready = fields[1] if len(fields) > 1 else ""
            status = fields[2] if len(fields) > 2 else ""
            rows.append((pod_namespace, name, ready, status))
        return build_pod_items(rows, all_namespaces=all_namespaces)

    def list_containers(
        self, context: str, namespace: str, pod: str
    ) -> tuple[list[str], str]:
        """Get a pod's container names and its declared default container."""
        args = ["get", "pod", pod, "-o", _CONTAINERS_JSONPATH]
        if namespace:
            args.extend(["-n", namespace])
        out = self._run_kubectl(
            kubectl_args(context, *args),
            timeout=KUBECTL_TIMEOUT_DEFAULT,
            what="get pod",
        )

        lines = out.rstrip("\n").split("\n")
        declared_default = lines[0].strip() if lines else ""
        containers = [line.strip() for line in lines[1:] if line.strip()]
        return containers, declared_default

    # =========================================================================
    # Exec
    # =========================================================================

    def run_remote(
        self,
        context: str,
        namespace: str,
        pod: str,
        container: str,
        command: Sequence[str],
        non_interactive: bool,
    ) -> int:
        """Run ``kubectl exec`` attached to this process's terminal."""
        tty = self._terminal.stdin_is_tty() and self._terminal.stdout_is_tty()
        args = exec_args(
            context, namespace, pod, container, command, non_interactive, tty=tty
        )
        return self._runner.run_interactive(["kubectl", *args])
