"""Error taxonomy for target resolution and execution.

Every failure the pipeline can produce derives from KubeExecError. None of
them are retried; the CLI reports the message and exits with ``exit_code``.
"""

from __future__ import annotations


class KubeExecError(Exception):
    """Base class for all kubeexec failures."""

    exit_code: int = 1

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ToolUnavailableError(KubeExecError):
    """A required binary (kubectl, fzf) is not on PATH."""


class ConfigError(KubeExecError):
    """Malformed environment value or config file."""

    exit_code = 2


class NotFoundError(KubeExecError):
    """A resolution stage produced no candidates."""


class AmbiguousSelectionError(KubeExecError):
    """Several candidates matched but interactive selection is disabled."""


class NoSelectionError(KubeExecError):
    """The picker was cancelled or returned nothing usable."""


class ConfirmationRequiredError(KubeExecError):
    """The safety gate needs a terminal and none is attached."""


class ConfirmationFailedError(KubeExecError):
    """The typed confirmation did not match the target."""


class CommandTimeoutError(KubeExecError):
    """A collaborator round-trip exceeded its time bound."""


class MalformedArgumentError(KubeExecError):
    """Bad ``namespace/pod`` addressing in cross-namespace mode."""


class KubectlError(KubeExecError):
    """kubectl exited non-zero for a metadata lookup."""


__all__ = [
    "KubeExecError",
    "ToolUnavailableError",
    "ConfigError",
    "NotFoundError",
    "AmbiguousSelectionError",
    "NoSelectionError",
    "ConfirmationRequiredError",
    "ConfirmationFailedError",
    "CommandTimeoutError",
    "MalformedArgumentError",
    "KubectlError",
]
