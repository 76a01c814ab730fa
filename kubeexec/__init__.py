"""kubeexec: pick a Kubernetes pod and container, then exec into it."""

__version__ = "0.1.0"
