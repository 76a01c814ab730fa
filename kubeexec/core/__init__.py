"""Target resolution engine: models, errors and collaborator contracts."""

from .errors import KubeExecError
from .models import PodItem, ResolutionRequest, ResolutionResult, Settings

__all__ = [
    "KubeExecError",
    "PodItem",
    "ResolutionRequest",
    "ResolutionResult",
    "Settings",
]
