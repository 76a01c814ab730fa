"""CLI command modules."""

from .exec import NOTES, exec_command

__all__ = ["NOTES", "exec_command"]
