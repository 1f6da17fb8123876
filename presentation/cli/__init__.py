"""Presentation CLI exports."""
from .update_command import UpdateCommand

__all__ = [
    "UpdateCommand",
]
