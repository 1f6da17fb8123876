"""Presentation layer - User interfaces."""
from .cli import UpdateCommand

__all__ = [
    "UpdateCommand",
]
