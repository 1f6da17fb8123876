"""Configuration layer."""
from .settings import Settings

__all__ = ['Settings']
