"""Structured logging: JSON-lines file sink, colour console, bound context."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, context
from .logger import StructuredLogger, get_logger, traceable

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "context",
    "StructuredLogger",
    "get_logger",
    "traceable",
]
