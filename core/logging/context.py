from __future__ import annotations

import contextvars
import logging
from typing import Any, Dict

# Fields bound here (stage, platform, ...) are attached to every record
# emitted from the current task and the tasks it spawns.
_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("harvest_log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def bind(**values: Any) -> None:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    _context.set(current)


class context(object):
    """Bind fields for the duration of a ``with`` block.

    Used to tag log lines with the pipeline stage::

        with context(stage="collect"):
            records = await collector.collect(puuids, 5)
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        current = dict(_context.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False


class ContextFilter(logging.Filter):
    """Snapshot the bound context onto the record before it leaves this thread."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "log_context"):
            record.log_context = get_context()
        return True
