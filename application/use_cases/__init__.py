"""Application use cases."""
from .update_comp_stats import (
    EXIT_CONFIG,
    EXIT_OK,
    EXIT_OUTAGE,
    RunResult,
    UpdateCompStatsUseCase,
)

__all__ = [
    'EXIT_CONFIG',
    'EXIT_OK',
    'EXIT_OUTAGE',
    'RunResult',
    'UpdateCompStatsUseCase',
]
