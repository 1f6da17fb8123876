"""Application layer - Services and use cases."""
from .services import (
    CompositionAggregator,
    IdentityResolver,
    MatchCollector,
    Publisher,
    SeedDiscoveryService,
)
from .use_cases import UpdateCompStatsUseCase

__all__ = [
    'CompositionAggregator',
    'IdentityResolver',
    'MatchCollector',
    'Publisher',
    'SeedDiscoveryService',
    'UpdateCompStatsUseCase',
]
