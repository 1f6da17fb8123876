"""Application services - one per pipeline stage."""
from .seed import SeedDiscoveryService
from .identity_resolver import IdentityResolver
from .match_collector import CollectionStats, MatchCollector
from .aggregator import CompositionAggregator, build_aggregates, rank
from .publisher import Publisher, read_published

__all__ = [
    'SeedDiscoveryService',
    'IdentityResolver',
    'CollectionStats',
    'MatchCollector',
    'CompositionAggregator',
    'build_aggregates',
    'rank',
    'Publisher',
    'read_published',
]
