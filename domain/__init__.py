"""Domain layer - Business entities, enums, and interfaces."""
from .entities import (
    Seed, Participant, Unit, MatchRecord,
    CompositionAggregate, RankedComposition, OutputDocument, DocumentMeta,
)
from .enums import Platform, QueueType, Tier, DIVISIONS
from .interfaces import ILeagueRepository, IMatchRepository, ISummonerRepository

__all__ = [
    # Entities
    'Seed',
    'Participant',
    'Unit',
    'MatchRecord',
    'CompositionAggregate',
    'RankedComposition',
    'OutputDocument',
    'DocumentMeta',
    # Enums
    'Platform',
    'QueueType',
    'Tier',
    'DIVISIONS',
    # Interfaces
    'ILeagueRepository',
    'IMatchRepository',
    'ISummonerRepository',
]
