"""Domain entities."""
from .seed import Seed
from .participant import Participant, Unit
from .match import MatchRecord
from .composition import (
    CompositionAggregate,
    RankedComposition,
    UnitStats,
    UnitSummary,
    composition_key,
    display_name,
)
from .document import DocumentMeta, OutputDocument, SCHEMA_VERSION

__all__ = [
    'Seed',
    'Participant',
    'Unit',
    'MatchRecord',
    'CompositionAggregate',
    'RankedComposition',
    'UnitStats',
    'UnitSummary',
    'composition_key',
    'display_name',
    'DocumentMeta',
    'OutputDocument',
    'SCHEMA_VERSION',
]
