"""Domain enumerations."""
from .region import Platform
from .queue_type import QueueType
from .rank import Tier, DIVISIONS

__all__ = [
    'Platform',
    'QueueType',
    'Tier',
    'DIVISIONS',
]
