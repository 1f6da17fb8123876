"""Match entity representing a completed TFT match."""
from dataclasses import dataclass, field
from typing import Optional

from .participant import Participant
from ..enums import QueueType


@dataclass(frozen=True)
class MatchRecord:
    """A completed match, immutable once fetched."""

    match_id: str
    queue_id: int
    participants: tuple[Participant, ...] = field(default_factory=tuple)
    game_version: str = ""

    @property
    def queue_type(self) -> Optional[QueueType]:
        try:
            return QueueType(self.queue_id)
        except ValueError:
            return None

    @property
    def patch_version(self) -> str:
        """Extract the patch (e.g. '14.3') from the raw game version.

        game_version looks like "Linux Version 14.3.562.9143 (Feb 02 2024/12:13:52) [PUBLIC] ".
        """
        for token in self.game_version.split():
            parts = token.split('.')
            if len(parts) >= 2 and parts[0].isdigit() and parts[1].isdigit():
                return f"{parts[0]}.{parts[1]}"
        return ""
