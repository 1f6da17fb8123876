"""Participant entity representing one player's board in a TFT match."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Unit:
    """A unit fielded on a board."""

    character_id: str
    star_level: int = 1
    items: tuple[str, ...] = ()


@dataclass(frozen=True)
class Participant:
    """A player's final placement and board."""

    placement: int
    units: tuple[Unit, ...] = field(default_factory=tuple)
    puuid: str = ""

    @property
    def is_top4(self) -> bool:
        return self.placement <= 4

    @property
    def is_win(self) -> bool:
        return self.placement == 1

    @property
    def unit_ids(self) -> list[str]:
        return [u.character_id for u in self.units]
