"""Composition entities: canonical keys, running aggregates and ranked output."""
from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

KEY_SEPARATOR = "|"
MAX_ITEMS = 3

# Set-scoped unit ids look like "TFT11_Ahri"; the prefix is dropped for display only.
_SET_PREFIX_RE = re.compile(r"^tft\d*[a-z]?_", re.IGNORECASE)


def normalize_unit_id(character_id: str) -> str:
    return character_id.strip().lower()


def composition_key(unit_ids: Iterable[str]) -> str:
    """Canonical, order- and case-independent key for a roster.

    Duplicate units (two copies of the same champion on board) collapse to
    one entry so the key identifies the set of distinct units.
    """
    ids = {normalize_unit_id(u) for u in unit_ids if u and u.strip()}
    return KEY_SEPARATOR.join(sorted(ids))


def key_units(key: str) -> List[str]:
    return key.split(KEY_SEPARATOR) if key else []


def display_name(key: str, max_units: int = 4) -> str:
    """Cosmetic label for a key: set prefix stripped, title-cased, first few units."""
    names = [_SET_PREFIX_RE.sub("", u).replace("_", " ").title() for u in key_units(key)]
    label = " ".join(names[:max_units])
    if len(names) > max_units:
        label += f" +{len(names) - max_units}"
    return label


@dataclass
class UnitStats:
    """Running per-unit counters inside one composition."""

    plays: int = 0
    sum_stars: int = 0
    item_sets: Counter = field(default_factory=Counter)

    def add(self, star_level: int, items: Tuple[str, ...]) -> None:
        self.plays += 1
        self.sum_stars += star_level
        if items:
            self.item_sets[tuple(sorted(items))[:MAX_ITEMS]] += 1


@dataclass
class CompositionAggregate:
    """Additive statistics for every board sharing one composition key."""

    key: str
    games: int = 0
    sum_placement: int = 0
    top4_count: int = 0
    win_count: int = 0
    per_unit: Dict[str, UnitStats] = field(default_factory=dict)

    @property
    def avg_placement(self) -> float:
        return self.sum_placement / self.games if self.games else 0.0

    @property
    def top4_rate(self) -> float:
        return self.top4_count / self.games if self.games else 0.0

    @property
    def win_rate(self) -> float:
        return self.win_count / self.games if self.games else 0.0


@dataclass(frozen=True)
class UnitSummary:
    unit_id: str
    pick_rate: float
    avg_stars: float
    top_items: Tuple[Tuple[str, ...], ...] = ()

    def to_dict(self) -> dict:
        return {
            "unitId": self.unit_id,
            "pickRate": round(self.pick_rate, 4),
            "avgStars": round(self.avg_stars, 2),
            "topItems": [list(items) for items in self.top_items],
        }


@dataclass(frozen=True)
class RankedComposition:
    """A composition that passed the sample gate, with derived rates."""

    key: str
    games: int
    avg_place: float
    top4_rate: float
    win_rate: float
    units: Tuple[UnitSummary, ...] = ()

    @property
    def unit_ids(self) -> List[str]:
        return key_units(self.key)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "name": display_name(self.key),
            "units": self.unit_ids,
            "games": self.games,
            "avgPlace": round(self.avg_place, 4),
            "top4Rate": round(self.top4_rate, 4),
            "winRate": round(self.win_rate, 4),
            "unitStats": [u.to_dict() for u in self.units],
        }
