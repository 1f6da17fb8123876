"""Composition aggregation and ranking."""
from __future__ import annotations

from typing import Dict, Iterable, List

from core.logging import get_logger, traceable
from domain.entities import (
    CompositionAggregate,
    MatchRecord,
    Participant,
    RankedComposition,
    Unit,
    UnitStats,
    UnitSummary,
    composition_key,
)
from domain.entities.composition import normalize_unit_id

logger = get_logger(__name__, service="aggregator")

TOP_ITEM_SETS = 2


def build_aggregates(records: Iterable[MatchRecord]) -> Dict[str, CompositionAggregate]:
    """Fold every participant of every record into per-key aggregates.

    Counters only ever grow, so the result does not depend on record or
    participant order.
    """
    aggregates: Dict[str, CompositionAggregate] = {}
    for record in records:
        for participant in record.participants:
            key = composition_key(participant.unit_ids)
            if not key:
                continue
            agg = aggregates.get(key)
            if agg is None:
                agg = aggregates[key] = CompositionAggregate(key=key)
            _fold(agg, participant)
    return aggregates


def _fold(agg: CompositionAggregate, participant: Participant) -> None:
    agg.games += 1
    agg.sum_placement += participant.placement
    if participant.is_top4:
        agg.top4_count += 1
    if participant.is_win:
        agg.win_count += 1
    for unit_id, unit in _distinct_units(participant.units).items():
        stats = agg.per_unit.get(unit_id)
        if stats is None:
            stats = agg.per_unit[unit_id] = UnitStats()
        stats.add(unit.star_level, unit.items)


def _distinct_units(units: Iterable[Unit]) -> Dict[str, Unit]:
    """One entry per unit id; duplicate copies on a board keep the highest-star one."""
    best: Dict[str, Unit] = {}
    for unit in units:
        unit_id = normalize_unit_id(unit.character_id)
        if not unit_id:
            continue
        current = best.get(unit_id)
        if current is None or unit.star_level > current.star_level:
            best[unit_id] = unit
    return best


def rank(aggregates: Iterable[CompositionAggregate], min_sample: int, top_n: int) -> List[RankedComposition]:
    """Drop compositions below ``min_sample`` games, order best-first, keep ``top_n``.

    Order: average placement ascending, then games descending, then key for
    a stable result.
    """
    eligible = [a for a in aggregates if a.games >= min_sample]
    eligible.sort(key=lambda a: (a.avg_placement, -a.games, a.key))
    return [_summarize(a) for a in eligible[:max(0, top_n)]]


def _summarize(agg: CompositionAggregate) -> RankedComposition:
    units = [
        UnitSummary(
            unit_id=unit_id,
            pick_rate=stats.plays / agg.games,
            avg_stars=stats.sum_stars / stats.plays if stats.plays else 0.0,
            top_items=tuple(
                items for items, _ in sorted(stats.item_sets.items(), key=lambda kv: (-kv[1], kv[0]))[:TOP_ITEM_SETS]
            ),
        )
        for unit_id, stats in agg.per_unit.items()
    ]
    units.sort(key=lambda u: (-u.pick_rate, u.unit_id))
    return RankedComposition(
        key=agg.key,
        games=agg.games,
        avg_place=agg.avg_placement,
        top4_rate=agg.top4_rate,
        win_rate=agg.win_rate,
        units=tuple(units),
    )


class CompositionAggregator:
    """Aggregates match records into ranked compositions."""

    def __init__(self) -> None:
        self.participants_folded = 0
        self.compositions_seen = 0

    @traceable
    def aggregate(self, records: Iterable[MatchRecord], min_sample: int, top_n: int) -> List[RankedComposition]:
        records = list(records)
        aggregates = build_aggregates(records)
        self.participants_folded = sum(a.games for a in aggregates.values())
        self.compositions_seen = len(aggregates)
        ranked = rank(aggregates.values(), min_sample, top_n)
        logger.info(
            f"{self.participants_folded} boards from {len(records)} matches → "
            f"{self.compositions_seen} compositions, {len(ranked)} with >= {min_sample} games"
        )
        return ranked
