"""Seed entity: a ladder reference used to bootstrap match discovery."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Seed:
    """A candidate player found on the ladder.

    ``external_id`` is the ladder-scoped (encrypted summoner) id. Current
    ladder payloads also carry the stable ``puuid``; when present the
    identity lookup can skip the network round-trip.
    """

    external_id: str
    display_name: Optional[str] = None
    puuid: Optional[str] = None
    tier: Optional[str] = None
    division: Optional[str] = None
