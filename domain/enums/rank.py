"""Ladder tier enumeration."""
from enum import Enum


class Tier(Enum):
    """TFT ladder tiers, lowest first."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def is_apex(self) -> bool:
        """Apex tiers have a single unpaged league and no divisions."""
        return self in (Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER)

    @property
    def league_path(self) -> str:
        """Path segment of the unpaged league endpoint for apex tiers."""
        if not self.is_apex:
            raise ValueError(f"{self.value} is paged by division, it has no league endpoint")
        return self.value.lower()

    @classmethod
    def apex_tiers(cls) -> list['Tier']:
        """Apex tiers, highest first."""
        return [cls.CHALLENGER, cls.GRANDMASTER, cls.MASTER]

    @classmethod
    def paged_names(cls) -> list[str]:
        return [t.value for t in cls if not t.is_apex]

    @classmethod
    def from_string(cls, tier: str) -> 'Tier':
        return cls[tier.strip().upper()]


DIVISIONS = ("I", "II", "III", "IV")
