"""Platform enumeration for Riot API routing."""
from enum import Enum


class Platform(Enum):
    """Riot platform hosts serving TFT ladder and summoner endpoints.

    Provides:
    - platform_route: platform host (e.g., euw1)
    - regional_route: routing host for match APIs (e.g., europe)
    - friendly: short human-friendly label for console output (e.g., eune)
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia
    ME1 = "me1"    # Middle East

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania
    SG2 = "sg2"    # Singapore
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    @property
    def platform_route(self) -> str:
        """Get platform routing value for ladder and summoner calls."""
        return self.value

    @property
    def regional_route(self) -> str:
        """Get regional routing for match calls."""
        return _REGIONAL_ROUTES[self.value]

    @property
    def platform_host(self) -> str:
        return f"{self.platform_route}.api.riotgames.com"

    @property
    def regional_host(self) -> str:
        return f"{self.regional_route}.api.riotgames.com"

    @property
    def friendly(self) -> str:
        """Get a human-friendly short label for console output."""
        if self.value in _FRIENDLY:
            return _FRIENDLY[self.value]
        code = self.value
        if code and code[-1].isdigit():
            return code[:-1]
        return code

    @classmethod
    def from_string(cls, value: str) -> 'Platform':
        """Create Platform from a platform code or a friendly label."""
        code = (value or "").strip().lower()
        for platform in cls:
            if code in (platform.value, platform.friendly):
                return platform
        raise ValueError(
            f"Unknown platform {value!r}; expected one of {', '.join(p.value for p in cls)}"
        )

    @classmethod
    def regional_routes(cls) -> set[str]:
        return set(_REGIONAL_ROUTES.values())


_REGIONAL_ROUTES = {
    # Americas
    "na1": "americas",
    "br1": "americas",
    "la1": "americas",
    "la2": "americas",

    # Europe
    "euw1": "europe",
    "eun1": "europe",
    "tr1": "europe",
    "ru": "europe",
    "me1": "europe",

    # Asia
    "kr": "asia",
    "jp1": "asia",

    # SEA
    "oc1": "sea",
    "sg2": "sea",
    "tw2": "sea",
    "vn2": "sea",
}

_FRIENDLY = {
    "eun1": "eune",
    "euw1": "euw",
    "na1": "na",
    "la1": "lan",
    "la2": "las",
    "oc1": "oce",
}
