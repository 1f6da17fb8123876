"""Pydantic models for the Riot TFT payloads the repositories read.

Each payload has exactly one accepted shape. Types are strict (no "1100"
for a queue id, no ``true`` for a placement) and unknown keys are ignored.
"""
from __future__ import annotations

from typing import Annotated, Any, List, Optional, Type, TypeVar, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from core.errors import MalformedResponse

MAX_PLACEMENT = 8

T = TypeVar("T")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[StrictStr, AfterValidator(_not_blank)]


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── League ─────────────────────────────────────────────────────────────

class LeagueEntryPayload(_Payload):
    """``summonerId`` is the ladder-scoped reference and ``puuid`` the stable
    identity; they are distinct fields, not spellings of one. At least one
    must be present."""

    summoner_id: Optional[StrictStr] = Field(default=None, alias="summonerId")
    puuid: Optional[StrictStr] = None
    summoner_name: Optional[StrictStr] = Field(default=None, alias="summonerName")
    tier: Optional[StrictStr] = None
    rank: Optional[StrictStr] = None

    @model_validator(mode="after")
    def _has_identity(self) -> "LeagueEntryPayload":
        if not self.summoner_id and not self.puuid:
            raise ValueError("has neither 'summonerId' nor 'puuid'")
        return self


class LeagueListPayload(_Payload):
    tier: Optional[StrictStr] = None
    # entries are validated one by one so a bad entry does not sink the page
    entries: List[Any]


# ── Summoner ───────────────────────────────────────────────────────────

class SummonerPayload(_Payload):
    puuid: Annotated[StrictStr, Field(min_length=1)]


# ── Match ──────────────────────────────────────────────────────────────

class UnitPayload(_Payload):
    character_id: NonBlankStr
    tier: Optional[StrictInt] = None
    item_names: Optional[List[StrictStr]] = Field(default=None, alias="itemNames")


class ParticipantPayload(_Payload):
    placement: StrictInt = Field(ge=1, le=MAX_PLACEMENT)
    puuid: Optional[StrictStr] = None
    units: Optional[List[UnitPayload]] = None


class MatchMetadataPayload(_Payload):
    match_id: StrictStr


class MatchInfoPayload(_Payload):
    queue_id: StrictInt
    game_version: Optional[StrictStr] = None
    participants: List[ParticipantPayload]


class MatchPayload(_Payload):
    metadata: MatchMetadataPayload
    info: MatchInfoPayload


MATCH_IDS = TypeAdapter(List[StrictStr])
ENTRY_LIST = TypeAdapter(List[Any])


def parse_payload(schema: Union[Type[T], TypeAdapter], data: Any, what: str) -> T:
    """Validate ``data`` against a model or adapter; failures become MalformedResponse."""
    try:
        if isinstance(schema, TypeAdapter):
            return schema.validate_python(data)
        return schema.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponse(f"{what}: {_describe(exc)}") from exc


def _describe(exc: ValidationError) -> str:
    errors = exc.errors()
    first = errors[0]
    where = ".".join(str(part) for part in first["loc"]) or "<root>"
    more = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{where}: {first['msg']}{more}"
