"""Explicit schemas for the loosely-shaped upstream JSON.

Unknown keys are ignored. Missing or null numeric fields default to ``0``;
missing free-text fields and ``form`` default to ``None``; missing lists
default to empty. Anything of the wrong type fails validation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field
from pydantic.config import ConfigDict


def _zero_if_none(value: Any) -> Any:
    return 0 if value is None else value


def _false_if_none(value: Any) -> Any:
    return False if value is None else value


def _empty_if_none(value: Any) -> Any:
    return [] if value is None else value


Count = Annotated[int, BeforeValidator(_zero_if_none)]
Stat = Annotated[float, BeforeValidator(_zero_if_none)]
Flag = Annotated[bool, BeforeValidator(_false_if_none)]


class RawPlayer(BaseModel):
    """Entry of ``bootstrap-static.elements``."""

    id: int
    web_name: str = ""
    team: int | None = None
    element_type: Count = 0
    total_points: Stat = 0
    points_per_game: Stat = 0
    form: Stat = 0
    selected_by_percent: Stat = 0
    now_cost: Count = 0
    goals_scored: Count = 0
    assists: Count = 0
    clean_sheets: Count = 0
    status: str | None = None
    news: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class RawTeam(BaseModel):
    """Entry of ``bootstrap-static.teams``.

    ``goals_for`` stays ``None`` when absent so the normalizer can fall back
    to the roster sum. Upstream ``position`` / ``pulse_id`` are not read.
    """

    id: int
    name: str
    short_name: str = ""
    played: Count = Field(default=0, validation_alias=AliasChoices("played", "played_games"))
    win: Count = 0
    draw: Count = 0
    loss: Count = 0
    points: Count = 0
    goals_for: int | None = None
    goals_against: Count = 0
    strength: Count = 0
    strength_overall_home: Count = 0
    strength_overall_away: Count = 0
    strength_attack_home: Count = 0
    strength_attack_away: Count = 0
    strength_defence_home: Count = 0
    strength_defence_away: Count = 0
    form: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class RawOutcome(BaseModel):
    name: str
    price: float | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class RawMarket(BaseModel):
    key: str
    outcomes: Annotated[list[RawOutcome], BeforeValidator(_empty_if_none)] = Field(
        default_factory=list
    )

    model_config = ConfigDict(frozen=True, extra="allow")


class RawBookmaker(BaseModel):
    key: str = ""
    title: str | None = None
    markets: Annotated[list[RawMarket], BeforeValidator(_empty_if_none)] = Field(
        default_factory=list
    )

    model_config = ConfigDict(frozen=True, extra="allow")


class RawEvent(BaseModel):
    """Entry of the odds provider's ``/sports/{sport}/odds`` array."""

    id: str | None = None
    home_team: str
    away_team: str
    commence_time: datetime
    completed: Flag = False
    scores: Any = None
    bookmakers: Annotated[list[RawBookmaker], BeforeValidator(_empty_if_none)] = Field(
        default_factory=list
    )

    model_config = ConfigDict(frozen=True, extra="ignore")
