"""Upcoming fixture and match-odds records."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class FixtureRecord(BaseModel):
    """Next-match card with head-to-head odds from a single bookmaker.

    ``match_date`` is for display only; ordering always uses ``raw_date``.
    """

    home_team: str
    away_team: str
    match_date: str
    raw_date: datetime
    status: str = "Not Started"
    competition: str = "Premier League"
    matchday: int | None = None
    venue: str | None = None
    home_crest: str | None = None
    away_crest: str | None = None
    home_odds: float | None = None
    draw_odds: float | None = None
    away_odds: float | None = None
    bookmaker: str | None = None

    model_config = ConfigDict(frozen=True)


class MatchStatsRecord(BaseModel):
    """Raw-ish match view with a handful of bookmakers kept for reference."""

    id: str | None = None
    home_team: str
    away_team: str
    commence_time: datetime
    completed: bool = False
    scores: Any = None
    bookmakers: list[dict[str, Any]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
