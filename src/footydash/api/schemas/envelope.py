from __future__ import annotations

from pydantic import BaseModel, Field

from footydash.models import GameweekRecord, MatchStatsRecord, PlayerRecord, TeamRecord


class FplResponse(BaseModel):
    success: bool = True
    players: list[PlayerRecord]
    teams: list[TeamRecord]
    gameweeks: list[GameweekRecord] = Field(default_factory=list)


class QuotaResponse(BaseModel):
    remaining: str | None = None
    used: str | None = None


class StatsResponse(BaseModel):
    success: bool = True
    data: list[MatchStatsRecord]
    quota: QuotaResponse


class ErrorResponse(BaseModel):
    error: str
    details: str
