"""Canonical player records shared by the roster pipeline and the dashboard views."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Position = Literal["GK", "DEF", "MID", "FWD"]


class PlayerRecord(BaseModel):
    """Normalized FPL player snapshot."""

    id: int
    name: str
    team: str | None = None
    position: Position
    total_points: float = 0.0
    points_per_game: float = 0.0
    form: float = 0.0
    selected_by_percent: float = Field(default=0.0, ge=0.0)
    price: float = Field(default=0.0, ge=0.0)
    goals_scored: int = 0
    assists: int = 0
    clean_sheets: int = 0
    status: str | None = None
    news: str | None = None

    model_config = ConfigDict(frozen=True)
