"""League table records."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TeamRecord(BaseModel):
    """Normalized team season record.

    ``position`` is assigned by :func:`footydash.ranking.rank_teams`; records
    produced by the roster normalizer carry ``0`` until ranked.
    """

    id: int
    name: str
    short_name: str = ""
    position: int = Field(default=0, ge=0)
    played: int = 0
    win: int = 0
    draw: int = 0
    loss: int = 0
    points: int = 0
    goals_scored: int = 0
    goals_against: int = 0
    clean_sheets: int = 0
    goals_assists: int = 0
    strength: int = 0
    strength_overall_home: int = 0
    strength_overall_away: int = 0
    strength_attack_home: int = 0
    strength_attack_away: int = 0
    strength_defence_home: int = 0
    strength_defence_away: int = 0
    form: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def goal_difference(self) -> int:
        return self.goals_scored - self.goals_against
