"""Gameweek (FPL "event") records."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel
from pydantic.config import ConfigDict

from .raw import Flag


class GameweekRecord(BaseModel):
    id: int
    name: str = ""
    deadline_time: datetime | None = None
    is_current: Flag = False
    is_next: Flag = False
    is_previous: Flag = False
    average_entry_score: int | None = None
    highest_score: int | None = None
    most_selected: int | None = None
    most_transferred_in: int | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")
