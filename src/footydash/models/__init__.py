"""Canonical record types for the dashboard pipelines."""

from .fixture import FixtureRecord, MatchStatsRecord
from .gameweek import GameweekRecord
from .player import PlayerRecord, Position
from .raw import RawBookmaker, RawEvent, RawMarket, RawOutcome, RawPlayer, RawTeam
from .team import TeamRecord

__all__ = [
    "FixtureRecord",
    "GameweekRecord",
    "MatchStatsRecord",
    "PlayerRecord",
    "Position",
    "RawBookmaker",
    "RawEvent",
    "RawMarket",
    "RawOutcome",
    "RawPlayer",
    "RawTeam",
    "TeamRecord",
]
