"""Helpers for slicing player lists and sorting the league table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from footydash.models import GameweekRecord, PlayerRecord, TeamRecord


PLAYER_SORT_FIELDS = ("total_points", "points_per_game", "form", "selected_by_percent", "price")
TEAM_SORT_FIELDS = tuple(name for name in TeamRecord.model_fields if name != "id")


@dataclass(frozen=True)
class PlayerFilter:
    """Filtering configuration for the player table."""

    position: Literal["all", "GK", "DEF", "MID", "FWD"] = "all"
    sort_by: Literal["total_points", "points_per_game", "form", "selected_by_percent", "price"] = "total_points"
    limit: int | None = 20
    team: str | None = None


@dataclass(frozen=True)
class TableSort:
    """Column sort for the league table."""

    sort_by: str = "position"
    direction: Literal["asc", "desc"] = "asc"


def filter_players(players: Sequence[PlayerRecord], criteria: PlayerFilter) -> list[PlayerRecord]:
    """Return players matching ``criteria``, best first by the chosen stat."""

    if criteria.sort_by not in PLAYER_SORT_FIELDS:
        raise ValueError(f"Unsupported player sort field {criteria.sort_by!r}")

    selected = [
        player
        for player in players
        if (criteria.position == "all" or player.position == criteria.position)
        and (criteria.team is None or player.team == criteria.team)
    ]
    selected.sort(key=lambda player: getattr(player, criteria.sort_by), reverse=True)

    limit = criteria.limit if criteria.limit is not None and criteria.limit > 0 else None
    if limit is not None:
        selected = selected[:limit]
    return selected


def sort_teams(teams: Sequence[TeamRecord], criteria: TableSort) -> list[TeamRecord]:
    """Sort the table by any column; numbers numerically, text case-insensitively."""

    if criteria.sort_by not in TEAM_SORT_FIELDS:
        raise ValueError(f"Unsupported team sort field {criteria.sort_by!r}")

    def _key(team: TeamRecord) -> float | str:
        value = getattr(team, criteria.sort_by)
        if isinstance(value, (int, float)):
            return value
        return str(value).casefold()

    present = [team for team in teams if getattr(team, criteria.sort_by) is not None]
    missing = [team for team in teams if getattr(team, criteria.sort_by) is None]
    present.sort(key=_key, reverse=criteria.direction == "desc")
    # Teams without a value always trail.
    return present + missing


def current_gameweek(gameweeks: Sequence[GameweekRecord]) -> GameweekRecord | None:
    return next((gw for gw in gameweeks if gw.is_current), None)


__all__ = [
    "PLAYER_SORT_FIELDS",
    "TEAM_SORT_FIELDS",
    "PlayerFilter",
    "TableSort",
    "current_gameweek",
    "filter_players",
    "sort_teams",
]
