"""Presentation helpers (filtering, table sorting, export)."""

from .export import TABLE_HEADERS, export_table_csv
from .filtering import (
    PLAYER_SORT_FIELDS,
    TEAM_SORT_FIELDS,
    PlayerFilter,
    TableSort,
    current_gameweek,
    filter_players,
    sort_teams,
)

__all__ = [
    "PLAYER_SORT_FIELDS",
    "TABLE_HEADERS",
    "TEAM_SORT_FIELDS",
    "PlayerFilter",
    "TableSort",
    "current_gameweek",
    "export_table_csv",
    "filter_players",
    "sort_teams",
]
