"""CSV export of the league table."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Sequence

from footydash.models import TeamRecord


TABLE_HEADERS: tuple[str, ...] = (
    "position",
    "name",
    "short_name",
    "played",
    "win",
    "draw",
    "loss",
    "goals_scored",
    "goals_against",
    "goal_difference",
    "points",
    "clean_sheets",
    "goals_assists",
    "form",
)


def export_table_csv(teams: Sequence[TeamRecord]) -> str:
    """Render ranked teams as CSV using :data:`TABLE_HEADERS` column order."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(TABLE_HEADERS)
    for team in teams:
        writer.writerow(
            [
                team.goal_difference if column == "goal_difference" else getattr(team, column)
                for column in TABLE_HEADERS
            ]
        )
    return buffer.getvalue()


__all__ = ["TABLE_HEADERS", "export_table_csv"]
