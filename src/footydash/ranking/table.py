"""League table ordering."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from footydash.models import TeamRecord


def sort_key(team: TeamRecord) -> Tuple[int, int, int]:
    """Descending tiebreak key: points, then goal difference, then goals scored."""

    return (-team.points, -team.goal_difference, -team.goals_scored)


def rank_teams(teams: Iterable[TeamRecord]) -> List[TeamRecord]:
    """Return teams in table order with ``position`` reassigned from 1.

    Positions sent by the provider are never trusted. ``sorted`` is stable, so
    teams level on all three keys keep their input order.
    """

    ordered = sorted(teams, key=sort_key)
    return [
        team.model_copy(update={"position": index})
        for index, team in enumerate(ordered, start=1)
    ]
