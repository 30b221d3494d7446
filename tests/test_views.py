import csv
from io import StringIO

import pytest

from footydash.models import GameweekRecord, PlayerRecord, TeamRecord
from footydash.ranking import rank_teams
from footydash.views import (
    TABLE_HEADERS,
    PlayerFilter,
    TableSort,
    current_gameweek,
    export_table_csv,
    filter_players,
    sort_teams,
)


def _players() -> list[PlayerRecord]:
    return [
        PlayerRecord(id=1, name="Raya", team="Arsenal", position="GK", total_points=85, form=3.0),
        PlayerRecord(id=2, name="Saliba", team="Arsenal", position="DEF", total_points=90, form=5.5),
        PlayerRecord(id=3, name="Gabriel", team="Arsenal", position="DEF", total_points=95, form=4.0),
        PlayerRecord(id=4, name="Palmer", team="Chelsea", position="MID", total_points=170, form=9.0),
        PlayerRecord(id=5, name="Colwill", team="Chelsea", position="DEF", total_points=60, form=6.1),
    ]


def _teams() -> list[TeamRecord]:
    return rank_teams(
        [
            TeamRecord(id=1, name="arsenal", short_name="ARS", points=50, goals_scored=40, goals_against=30),
            TeamRecord(id=2, name="Brentford", short_name="BRE", points=50, goals_scored=38, goals_against=25, form="WDL"),
            TeamRecord(id=3, name="Chelsea", short_name="CHE", points=52, goals_scored=30, goals_against=30),
        ]
    )


def test_filter_by_position_sorted_by_points():
    selected = filter_players(_players(), PlayerFilter(position="DEF"))

    assert [p.name for p in selected] == ["Gabriel", "Saliba", "Colwill"]


def test_sort_by_form_with_limit():
    selected = filter_players(_players(), PlayerFilter(sort_by="form", limit=2))

    assert [p.name for p in selected] == ["Palmer", "Colwill"]


def test_filter_by_team_and_no_limit():
    selected = filter_players(_players(), PlayerFilter(team="Arsenal", limit=None))

    assert {p.name for p in selected} == {"Raya", "Saliba", "Gabriel"}


def test_unknown_player_sort_field():
    with pytest.raises(ValueError):
        filter_players(_players(), PlayerFilter(sort_by="news"))  # type: ignore[arg-type]


def test_sort_teams_default_is_position():
    assert [t.name for t in sort_teams(_teams(), TableSort())] == ["Chelsea", "Brentford", "arsenal"]


def test_sort_teams_by_name_is_case_insensitive():
    ordered = sort_teams(_teams(), TableSort(sort_by="name"))

    assert [t.name for t in ordered] == ["arsenal", "Brentford", "Chelsea"]


def test_sort_teams_descending_numeric():
    ordered = sort_teams(_teams(), TableSort(sort_by="goals_scored", direction="desc"))

    assert [t.goals_scored for t in ordered] == [40, 38, 30]


def test_missing_values_trail():
    ordered = sort_teams(_teams(), TableSort(sort_by="form", direction="desc"))

    assert ordered[0].name == "Brentford"


def test_unknown_team_sort_field():
    with pytest.raises(ValueError):
        sort_teams(_teams(), TableSort(sort_by="goal_difference"))


def test_export_table_csv():
    rows = list(csv.reader(StringIO(export_table_csv(_teams()))))

    assert tuple(rows[0]) == TABLE_HEADERS
    assert rows[1][:3] == ["1", "Chelsea", "CHE"]
    gd_index = TABLE_HEADERS.index("goal_difference")
    assert [row[gd_index] for row in rows[1:]] == ["0", "13", "10"]


def test_current_gameweek():
    gameweeks = [GameweekRecord(id=1, is_previous=True), GameweekRecord(id=2, is_current=True)]

    assert current_gameweek(gameweeks).id == 2
    assert current_gameweek([]) is None
