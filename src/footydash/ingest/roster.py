"""Normalize the FPL bootstrap snapshot into player, team and gameweek records."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from footydash.errors import MalformedPayload
from footydash.models import (
    GameweekRecord,
    PlayerRecord,
    Position,
    RawPlayer,
    RawTeam,
    TeamRecord,
)


logger = logging.getLogger(__name__)

_POSITION_BY_CODE: dict[int, Position] = {1: "GK", 2: "DEF", 3: "MID"}
# Element types counted towards a team's clean sheets (goalkeepers and defenders).
_DEFENSIVE_CODES = frozenset({1, 2})

_ModelT = TypeVar("_ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Roster:
    players: List[PlayerRecord]
    teams: List[TeamRecord]
    gameweeks: List[GameweekRecord]


def position_label(code: int) -> Position:
    """Map an FPL ``element_type`` to its label; unknown codes count as forwards."""

    return _POSITION_BY_CODE.get(code, "FWD")


def _require_list(payload: Mapping[str, Any], key: str) -> list:
    value = payload.get(key)
    if not isinstance(value, list):
        raise MalformedPayload(f"bootstrap payload is missing the '{key}' list")
    return value


def _parse_entries(entries: Iterable[Any], model: Type[_ModelT], label: str) -> List[_ModelT]:
    parsed: List[_ModelT] = []
    for index, entry in enumerate(entries):
        if isinstance(entry, model):
            parsed.append(entry)
            continue
        try:
            parsed.append(model.model_validate(entry))
        except ValidationError as exc:
            raise MalformedPayload(f"{label}[{index}] is invalid: {exc.errors()[0]['msg']}") from exc
    return parsed


def normalize_players(
    raw_players: Sequence[RawPlayer],
    raw_teams: Sequence[RawTeam],
) -> List[PlayerRecord]:
    team_names: dict[int, str] = {}
    for team in raw_teams:
        team_names.setdefault(team.id, team.name)

    records: List[PlayerRecord] = []
    unresolved = 0
    for player in raw_players:
        team_name = team_names.get(player.team) if player.team is not None else None
        if team_name is None:
            unresolved += 1
        records.append(
            PlayerRecord(
                id=player.id,
                name=player.web_name,
                team=team_name,
                position=position_label(player.element_type),
                total_points=player.total_points,
                points_per_game=player.points_per_game,
                form=player.form,
                selected_by_percent=player.selected_by_percent,
                price=player.now_cost / 10,
                goals_scored=player.goals_scored,
                assists=player.assists,
                clean_sheets=player.clean_sheets,
                status=player.status,
                news=player.news,
            )
        )
    if unresolved:
        logger.debug("%d players reference an unknown team id", unresolved)
    return records


def normalize_teams(
    raw_teams: Sequence[RawTeam],
    raw_players: Sequence[RawPlayer],
) -> List[TeamRecord]:
    """Build unranked team records with roster-derived aggregates.

    Goals come from the team's own ``goals_for`` when the provider sends it,
    otherwise from the sum over its players. Assists are always summed.
    Clean sheets are the best single goalkeeper/defender count, not a sum.
    """

    by_team: dict[int, list[RawPlayer]] = defaultdict(list)
    for player in raw_players:
        if player.team is not None:
            by_team[player.team].append(player)

    records: List[TeamRecord] = []
    for team in raw_teams:
        squad = by_team.get(team.id, [])
        defensive = [p.clean_sheets for p in squad if p.element_type in _DEFENSIVE_CODES]
        goals_scored = (
            team.goals_for
            if team.goals_for is not None
            else sum(p.goals_scored for p in squad)
        )
        records.append(
            TeamRecord(
                id=team.id,
                name=team.name,
                short_name=team.short_name,
                played=team.played,
                win=team.win,
                draw=team.draw,
                loss=team.loss,
                points=team.points,
                goals_scored=goals_scored,
                goals_against=team.goals_against,
                clean_sheets=max(defensive, default=0),
                goals_assists=sum(p.assists for p in squad),
                strength=team.strength,
                strength_overall_home=team.strength_overall_home,
                strength_overall_away=team.strength_overall_away,
                strength_attack_home=team.strength_attack_home,
                strength_attack_away=team.strength_attack_away,
                strength_defence_home=team.strength_defence_home,
                strength_defence_away=team.strength_defence_away,
                form=team.form,
            )
        )
    return records


def normalize_gameweeks(raw_events: Iterable[Any]) -> List[GameweekRecord]:
    return _parse_entries(raw_events, GameweekRecord, "events")


def normalize_bootstrap(payload: Any) -> Roster:
    """Convert a ``bootstrap-static`` payload into flat records.

    Raises :class:`MalformedPayload` when ``elements`` or ``teams`` is missing
    or any entry fails validation; nothing partial is returned.
    """

    if not isinstance(payload, Mapping):
        raise MalformedPayload("bootstrap payload must be a JSON object")

    raw_players = _parse_entries(_require_list(payload, "elements"), RawPlayer, "elements")
    raw_teams = _parse_entries(_require_list(payload, "teams"), RawTeam, "teams")
    events = payload.get("events")
    if events is not None and not isinstance(events, list):
        raise MalformedPayload("bootstrap payload 'events' must be a list")

    try:
        roster = Roster(
            players=normalize_players(raw_players, raw_teams),
            teams=normalize_teams(raw_teams, raw_players),
            gameweeks=normalize_gameweeks(events or []),
        )
    except ValidationError as exc:
        raise MalformedPayload(f"bootstrap record out of range: {exc.errors()[0]['msg']}") from exc
    logger.debug(
        "Normalized bootstrap: %d players, %d teams, %d gameweeks",
        len(roster.players),
        len(roster.teams),
        len(roster.gameweeks),
    )
    return roster
