"""Pipelines: fetch a provider payload, normalize it and rank where needed."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List

import httpx

from footydash.config import CrestTable, Settings
from footydash.ingest import Roster, normalize_bootstrap, normalize_fixtures, normalize_match_stats
from footydash.models import FixtureRecord, MatchStatsRecord
from footydash.ranking import rank_teams
from footydash.upstream import Quota, fetch_bootstrap, fetch_odds


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchStats:
    matches: List[MatchStatsRecord]
    quota: Quota


def build_roster(payload: Any) -> Roster:
    """Normalize a bootstrap payload and rank its teams."""

    roster = normalize_bootstrap(payload)
    return Roster(
        players=roster.players,
        teams=rank_teams(roster.teams),
        gameweeks=roster.gameweeks,
    )


async def load_roster(client: httpx.AsyncClient, settings: Settings) -> Roster:
    payload = await fetch_bootstrap(client, settings)
    roster = build_roster(payload)
    if roster.teams:
        logger.debug("Table leader: %s (%d pts)", roster.teams[0].name, roster.teams[0].points)
    return roster


async def load_fixtures(
    client: httpx.AsyncClient,
    settings: Settings,
    crests: CrestTable,
) -> List[FixtureRecord]:
    response = await fetch_odds(client, settings)
    return normalize_fixtures(response.events, crests=crests, tz=settings.display_tz())


async def load_match_stats(client: httpx.AsyncClient, settings: Settings) -> MatchStats:
    response = await fetch_odds(client, settings)
    return MatchStats(matches=normalize_match_stats(response.events), quota=response.quota)


__all__ = ["MatchStats", "build_roster", "load_fixtures", "load_match_stats", "load_roster"]
