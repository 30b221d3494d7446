"""Normalize odds-provider events into upcoming fixture cards."""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from footydash.config import DEFAULT_CREST_TABLE, CrestTable
from footydash.errors import MalformedPayload
from footydash.models import FixtureRecord, MatchStatsRecord, RawEvent


logger = logging.getLogger(__name__)

H2H_MARKET_KEY = "h2h"
DEFAULT_FIXTURE_LIMIT = 10
STATS_BOOKMAKER_LIMIT = 3

OddsTuple = Tuple[Optional[float], Optional[float], Optional[float], Optional[str]]


def _parse_events(payload: list) -> List[RawEvent]:
    events: List[RawEvent] = []
    for index, entry in enumerate(payload):
        try:
            events.append(RawEvent.model_validate(entry))
        except ValidationError as exc:
            raise MalformedPayload(f"event[{index}] is invalid: {exc.errors()[0]['msg']}") from exc
    return events


def _kickoff(event: RawEvent) -> datetime:
    # Naive timestamps are treated as UTC so they compare with aware ones.
    if event.commence_time.tzinfo is None:
        return event.commence_time.replace(tzinfo=timezone.utc)
    return event.commence_time


def extract_h2h_odds(event: RawEvent) -> OddsTuple:
    """Return ``(home, draw, away, bookmaker)`` from the event's first bookmaker.

    Outcomes are matched by name: the home team's name is the home price, the
    away team's name the away price, and any other outcome the draw price.
    """

    if not event.bookmakers:
        return None, None, None, None

    bookmaker = event.bookmakers[0]
    home_odds = draw_odds = away_odds = None
    market = next((m for m in bookmaker.markets if m.key == H2H_MARKET_KEY), None)
    if market is None:
        logger.debug("Bookmaker %r has no %s market for %s v %s",
                     bookmaker.title, H2H_MARKET_KEY, event.home_team, event.away_team)
    else:
        for outcome in market.outcomes:
            if outcome.name == event.home_team:
                home_odds = outcome.price
            elif outcome.name == event.away_team:
                away_odds = outcome.price
            else:
                draw_odds = outcome.price
    return home_odds, draw_odds, away_odds, bookmaker.title


def format_kickoff(moment: datetime, tz: tzinfo = timezone.utc) -> str:
    """Short display string, e.g. ``"Sat 17 Aug, 15:00 BST"``."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    local = moment.astimezone(tz)
    zone = local.tzname() or ""
    return f"{local:%a} {local.day} {local:%b}, {local:%H:%M} {zone}".rstrip()


def normalize_fixtures(
    payload: Any,
    *,
    crests: CrestTable = DEFAULT_CREST_TABLE,
    limit: int = DEFAULT_FIXTURE_LIMIT,
    tz: tzinfo = timezone.utc,
) -> List[FixtureRecord]:
    """Return the next ``limit`` fixtures ordered by kickoff.

    A non-list or empty payload means there is nothing scheduled and yields
    an empty list; a list with an unreadable entry raises ``MalformedPayload``.
    """

    if not isinstance(payload, list):
        logger.warning("Odds payload is not a list (got %s); no fixtures", type(payload).__name__)
        return []
    if not payload:
        logger.info("No matches found in the odds payload")
        return []

    events = sorted(_parse_events(payload), key=_kickoff)[: max(limit, 0)]

    fixtures: List[FixtureRecord] = []
    for event in events:
        home_odds, draw_odds, away_odds, bookmaker = extract_h2h_odds(event)
        kickoff = _kickoff(event)
        fixtures.append(
            FixtureRecord(
                home_team=event.home_team,
                away_team=event.away_team,
                match_date=format_kickoff(kickoff, tz),
                raw_date=kickoff,
                home_crest=crests.crest_url(event.home_team),
                away_crest=crests.crest_url(event.away_team),
                home_odds=home_odds,
                draw_odds=draw_odds,
                away_odds=away_odds,
                bookmaker=bookmaker,
            )
        )

    fixtures.sort(key=lambda fixture: fixture.raw_date)
    return fixtures


def normalize_match_stats(payload: Any) -> List[MatchStatsRecord]:
    """Pass events through with at most the first three bookmakers attached."""

    if not isinstance(payload, list):
        raise MalformedPayload("odds payload must be a JSON array")

    return [
        MatchStatsRecord(
            id=event.id,
            home_team=event.home_team,
            away_team=event.away_team,
            commence_time=_kickoff(event),
            completed=event.completed,
            scores=event.scores,
            bookmakers=[
                bookmaker.model_dump(mode="json")
                for bookmaker in event.bookmakers[:STATS_BOOKMAKER_LIMIT]
            ],
        )
        for event in _parse_events(payload)
    ]
