"""Input adapters that normalize raw provider payloads."""

from .fixtures import (
    DEFAULT_FIXTURE_LIMIT,
    extract_h2h_odds,
    format_kickoff,
    normalize_fixtures,
    normalize_match_stats,
)
from .roster import (
    Roster,
    normalize_bootstrap,
    normalize_gameweeks,
    normalize_players,
    normalize_teams,
    position_label,
)

__all__ = [
    "DEFAULT_FIXTURE_LIMIT",
    "Roster",
    "extract_h2h_odds",
    "format_kickoff",
    "normalize_bootstrap",
    "normalize_fixtures",
    "normalize_gameweeks",
    "normalize_match_stats",
    "normalize_players",
    "normalize_teams",
    "position_label",
]
