"""Crest identifiers for Premier League clubs, keyed by full team name."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

CREST_URL_TEMPLATE = "https://resources.premierleague.com/premierleague/badges/t{crest_id}.svg"
UNKNOWN_CREST_ID = "0"

_DEFAULT_CREST_IDS: dict[str, str] = {
    "Manchester United": "1",
    "Manchester City": "43",
    "Liverpool": "14",
    "Chelsea": "8",
    "Arsenal": "3",
    "Tottenham Hotspur": "6",
    "Newcastle United": "4",
    "West Ham United": "21",
    "Aston Villa": "7",
    "Brighton and Hove Albion": "36",
    "Everton": "11",
    "Nottingham Forest": "17",
    "Crystal Palace": "31",
    "Fulham": "54",
    "Brentford": "94",
    "Wolverhampton Wanderers": "39",
    "Burnley": "90",
    "Sheffield United": "49",
    "Luton Town": "102",
    "AFC Bournemouth": "91",
    "Leicester City": "13",
    "Southampton": "20",
    "Ipswich Town": "5",
}


@dataclass(frozen=True)
class CrestTable:
    """Read-only team name -> crest id lookup used by the fixture normalizer."""

    ids: Mapping[str, str] = field(default_factory=dict)
    url_template: str = CREST_URL_TEMPLATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", MappingProxyType(dict(self.ids)))

    def crest_id(self, team_name: str) -> str:
        """Return the crest id, or ``"0"`` when the team is not in the table."""

        crest_id = self.ids.get(team_name)
        if not crest_id:
            logger.warning("No crest id found for team %r", team_name)
            return UNKNOWN_CREST_ID
        return crest_id

    def crest_url(self, team_name: str) -> Optional[str]:
        crest_id = self.crest_id(team_name)
        if crest_id == UNKNOWN_CREST_ID:
            return None
        return self.url_template.format(crest_id=crest_id)

    def extend(self, extra: Mapping[str, str]) -> "CrestTable":
        """Return a new table with ``extra`` ids layered over this one."""

        merged = dict(self.ids)
        merged.update({name: str(value) for name, value in extra.items()})
        return CrestTable(ids=merged, url_template=self.url_template)

    def __len__(self) -> int:
        return len(self.ids)


DEFAULT_CREST_TABLE = CrestTable(ids=_DEFAULT_CREST_IDS)
