"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from footydash.errors import ConfigInvalid


DEFAULT_FPL_URL = "https://fantasy.premierleague.com/api/bootstrap-static/"
DEFAULT_ODDS_URL = "https://api.the-odds-api.com/v4/sports/soccer_epl/odds"


@dataclass(frozen=True)
class Settings:
    odds_api_key: Optional[str] = None
    fpl_url: str = DEFAULT_FPL_URL
    odds_url: str = DEFAULT_ODDS_URL
    odds_regions: str = "uk"
    timezone: str = "Europe/London"
    crest_file: Optional[Path] = None
    http_timeout: float = 30.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        crest_file = env.get("FOOTYDASH_CREST_FILE")
        timeout = env.get("FOOTYDASH_HTTP_TIMEOUT")
        try:
            http_timeout = float(timeout) if timeout else cls.http_timeout
        except ValueError:
            raise ValueError(f"FOOTYDASH_HTTP_TIMEOUT must be numeric, got {timeout!r}") from None
        settings = cls(
            odds_api_key=env.get("ODDS_API_KEY") or None,
            fpl_url=env.get("FOOTYDASH_FPL_URL") or DEFAULT_FPL_URL,
            odds_url=env.get("FOOTYDASH_ODDS_URL") or DEFAULT_ODDS_URL,
            odds_regions=env.get("FOOTYDASH_ODDS_REGIONS") or "uk",
            timezone=env.get("FOOTYDASH_TIMEZONE") or "Europe/London",
            crest_file=Path(crest_file) if crest_file else None,
            http_timeout=http_timeout,
        )
        try:
            settings.display_tz()
        except ConfigInvalid as exc:
            raise ValueError(exc.details) from None
        return settings

    def display_tz(self) -> tzinfo:
        if self.timezone.upper() in {"UTC", "Z"}:
            return timezone.utc
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, IsADirectoryError, ValueError) as exc:
            raise ConfigInvalid(f"FOOTYDASH_TIMEZONE is not a known timezone: {self.timezone!r}") from exc
