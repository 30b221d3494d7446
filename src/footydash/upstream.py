"""HTTP fetchers for the FPL and odds providers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from footydash.config import Settings
from footydash.errors import ConfigMissing, MalformedPayload, UpstreamUnavailable


logger = logging.getLogger(__name__)

USER_AGENT = "footydash/0.1"


@dataclass(frozen=True)
class Quota:
    remaining: Optional[str] = None
    used: Optional[str] = None

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "Quota":
        return cls(
            remaining=headers.get("x-requests-remaining"),
            used=headers.get("x-requests-used"),
        )


@dataclass(frozen=True)
class OddsResponse:
    events: Any
    quota: Quota = field(default_factory=Quota)


def build_client(settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        transport=transport,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
    )


async def _get_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: dict[str, str] | None = None,
    provider: str,
) -> tuple[Any, httpx.Response]:
    try:
        response = await client.get(url, params=params)
    except httpx.HTTPError as exc:
        raise UpstreamUnavailable(
            f"{provider} request failed: {exc}", error=f"{provider} unavailable"
        ) from exc

    if response.is_error:
        logger.debug("%s responded %s: %s", provider, response.status_code, response.text[:500])
        raise UpstreamUnavailable(
            f"{provider} request failed with status {response.status_code}: {response.text[:200]}",
            error=f"{provider} unavailable",
        )

    try:
        return response.json(), response
    except ValueError as exc:
        raise MalformedPayload(f"{provider} returned a non-JSON body") from exc


async def fetch_bootstrap(client: httpx.AsyncClient, settings: Settings) -> Any:
    """Fetch the ``bootstrap-static`` snapshot."""

    payload, _ = await _get_json(client, settings.fpl_url, provider="FPL")
    return payload


async def fetch_odds(client: httpx.AsyncClient, settings: Settings) -> OddsResponse:
    """Fetch upcoming events with decimal head-to-head odds.

    Raises :class:`ConfigMissing` before touching the network when no API key
    is configured.
    """

    if not settings.odds_api_key:
        raise ConfigMissing("Please set ODDS_API_KEY in the environment")

    logger.debug("Using odds API key starting with %s", settings.odds_api_key[:4])
    params = {
        "apiKey": settings.odds_api_key,
        "regions": settings.odds_regions,
        "markets": "h2h",
        "dateFormat": "iso",
        "oddsFormat": "decimal",
    }
    payload, response = await _get_json(client, settings.odds_url, params=params, provider="Odds API")
    quota = Quota.from_headers(response.headers)
    logger.info("Odds API quota - remaining: %s, used: %s", quota.remaining, quota.used)
    return OddsResponse(events=payload, quota=quota)


__all__ = [
    "OddsResponse",
    "Quota",
    "build_client",
    "fetch_bootstrap",
    "fetch_odds",
]
