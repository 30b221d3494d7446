import httpx
import pytest

from footydash.config import Settings
from footydash.errors import ConfigMissing, MalformedPayload, UpstreamUnavailable
from footydash.upstream import build_client, fetch_bootstrap, fetch_odds

from tests.payloads import sample_bootstrap, sample_odds


def _client(handler) -> httpx.AsyncClient:
    return build_client(Settings(odds_api_key="secret-key"), transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_fetch_odds_sends_query_and_reads_quota():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=sample_odds(),
            headers={"x-requests-remaining": "480", "x-requests-used": "20"},
        )

    settings = Settings(odds_api_key="secret-key", odds_regions="uk")
    async with _client(handler) as client:
        response = await fetch_odds(client, settings)

    params = seen[0].url.params
    assert params["apiKey"] == "secret-key"
    assert params["markets"] == "h2h"
    assert params["oddsFormat"] == "decimal"
    assert params["dateFormat"] == "iso"
    assert params["regions"] == "uk"
    assert len(response.events) == 12
    assert response.quota.remaining == "480"
    assert response.quota.used == "20"


@pytest.mark.anyio
async def test_fetch_odds_without_key_never_calls_out():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("network should not be used")

    async with _client(handler) as client:
        with pytest.raises(ConfigMissing) as excinfo:
            await fetch_odds(client, Settings(odds_api_key=None))

    assert excinfo.value.error == "API key not configured"
    assert excinfo.value.status_code == 500


@pytest.mark.anyio
async def test_non_2xx_is_upstream_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="invalid api key")

    async with _client(handler) as client:
        with pytest.raises(UpstreamUnavailable, match="401"):
            await fetch_odds(client, Settings(odds_api_key="bad"))


@pytest.mark.anyio
async def test_transport_error_is_upstream_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(UpstreamUnavailable) as excinfo:
            await fetch_bootstrap(client, Settings())

    assert excinfo.value.error == "FPL unavailable"


@pytest.mark.anyio
async def test_non_json_body_is_malformed():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    async with _client(handler) as client:
        with pytest.raises(MalformedPayload):
            await fetch_bootstrap(client, Settings())


@pytest.mark.anyio
async def test_fetch_bootstrap_uses_configured_url():
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == "https://fpl.example/api/bootstrap-static/"
        return httpx.Response(200, json=sample_bootstrap())

    async with _client(handler) as client:
        payload = await fetch_bootstrap(client, Settings(fpl_url="https://fpl.example/api/bootstrap-static/"))

    assert len(payload["teams"]) == 4
