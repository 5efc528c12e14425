"""Tests for EnergyApiClient: one round trip, envelope unwrapping, failures."""

import json

import httpx
import pytest

from energy_api import (
    __version__,
    InvalidResponse,
    RemoteError,
    TransportFailure,
    get_operation,
)
from energy_api.client import USER_AGENT, build_http_client
from energy_api.config import Settings
from energy_api.models import ResponseEnvelope


class TestResponseEnvelope:
    def test_data_field_unwrapped(self):
        assert ResponseEnvelope(200, {"success": True, "data": [1, 2]}).unwrap() == [1, 2]

    def test_bare_body_returned_whole(self):
        assert ResponseEnvelope(200, {"status": "ok"}).unwrap() == {"status": "ok"}

    def test_null_data_returns_whole_body(self):
        body = {"success": True, "data": None, "message": "queued"}
        assert ResponseEnvelope(200, body).unwrap() == body

    def test_non_object_body_returned(self):
        assert ResponseEnvelope(200, [{"id": 1}]).unwrap() == [{"id": 1}]

    def test_success_false_uses_error_field(self):
        with pytest.raises(RemoteError, match="^Site not found$") as info:
            ResponseEnvelope(404, {"success": False, "error": "Site not found"}).unwrap()
        assert info.value.status_code == 404

    def test_success_false_without_error_synthesizes_message(self):
        with pytest.raises(RemoteError, match="^API error 500$"):
            ResponseEnvelope(500, {"success": False}).unwrap()

    def test_explicit_success_wins_over_status(self):
        assert ResponseEnvelope(400, {"success": True, "data": 1}).unwrap() == 1

    def test_error_status_without_envelope_fails(self):
        with pytest.raises(RemoteError, match="^Unauthorized$"):
            ResponseEnvelope(401, {"error": "Unauthorized"}).unwrap()


class TestEnergyApiClient:
    @pytest.mark.asyncio
    async def test_get_round_trip(self, platform, make_api, key_settings):
        platform.reply({"data": {"id": 42, "name": "X"}})
        api = make_api(key_settings)

        result = await api.call(get_operation("get_site"), {"site_id": 42})

        assert result == {"id": 42, "name": "X"}
        assert len(platform.requests) == 1
        request = platform.last
        assert request.method == "GET"
        assert str(request.url) == "https://energyatit.test/api/sites/42"
        assert request.content == b""
        assert request.headers["X-API-Key"] == "test-key"

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self, platform, make_api, key_settings):
        api = make_api(key_settings)

        await api.call(
            get_operation("create_carbon_record"),
            {"meter_id": "m-1", "facility_id": "f-1", "timestamp": "2025-01-01T00:00:00Z", "kwh": 12.5},
        )

        assert platform.last.method == "POST"
        assert platform.last.headers["Content-Type"] == "application/json"
        assert platform.last_json() == {
            "meterId": "m-1",
            "facilityId": "f-1",
            "timestamp": "2025-01-01T00:00:00Z",
            "kwh": 12.5,
        }

    @pytest.mark.asyncio
    async def test_get_verb(self, platform, make_api, key_settings):
        platform.reply({"success": True, "data": [{"id": 1}]})
        api = make_api(key_settings)

        result = await api.get("/api/v1/reports", {"siteId": 3})

        assert result == [{"id": 1}]
        assert platform.last.method == "GET"
        assert str(platform.last.url) == "https://energyatit.test/api/v1/reports?siteId=3"
        assert platform.last.content == b""
        assert platform.last.headers["X-API-Key"] == "test-key"

    @pytest.mark.asyncio
    async def test_post_verb(self, platform, make_api, key_settings):
        api = make_api(key_settings)

        await api.post("/api/v1/reports", {"siteId": 3})
        with_body = platform.last
        await api.post("/api/v1/reports/3/refresh")
        without_body = platform.last

        assert with_body.method == "POST"
        assert with_body.url.query == b""
        assert json.loads(with_body.content) == {"siteId": 3}
        assert without_body.method == "POST"
        assert without_body.content == b""

    @pytest.mark.asyncio
    async def test_patch_verb(self, platform, make_api, key_settings):
        platform.reply({"success": True, "data": {"updated": True}})
        api = make_api(key_settings)

        result = await api.patch("/api/sites/1", {"name": "Depot"})

        assert result == {"updated": True}
        assert platform.last.method == "PATCH"
        assert platform.last_json() == {"name": "Depot"}

    @pytest.mark.asyncio
    async def test_remote_failure(self, platform, make_api, key_settings):
        platform.reply({"success": False, "error": "Asset offline"}, status_code=409)
        api = make_api(key_settings)

        with pytest.raises(RemoteError, match="Asset offline"):
            await api.call(get_operation("dispatch_history"), {"asset_id": 1})

    @pytest.mark.asyncio
    async def test_non_json_body(self, platform, make_api, key_settings):
        platform.reply_text("<html>Bad Gateway</html>", status_code=502)
        api = make_api(key_settings)

        with pytest.raises(InvalidResponse, match="HTTP 502") as info:
            await api.call(get_operation("health_check"))
        assert info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_network_failure(self, platform, make_api, key_settings):
        platform.fail_with(httpx.ConnectError("connection refused"))
        api = make_api(key_settings)

        with pytest.raises(TransportFailure, match="connection refused"):
            await api.call(get_operation("health_check"))

    @pytest.mark.asyncio
    async def test_context_manager_closes_http_client(self, make_api, key_settings):
        api = make_api(key_settings)
        async with api:
            pass
        assert api._http.is_closed


def test_build_http_client_ignores_environment_proxies(monkeypatch):
    monkeypatch.setenv("HTTPS_PROXY", "http://should-not-be-used:3128")

    client = build_http_client(Settings(base_url="https://energyatit.test", timeout=None))

    assert client.trust_env is False
    assert client.timeout.connect is None
    assert client.base_url.host == "energyatit.test"


def test_user_agent_carries_package_version():
    client = build_http_client(Settings(base_url="https://energyatit.test"))

    assert USER_AGENT == f"energyatit-mcp/{__version__}"
    assert client.headers["User-Agent"] == USER_AGENT
