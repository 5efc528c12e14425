"""Tests for Settings resolution and credential headers."""

import pytest

from energy_api import AuthMode, Settings
from energy_api.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS


class TestFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.auth_mode is AuthMode.NONE
        assert settings.demo_mode
        assert settings.proxy_url is None
        assert settings.timeout == DEFAULT_TIMEOUT_SECONDS

    def test_base_url_prefers_primary_over_legacy_alias(self):
        settings = Settings.from_env({
            "ENERGYATIT_BASE_URL": "https://primary.example",
            "ENERGYATIT_URL": "https://legacy.example",
        })
        assert settings.base_url == "https://primary.example"

    def test_legacy_alias_used_when_primary_missing(self):
        settings = Settings.from_env({"ENERGYATIT_URL": "https://legacy.example/"})
        assert settings.base_url == "https://legacy.example"

    def test_trailing_slash_stripped(self):
        assert Settings(base_url="https://x.example//").base_url == "https://x.example"

    @pytest.mark.parametrize(
        "env, expected",
        [
            ({"https_proxy": "http://a:1", "HTTPS_PROXY": "http://b:2"}, "http://a:1"),
            ({"HTTPS_PROXY": "http://b:2", "http_proxy": "http://c:3"}, "http://b:2"),
            ({"http_proxy": "http://c:3", "HTTP_PROXY": "http://d:4"}, "http://c:3"),
            ({"HTTP_PROXY": "http://d:4"}, "http://d:4"),
            ({"https_proxy": "", "HTTP_PROXY": "http://d:4"}, "http://d:4"),
        ],
    )
    def test_proxy_lookup_order(self, env, expected):
        assert Settings.from_env(env).proxy_url == expected

    def test_timeout_zero_disables(self):
        assert Settings.from_env({"ENERGYATIT_TIMEOUT": "0"}).timeout is None

    def test_timeout_parsed(self):
        assert Settings.from_env({"ENERGYATIT_TIMEOUT": "2.5"}).timeout == 2.5

    def test_invalid_timeout_rejected(self):
        with pytest.raises(ValueError, match="ENERGYATIT_TIMEOUT"):
            Settings.from_env({"ENERGYATIT_TIMEOUT": "soon"})

    def test_settings_are_frozen(self):
        settings = Settings.from_env({})
        with pytest.raises(AttributeError):
            settings.token = "changed"


class TestAuthHeaders:
    def test_token_takes_precedence_over_api_key(self):
        settings = Settings(token="tok", api_key="key")

        headers = settings.auth_headers()

        assert settings.auth_mode is AuthMode.TOKEN
        assert headers["Authorization"] == "Bearer tok"
        assert "X-API-Key" not in headers

    def test_api_key_header(self):
        headers = Settings(api_key="key").auth_headers()

        assert headers["X-API-Key"] == "key"
        assert "Authorization" not in headers

    def test_no_credentials_means_no_auth_header(self):
        headers = Settings().auth_headers()
        assert headers == {"Content-Type": "application/json"}

    @pytest.mark.parametrize(
        "settings, text",
        [
            (Settings(token="t"), "JWT token"),
            (Settings(api_key="k"), "API key"),
            (Settings(), "none (set ENERGYATIT_API_KEY)"),
        ],
    )
    def test_describe_auth(self, settings, text):
        assert settings.describe_auth() == text
