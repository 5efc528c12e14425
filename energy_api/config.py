# =============================================================================
# energy_api/config.py  —  Process-wide Settings (resolved once at startup)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the environment exactly once and freezes the result into a
#   Settings object.  The server entry point builds it, then hands it to
#   the HTTP client and the MCP server.  Nothing else reads os.environ.
#
# ENVIRONMENT VARIABLES:
#   ENERGYATIT_BASE_URL   → remote base URL (preferred)
#   ENERGYATIT_URL        → legacy alias for the base URL
#   ENERGYATIT_TOKEN      → bearer token (wins over the API key)
#   ENERGYATIT_API_KEY    → API key sent as X-API-Key
#   ENERGYATIT_TIMEOUT    → request timeout in seconds ("0" = no timeout)
#   ENERGYATIT_LOG_LEVEL  → stderr log level
#   https_proxy / HTTPS_PROXY / http_proxy / HTTP_PROXY → forward proxy
#
# DEMO MODE:
#   With neither a token nor an API key, the adapter runs in demo mode:
#   no auth header is sent, and the few tools that have a public demo
#   endpoint call that endpoint instead.
# =============================================================================

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://energyatit.com"
DEFAULT_TIMEOUT_SECONDS = 30.0

# Checked in this order; the first non-empty value wins.
PROXY_ENV_VARS = ("https_proxy", "HTTPS_PROXY", "http_proxy", "HTTP_PROXY")


class AuthMode(str, Enum):
    """Which credential scheme is attached to outbound requests."""

    TOKEN = "token"
    API_KEY = "api_key"
    NONE = "none"


@dataclass(frozen=True)
class Settings:
    """Immutable adapter configuration.

    Build it with ``Settings.from_env()`` at process entry, or construct it
    directly in tests.
    """

    base_url: str = DEFAULT_BASE_URL
    token: str = ""
    api_key: str = ""
    proxy_url: Optional[str] = None
    timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        # Paths always start with "/", so a trailing slash would double up.
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    # -------------------------------------------------------------------------
    # Construction from the environment
    # -------------------------------------------------------------------------
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Resolve settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ

        base_url = (
            env.get("ENERGYATIT_BASE_URL")
            or env.get("ENERGYATIT_URL")
            or DEFAULT_BASE_URL
        )

        proxy_url = None
        for name in PROXY_ENV_VARS:
            if env.get(name):
                proxy_url = env[name]
                break

        return cls(
            base_url=base_url,
            token=env.get("ENERGYATIT_TOKEN", ""),
            api_key=env.get("ENERGYATIT_API_KEY", ""),
            proxy_url=proxy_url,
            timeout=_parse_timeout(env.get("ENERGYATIT_TIMEOUT")),
            log_level=env.get("ENERGYATIT_LOG_LEVEL", "INFO").upper(),
        )

    # -------------------------------------------------------------------------
    # Credentials
    # -------------------------------------------------------------------------
    @property
    def auth_mode(self) -> AuthMode:
        if self.token:
            return AuthMode.TOKEN
        if self.api_key:
            return AuthMode.API_KEY
        return AuthMode.NONE

    @property
    def demo_mode(self) -> bool:
        return self.auth_mode is AuthMode.NONE

    def auth_headers(self) -> dict[str, str]:
        """Headers sent with every request: JSON content type plus one credential."""
        headers = {"Content-Type": "application/json"}
        if self.auth_mode is AuthMode.TOKEN:
            headers["Authorization"] = f"Bearer {self.token}"
        elif self.auth_mode is AuthMode.API_KEY:
            headers["X-API-Key"] = self.api_key
        return headers

    def describe_auth(self) -> str:
        """Human-readable credential mode, used in diagnostics and the overview."""
        return {
            AuthMode.TOKEN: "JWT token",
            AuthMode.API_KEY: "API key",
            AuthMode.NONE: "none (set ENERGYATIT_API_KEY)",
        }[self.auth_mode]


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"ENERGYATIT_TIMEOUT must be a number of seconds, got {raw!r}") from None
    return value if value > 0 else None
