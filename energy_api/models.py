# =============================================================================
# energy_api/models.py  —  Per-call Data Models
# =============================================================================
#
# Two transient shapes flow through every tool call:
#
#   RequestEnvelope   built from an Operation + the tool's arguments,
#                     sent once, then discarded.
#   ResponseEnvelope  the platform's {success, data, error} reply (or a bare
#                     JSON body), plus the HTTP status it arrived with.
#
# Neither is persisted.  The adapter only looks at ``success``; everything
# inside ``data`` is passed back to the agent untouched.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional

from energy_api.errors import RemoteError


# -----------------------------------------------------------------------------
# RequestEnvelope — one outbound HTTP call
# -----------------------------------------------------------------------------
@dataclass
class RequestEnvelope:
    """Everything needed to issue one request, relative to the base URL."""

    method: str                                     # "GET", "POST" or "PATCH"
    path: str                                       # "/api/sites/42"
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)  # query string; empty = no "?"
    body: Optional[dict[str, Any]] = None           # None = no request body at all

    @property
    def has_body(self) -> bool:
        return self.body is not None


# -----------------------------------------------------------------------------
# ResponseEnvelope — one parsed reply
# -----------------------------------------------------------------------------
# The platform normally wraps replies as {"success": true, "data": ...}.
# Some endpoints (health, older routes) return a bare object instead, so
# both shapes must unwrap cleanly.
# -----------------------------------------------------------------------------
@dataclass
class ResponseEnvelope:
    """A parsed JSON reply and the status code it came with."""

    status_code: int
    body: Any

    @property
    def success(self) -> Optional[bool]:
        if isinstance(self.body, dict):
            return self.body.get("success")
        return None

    @property
    def error(self) -> Optional[str]:
        if isinstance(self.body, dict) and self.body.get("error") is not None:
            return str(self.body["error"])
        return None

    @property
    def data(self) -> Any:
        if isinstance(self.body, dict):
            return self.body.get("data")
        return None

    def unwrap(self) -> Any:
        """Return the payload, or raise RemoteError on ``success: false``.

        An explicit ``success`` field always decides the outcome.  Without
        one, an HTTP error status (4xx/5xx) is a failure and anything else
        is a success.  A missing or null ``data`` field means the whole
        body is the payload.
        """
        failed = self.success is False or (
            self.success is None and self.status_code >= 400
        )
        if failed:
            raise RemoteError(
                self.error or f"API error {self.status_code}",
                status_code=self.status_code,
            )
        data = self.data
        return self.body if data is None else data
