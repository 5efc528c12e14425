# =============================================================================
# energy_api/client.py  —  HTTP Client for the EnergyAtIt Platform
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Executes exactly one HTTP request per call and normalizes the outcome:
#     - success → the unwrapped payload (``data`` or the whole body)
#     - failure → an EnergyApiError subclass with a short message
#
# THE FLOW:
#   1. Operation.build() turns tool arguments into a RequestEnvelope
#   2. send() issues it through a shared httpx.AsyncClient
#   3. The body is parsed as JSON into a ResponseEnvelope
#   4. ResponseEnvelope.unwrap() applies the {success, data, error} rules
#
# WHAT THIS CLIENT DOES NOT DO:
#   No retries, no backoff, no caching.  A call either fully succeeds or
#   fully fails.  The only timeout is Settings.timeout.
#
# PROXY:
#   The httpx client is created with trust_env=False and the proxy taken
#   from Settings, so the proxy choice is the one resolved at startup and
#   nothing else.
# =============================================================================

import logging
from typing import Any, Mapping, Optional

import httpx

from energy_api import __version__
from energy_api.config import Settings
from energy_api.errors import InvalidResponse, TransportFailure
from energy_api.models import RequestEnvelope, ResponseEnvelope
from energy_api.operations import Operation

logger = logging.getLogger("energy_api.client")

USER_AGENT = f"energyatit-mcp/{__version__}"


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the single AsyncClient shared by every tool call."""
    return httpx.AsyncClient(
        base_url=settings.base_url,
        proxy=settings.proxy_url,
        timeout=httpx.Timeout(settings.timeout),
        trust_env=False,
        headers={"User-Agent": USER_AGENT},
    )


class EnergyApiClient:
    """Async client that runs catalog operations against one base URL."""

    def __init__(self, settings: Settings, http: Optional[httpx.AsyncClient] = None) -> None:
        self.settings = settings
        self._http = http or build_http_client(settings)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "EnergyApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # Catalog entry point
    # -------------------------------------------------------------------------
    async def call(self, operation: Operation, arguments: Optional[Mapping[str, Any]] = None) -> Any:
        """Run one catalog operation and return its unwrapped payload."""
        request = operation.build(arguments or {}, self.settings)
        return await self.send(request)

    # -------------------------------------------------------------------------
    # Raw verbs for endpoints outside the catalog
    # -------------------------------------------------------------------------
    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self.send(self._envelope("GET", path, params=params))

    async def post(self, path: str, body: Optional[dict[str, Any]] = None) -> Any:
        return await self.send(self._envelope("POST", path, body=body))

    async def patch(self, path: str, body: Optional[dict[str, Any]] = None) -> Any:
        return await self.send(self._envelope("PATCH", path, body=body))

    def _envelope(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> RequestEnvelope:
        return RequestEnvelope(
            method=method,
            path=path,
            headers=self.settings.auth_headers(),
            params=params or {},
            body=body,
        )

    # -------------------------------------------------------------------------
    # One round trip
    # -------------------------------------------------------------------------
    async def send(self, request: RequestEnvelope) -> Any:
        """Issue ``request`` and unwrap the reply.

        Raises:
            TransportFailure: the request never got a response.
            InvalidResponse: the response body was not JSON.
            RemoteError: the platform reported ``success: false``.
        """
        kwargs: dict[str, Any] = {"headers": request.headers}
        if request.params:
            kwargs["params"] = request.params
        if request.has_body and request.method in ("POST", "PATCH"):
            kwargs["json"] = request.body

        logger.debug("%s %s%s", request.method, self.settings.base_url, request.path)
        try:
            response = await self._http.request(request.method, request.path, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportFailure(
                f"{request.method} {request.path} failed: {str(exc) or type(exc).__name__}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidResponse(
                f"Invalid JSON response from {request.path} (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from exc

        return ResponseEnvelope(status_code=response.status_code, body=payload).unwrap()
