# =============================================================================
# energy_api/operations.py  —  The Remote Operation Catalog
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares every remote call the adapter can make, as data.  Each
#   Operation says:
#     - which HTTP method to use
#     - the path template ("/api/sites/{site_id}")
#     - which tool arguments become query parameters, and under what key
#     - which tool arguments become JSON body fields, and under what key
#     - an optional public demo path used when no credentials are set
#
#   The MCP layer (energy_mcp/tools.py) exposes one tool per entry here.
#   Adding an endpoint means adding an entry and a typed tool signature;
#   no new request/response handling code.
#
# KEY MAPPING:
#   Tool arguments are snake_case (site_id).  The platform mostly expects
#   camelCase (siteId), but not everywhere: the DR event filter and the
#   Scope 2 report body keep snake_case.  The mappings below record the
#   exact wire key for each argument.
#
# NAMING CONVENTIONS (same as the tools):
#   - list_* / get_*     → GET, read-only, safe to retry
#   - verify_*           → GET, asks the platform to recheck a hash chain
#   - create_* / generate_* / dispatch_* / settle_* / provision_* → POST
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from urllib.parse import quote

from energy_api.config import Settings
from energy_api.models import RequestEnvelope


@dataclass(frozen=True)
class Operation:
    """One remote endpoint, described declaratively."""

    name: str
    description: str
    method: str
    path: str
    query: Mapping[str, str] = field(default_factory=dict)  # wire key → argument
    body: Optional[Mapping[str, str]] = None                # wire key → argument
    demo_path: Optional[str] = None
    path_tail: Optional[str] = None   # optional argument appended as "/<value>"

    def build(self, arguments: Mapping[str, Any], settings: Settings) -> RequestEnvelope:
        """Turn validated tool arguments into a RequestEnvelope.

        Arguments whose value is None are treated as omitted: they never
        appear in the query string, the body, or the path tail.  Empty
        strings are omitted from the query string and the path tail too;
        numeric zero is a real value and is kept.
        """
        supplied = {k: v for k, v in arguments.items() if v is not None}
        filters = {k: v for k, v in supplied.items() if v != ""}
        headers = settings.auth_headers()

        if settings.demo_mode and self.demo_path:
            return RequestEnvelope(method=self.method, path=self.demo_path, headers=headers)

        try:
            path = self.path.format_map(
                {k: quote(str(v), safe="") for k, v in supplied.items()}
            )
        except KeyError as exc:
            raise ValueError(f"{self.name}: missing path parameter {exc.args[0]!r}") from None

        if self.path_tail and self.path_tail in filters:
            path = f"{path}/{quote(str(filters[self.path_tail]), safe='')}"

        params = {
            key: filters[arg] for key, arg in self.query.items() if arg in filters
        }

        body = None
        if self.body is not None:
            body = {key: supplied[arg] for key, arg in self.body.items() if arg in supplied}

        return RequestEnvelope(
            method=self.method,
            path=path,
            headers=headers,
            params=params,
            body=body,
        )


def _get(name: str, description: str, path: str, **kwargs: Any) -> Operation:
    return Operation(name=name, description=description, method="GET", path=path, **kwargs)


def _post(name: str, description: str, path: str, **kwargs: Any) -> Operation:
    return Operation(name=name, description=description, method="POST", path=path, **kwargs)


# =============================================================================
# The catalog
# =============================================================================
_CATALOG: tuple[Operation, ...] = (
    # ── Sites ─────────────────────────────────────────────────────────────
    _get("list_sites", "List all energy sites in your tenant",
         "/api/sites", demo_path="/api/v1/demo/sites"),
    _get("get_site", "Get details of a specific site",
         "/api/sites/{site_id}"),

    # ── Assets ────────────────────────────────────────────────────────────
    _get("list_assets", "List assets, optionally filtered by site",
         "/api/assets", query={"siteId": "site_id"},
         demo_path="/api/v1/demo/assets"),

    # ── Grid connections & meters ─────────────────────────────────────────
    _get("list_grid_connections", "List grid connections for a site",
         "/api/grid-connections", query={"siteId": "site_id"}),
    _get("get_meter_readings", "Get meter readings for a grid connection",
         "/api/meter-readings", query={"gridConnectionId": "grid_connection_id"}),

    # ── Dispatch ──────────────────────────────────────────────────────────
    _post("dispatch_command",
          "Send a dispatch command to an asset (battery, HVAC, EV charger, etc.)",
          "/api/v1/dispatch/{asset_id}/command",
          body={
              "command": "command",
              "targetKw": "target_kw",
              "durationMinutes": "duration_minutes",
          }),
    _get("dispatch_history", "Get dispatch history for an asset",
         "/api/v1/dispatch/{asset_id}/history"),

    # ── Settlements ───────────────────────────────────────────────────────
    _get("list_settlements", "List settlements for a site",
         "/api/settlements", query={"siteId": "site_id"}),
    _get("generate_settlement", "Generate a hash-chained settlement for a site",
         "/api/v1/settlements/{site_id}/generate",
         query={"periodStart": "period_start", "periodEnd": "period_end"}),
    _get("verify_settlement", "Verify a settlement's hash chain integrity",
         "/api/v1/settlements/{settlement_id}/verify"),

    # ── Carbon attestation ────────────────────────────────────────────────
    _get("get_carbon_attestation", "Get carbon attestation for a site",
         "/api/v1/settlements/{site_id}/carbon-attestation",
         demo_path="/api/v1/demo/carbon"),
    _post("create_carbon_record", "Create a carbon attestation record in the hash chain",
          "/api/v1/carbon/record",
          body={
              "meterId": "meter_id",
              "facilityId": "facility_id",
              "timestamp": "timestamp",
              "kwh": "kwh",
              "gridZone": "grid_zone",
          }),
    _get("verify_carbon_chain", "Verify the SHA-256 hash chain for a meter",
         "/api/v1/carbon/verify/{meter_id}"),
    _get("get_carbon_certificate", "Generate a carbon certificate for a facility",
         "/api/v1/carbon/certificate/{facility_id}",
         query={"start": "start", "end": "end"}),

    # ── Demand response ───────────────────────────────────────────────────
    _post("create_dr_event", "Create a demand response event",
          "/api/v1/dr/events",
          body={
              "signalType": "signal_type",
              "facilityId": "facility_id",
              "scheduledStart": "scheduled_start",
              "targetReductionKw": "target_reduction_kw",
              "durationMinutes": "duration_minutes",
          }),
    _get("list_dr_events", "List demand response events",
         "/api/v1/dr/events",
         query={"status": "status", "facility_id": "facility_id"},
         demo_path="/api/v1/demo/dr/events"),
    _get("get_dr_event", "Get details of a DR event",
         "/api/v1/dr/events/{event_id}"),
    _post("dispatch_dr_event", "Execute dispatch for a DR event",
          "/api/v1/dr/events/{event_id}/dispatch"),
    _post("settle_dr_event", "Settle a DR event with carbon attestation",
          "/api/v1/dr/events/{event_id}/settle"),

    # ── Compliance ────────────────────────────────────────────────────────
    _post("generate_compliance_package", "Generate a compliance package for a site",
          "/api/v1/comply/{site_id}/generate", body={"standard": "standard"}),
    _get("list_compliance_packages", "List compliance packages for a site",
         "/api/v1/comply/{site_id}/packages"),
    _post("generate_scope2_report", "Generate GHG Scope 2 compliance report",
          "/api/v1/comply/report",
          body={
              "facility_id": "facility_id",
              "period_start": "period_start",
              "period_end": "period_end",
              "methodology": "methodology",
          }),

    # ── Intel ─────────────────────────────────────────────────────────────
    _get("get_asset_reliability", "Get reliability score for an asset",
         "/api/v1/intel/assets/{asset_id}/score"),
    _get("get_site_reliability", "Get reliability score for a site",
         "/api/v1/intel/sites/{site_id}/score"),
    _get("get_grid_capacity", "Get grid capacity for a region",
         "/api/v1/intel/grid/{region}/capacity"),
    _get("get_grid_trends", "Get grid capacity trends for a region",
         "/api/v1/intel/grid/{region}/trends"),

    # ── Procurement ───────────────────────────────────────────────────────
    _post("create_procurement", "Create an energy procurement request",
          "/api/v1/procurement",
          body={"type": "type", "volume_kwh": "volume_kwh", "region": "region"}),
    _post("analyze_procurement", "Run analysis on a procurement request",
          "/api/v1/procurement/{id}/analyze"),
    _get("get_procurement_options", "Get procurement options",
         "/api/v1/procurement/{id}/options"),

    # ── Integrations ──────────────────────────────────────────────────────
    _get("get_integration_status",
         "Get status of all integrations (Modbus, OpenADR, BESS, grid prices)",
         "/api/v1/integrations/status"),
    _get("get_grid_prices", "Get current grid electricity prices",
         "/api/v1/integrations/grid-prices", path_tail="region"),

    # ── Sandbox ───────────────────────────────────────────────────────────
    _post("provision_sandbox", "Provision a developer sandbox environment with simulated data",
          "/api/v1/sandbox/provision"),
    _get("sandbox_status", "Check sandbox environment status and usage",
         "/api/v1/sandbox/status"),

    # ── Health ────────────────────────────────────────────────────────────
    _get("health_check", "Check platform health and connectivity", "/api/health"),
)

OPERATIONS: dict[str, Operation] = {op.name: op for op in _CATALOG}


def get_operation(name: str) -> Operation:
    """Look up an operation by tool name."""
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(f"Unknown operation: {name!r}") from None
