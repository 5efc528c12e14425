# =============================================================================
# energy_mcp/tools.py  —  MCP Tools (one per catalog operation)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers every EnergyAtIt operation as a FastMCP tool.  Each tool:
#     1. Declares its typed parameters (FastMCP turns them into the JSON
#        schema, so malformed calls are rejected before any HTTP happens)
#     2. Hands its arguments to invoke() with the operation name
#     3. Returns the platform payload as pretty-printed JSON text
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name (e.g., "get_site" with site_id=42)
#   2. FastMCP validates the arguments against the signature below
#   3. invoke() looks up the Operation and asks EnergyApiClient to run it
#   4. Success → JSON text.  Any EnergyApiError → ToolError("Error: ...")
#      which FastMCP returns as a result flagged isError.
#
# The method, path and key mapping for each tool live in
# energy_api/operations.py.  Tool descriptions come from there too, so
# the catalog is the single source of truth.
# =============================================================================

import json
from typing import Annotated, Any, Callable, Literal, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from energy_api import EnergyApiClient, EnergyApiError, get_operation
from energy_mcp.logs import log_request, log_response, log_status

SiteId = Annotated[int, Field(description="Site ID")]
AssetId = Annotated[int, Field(description="Asset ID")]
EventId = Annotated[str, Field(description="Event UUID")]
FacilityId = Annotated[str, Field(description="Facility UUID")]
ProcurementId = Annotated[int, Field(description="Procurement request ID")]


def register_tools(mcp: FastMCP, api: EnergyApiClient) -> None:
    """Attach every catalog tool to ``mcp``, bound to ``api``."""

    async def invoke(name: str, **arguments: Any) -> str:
        log_request(name, **arguments)
        try:
            result = await api.call(get_operation(name), arguments)
        except EnergyApiError as exc:
            log_status(f"{name} failed: {exc}")
            raise ToolError(f"Error: {exc}") from exc
        log_response(name, result)
        return json.dumps(result, indent=2, ensure_ascii=False)

    def tool(fn: Callable[..., Any]) -> Callable[..., Any]:
        operation = get_operation(fn.__name__)
        return mcp.tool(name=operation.name, description=operation.description)(fn)

    # ── Sites ─────────────────────────────────────────────────────────────
    @tool
    async def list_sites() -> str:
        return await invoke("list_sites")

    @tool
    async def get_site(site_id: SiteId) -> str:
        return await invoke("get_site", site_id=site_id)

    # ── Assets ────────────────────────────────────────────────────────────
    @tool
    async def list_assets(
        site_id: Annotated[Optional[int], Field(description="Optional site ID filter")] = None,
    ) -> str:
        return await invoke("list_assets", site_id=site_id)

    # ── Grid connections & meters ─────────────────────────────────────────
    @tool
    async def list_grid_connections(site_id: SiteId) -> str:
        return await invoke("list_grid_connections", site_id=site_id)

    @tool
    async def get_meter_readings(
        grid_connection_id: Annotated[int, Field(description="Grid connection ID")],
    ) -> str:
        return await invoke("get_meter_readings", grid_connection_id=grid_connection_id)

    # ── Dispatch ──────────────────────────────────────────────────────────
    @tool
    async def dispatch_command(
        asset_id: AssetId,
        command: Annotated[str, Field(
            description="Command: charge, discharge, reduce, curtail, shed_load, restore")],
        target_kw: Annotated[Optional[float], Field(description="Target power in kW")] = None,
        duration_minutes: Annotated[Optional[int], Field(description="Duration in minutes")] = None,
    ) -> str:
        return await invoke(
            "dispatch_command",
            asset_id=asset_id,
            command=command,
            target_kw=target_kw,
            duration_minutes=duration_minutes,
        )

    @tool
    async def dispatch_history(asset_id: AssetId) -> str:
        return await invoke("dispatch_history", asset_id=asset_id)

    # ── Settlements ───────────────────────────────────────────────────────
    @tool
    async def list_settlements(
        site_id: Annotated[Optional[int], Field(description="Optional site ID filter")] = None,
    ) -> str:
        return await invoke("list_settlements", site_id=site_id)

    @tool
    async def generate_settlement(
        site_id: SiteId,
        period_start: Annotated[str, Field(description="Period start (ISO date)")],
        period_end: Annotated[str, Field(description="Period end (ISO date)")],
    ) -> str:
        return await invoke(
            "generate_settlement",
            site_id=site_id,
            period_start=period_start,
            period_end=period_end,
        )

    @tool
    async def verify_settlement(
        settlement_id: Annotated[int, Field(description="Settlement ID")],
    ) -> str:
        return await invoke("verify_settlement", settlement_id=settlement_id)

    # ── Carbon attestation ────────────────────────────────────────────────
    @tool
    async def get_carbon_attestation(site_id: SiteId) -> str:
        return await invoke("get_carbon_attestation", site_id=site_id)

    @tool
    async def create_carbon_record(
        meter_id: Annotated[str, Field(description="Meter ID")],
        facility_id: FacilityId,
        timestamp: Annotated[str, Field(description="ISO timestamp")],
        kwh: Annotated[float, Field(description="Energy in kWh")],
        grid_zone: Annotated[Optional[str], Field(description="Grid zone")] = None,
    ) -> str:
        return await invoke(
            "create_carbon_record",
            meter_id=meter_id,
            facility_id=facility_id,
            timestamp=timestamp,
            kwh=kwh,
            grid_zone=grid_zone,
        )

    @tool
    async def verify_carbon_chain(
        meter_id: Annotated[str, Field(description="Meter ID")],
    ) -> str:
        return await invoke("verify_carbon_chain", meter_id=meter_id)

    @tool
    async def get_carbon_certificate(
        facility_id: FacilityId,
        start: Annotated[str, Field(description="Period start (ISO date)")],
        end: Annotated[str, Field(description="Period end (ISO date)")],
    ) -> str:
        return await invoke("get_carbon_certificate", facility_id=facility_id, start=start, end=end)

    # ── Demand response ───────────────────────────────────────────────────
    @tool
    async def create_dr_event(
        signal_type: Annotated[str, Field(description="Signal type: shed, shift, shimmy")],
        facility_id: FacilityId,
        scheduled_start: Annotated[str, Field(description="Start time (ISO)")],
        target_reduction_kw: Annotated[
            Optional[float], Field(description="Target reduction in kW")] = None,
        duration_minutes: Annotated[Optional[int], Field(description="Duration in minutes")] = None,
    ) -> str:
        return await invoke(
            "create_dr_event",
            signal_type=signal_type,
            facility_id=facility_id,
            scheduled_start=scheduled_start,
            target_reduction_kw=target_reduction_kw,
            duration_minutes=duration_minutes,
        )

    @tool
    async def list_dr_events(
        status: Annotated[Optional[str], Field(description="Filter by status")] = None,
        facility_id: Annotated[Optional[str], Field(description="Filter by facility")] = None,
    ) -> str:
        return await invoke("list_dr_events", status=status, facility_id=facility_id)

    @tool
    async def get_dr_event(event_id: EventId) -> str:
        return await invoke("get_dr_event", event_id=event_id)

    @tool
    async def dispatch_dr_event(event_id: EventId) -> str:
        return await invoke("dispatch_dr_event", event_id=event_id)

    @tool
    async def settle_dr_event(event_id: EventId) -> str:
        return await invoke("settle_dr_event", event_id=event_id)

    # ── Compliance ────────────────────────────────────────────────────────
    @tool
    async def generate_compliance_package(
        site_id: SiteId,
        standard: Annotated[
            Optional[str], Field(description="Standard: IEC61850, ISO50001, GHG_Scope2")] = None,
    ) -> str:
        return await invoke("generate_compliance_package", site_id=site_id, standard=standard)

    @tool
    async def list_compliance_packages(site_id: SiteId) -> str:
        return await invoke("list_compliance_packages", site_id=site_id)

    @tool
    async def generate_scope2_report(
        facility_id: FacilityId,
        period_start: Annotated[str, Field(description="Period start")],
        period_end: Annotated[str, Field(description="Period end")],
        methodology: Annotated[
            Optional[Literal["location-based", "market-based", "dual"]],
            Field(description="Scope 2 accounting methodology"),
        ] = None,
    ) -> str:
        return await invoke(
            "generate_scope2_report",
            facility_id=facility_id,
            period_start=period_start,
            period_end=period_end,
            methodology=methodology,
        )

    # ── Intel ─────────────────────────────────────────────────────────────
    @tool
    async def get_asset_reliability(asset_id: AssetId) -> str:
        return await invoke("get_asset_reliability", asset_id=asset_id)

    @tool
    async def get_site_reliability(site_id: SiteId) -> str:
        return await invoke("get_site_reliability", site_id=site_id)

    @tool
    async def get_grid_capacity(
        region: Annotated[str, Field(description="Region code (e.g. AE-DXB, PH-LUZ)")],
    ) -> str:
        return await invoke("get_grid_capacity", region=region)

    @tool
    async def get_grid_trends(
        region: Annotated[str, Field(description="Region code")],
    ) -> str:
        return await invoke("get_grid_trends", region=region)

    # ── Procurement ───────────────────────────────────────────────────────
    @tool
    async def create_procurement(
        type: Annotated[str, Field(description="Type: ppa, rec, carbon_offset")],
        volume_kwh: Annotated[float, Field(description="Volume in kWh")],
        region: Annotated[Optional[str], Field(description="Region")] = None,
    ) -> str:
        return await invoke("create_procurement", type=type, volume_kwh=volume_kwh, region=region)

    @tool
    async def analyze_procurement(id: ProcurementId) -> str:
        return await invoke("analyze_procurement", id=id)

    @tool
    async def get_procurement_options(id: ProcurementId) -> str:
        return await invoke("get_procurement_options", id=id)

    # ── Integrations ──────────────────────────────────────────────────────
    @tool
    async def get_integration_status() -> str:
        return await invoke("get_integration_status")

    @tool
    async def get_grid_prices(
        region: Annotated[Optional[str], Field(description="Region code")] = None,
    ) -> str:
        return await invoke("get_grid_prices", region=region)

    # ── Sandbox ───────────────────────────────────────────────────────────
    @tool
    async def provision_sandbox() -> str:
        return await invoke("provision_sandbox")

    @tool
    async def sandbox_status() -> str:
        return await invoke("sandbox_status")

    # ── Health ────────────────────────────────────────────────────────────
    @tool
    async def health_check() -> str:
        return await invoke("health_check")
