"""The static platform-overview resource."""

from fastmcp import FastMCP

from energy_api import Settings

OVERVIEW_URI = "energyatit://overview"

CAPABILITIES = (
    "Sites & Assets: Manage energy sites, assets (BESS, HVAC, Solar, EV chargers)",
    "Dispatch: Send commands to batteries, HVAC, EV chargers",
    "Carbon Attestation: SHA-256 hash-chained carbon records with certificates",
    "Demand Response: Create, dispatch, measure, and settle DR events",
    "Settlements: Generate and verify hash-chained energy settlements",
    "Compliance: Generate IEC 61850, ISO 50001, GHG Scope 2 packages",
    "Intel: Reliability scores, grid capacity, load forecasting",
    "Procurement: PPA, REC, and carbon offset procurement",
    "Integrations: Modbus, OpenADR 2.0b, OCPP 2.0, IEC 61850",
)


def platform_overview(settings: Settings) -> str:
    """Plain-text capability summary with the connection details filled in."""
    lines = ["EnergyAtIt — Energy Infrastructure Platform", "", "Capabilities:"]
    lines += [f"  - {item}" for item in CAPABILITIES]
    lines += [
        "",
        f"Connected to: {settings.base_url}",
        f"Auth: {settings.describe_auth()}",
    ]
    return "\n".join(lines)


def register_resources(mcp: FastMCP, settings: Settings) -> None:
    text = platform_overview(settings)

    @mcp.resource(OVERVIEW_URI, name="platform-overview", mime_type="text/plain")
    def overview() -> str:
        return text
