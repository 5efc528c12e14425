# =============================================================================
# energy_api/__init__.py
# =============================================================================
# This package is the request adapter for the EnergyAtIt REST API.
#
# ARCHITECTURAL ROLE:
#   energy_api/ turns one tool invocation into one HTTP round trip:
#     1. Settings     → base URL, credentials, proxy (resolved once)
#     2. Operation    → method + path template + query/body mapping
#     3. Client       → builds the request, sends it, unwraps the envelope
#
# Nothing in this package imports FastMCP or Google ADK.  It can be used
# from a plain asyncio script against any EnergyAtIt deployment.
# =============================================================================

__version__ = "0.2.0"

from energy_api.client import EnergyApiClient
from energy_api.config import AuthMode, Settings
from energy_api.errors import (
    EnergyApiError,
    InvalidResponse,
    RemoteError,
    TransportFailure,
)
from energy_api.operations import OPERATIONS, Operation, get_operation

__all__ = [
    "AuthMode",
    "EnergyApiClient",
    "EnergyApiError",
    "InvalidResponse",
    "OPERATIONS",
    "Operation",
    "RemoteError",
    "Settings",
    "TransportFailure",
    "get_operation",
]
