# =============================================================================
# energy_mcp/logs.py  —  Diagnostics on STDERR
# =============================================================================
# The MCP stdio transport owns STDOUT.  Every log line goes to STDERR so it
# never mixes with the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + arguments)
#     - GREEN for responses (compact JSON, truncated)
#     - YELLOW for status and failures
# =============================================================================

import json
import logging
import sys
from typing import Any

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

# Long payloads (meter readings, settlement lists) are cut in the log only;
# the agent always receives the full result.
_MAX_LOGGED_CHARS = 500

logger = logging.getLogger("energy_mcp")


def configure_logging(level: str = "INFO") -> None:
    """Send all log records to STDERR with the server's format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def log_request(tool_name: str, **params: Any) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status or failure message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def log_response(tool_name: str, result: Any) -> None:
    """Log the tool payload as compact JSON in GREEN."""
    compact = json.dumps(result, separators=(",", ":"), default=str)
    if len(compact) > _MAX_LOGGED_CHARS:
        compact = compact[:_MAX_LOGGED_CHARS] + "…"
    logger.info(f"{_GREEN}  ← {tool_name} response: {compact}{_RESET}")
