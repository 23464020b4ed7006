"""
Tool catalog and handlers for the Duffel MCP server.

``HANDLERS`` maps every ``ToolName`` to the coroutine that serves it;
``build_server`` pairs it with the catalog descriptors.
"""

from typing import Dict, Optional

from .catalog import TOOLS, ToolName, list_tools
from .flights import flight_offer_request, flight_offers, validate_or_price_offer, list_services_and_seatmaps
from .orders import create_order, pay_for_order, get_order_status
from ..api.client import DuffelClient
from ..mcp.mcp_server import MCPServer, ToolHandler

HANDLERS: Dict[ToolName, ToolHandler] = {
    ToolName.FLIGHT_OFFER_REQUEST: flight_offer_request,
    ToolName.FLIGHT_OFFERS: flight_offers,
    ToolName.VALIDATE_OR_PRICE_OFFER: validate_or_price_offer,
    ToolName.LIST_SERVICES_AND_SEATMAPS: list_services_and_seatmaps,
    ToolName.CREATE_ORDER: create_order,
    ToolName.PAY_FOR_ORDER: pay_for_order,
    ToolName.GET_ORDER_STATUS: get_order_status,
}


def build_server(api_key: Optional[str], client: Optional[DuffelClient] = None) -> MCPServer:
    """Create an MCPServer with every catalog tool registered."""
    missing = set(ToolName) - set(HANDLERS)
    if missing:
        raise RuntimeError(f"No handler for tools: {', '.join(sorted(t.value for t in missing))}")

    server = MCPServer(api_key, client)
    for tool in TOOLS:
        server.register_tool(tool, HANDLERS[ToolName(tool.name)])
    return server
