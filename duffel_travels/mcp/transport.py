import logging
from typing import List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .mcp_server import MCPServer
from .protocol import CallToolResult

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-duffel-travels"
SERVER_VERSION = "1.0.0"


def to_sdk_result(result: CallToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=item["text"]) for item in result.content],
        isError=result.isError,
    )


def create_app(server: MCPServer) -> Server:
    """Expose an MCPServer through the MCP SDK's request handlers."""
    app = Server(SERVER_NAME, version=SERVER_VERSION)

    @app.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return [types.Tool(**tool) for tool in server.list_tools()]

    # Registered directly rather than via @app.call_tool(): the SDK decorator
    # substitutes {} for absent arguments and validates against the schema
    # before the dispatcher's own checks run.
    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await server.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(to_sdk_result(result))

    app.request_handlers[types.CallToolRequest] = handle_call_tool
    return app


async def serve(server: MCPServer):
    """Serve tools/list and tools/call over stdio until the host closes the stream."""
    app = create_app(server)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Duffel MCP Server running on stdio")
        await app.run(read_stream, write_stream, app.create_initialization_options())
