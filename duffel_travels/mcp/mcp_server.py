import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from pydantic import ValidationError

from .protocol import Tool, CallToolResult, text_result, error_result
from ..api.client import DuffelAPIError, DuffelClient

logger = logging.getLogger(__name__)

ToolHandler = Callable[[DuffelClient, Dict[str, Any]], Awaitable[Any]]

MISSING_API_KEY_MESSAGE = (
    "Error: DUFFEL_API_KEY environment variable is not set. Please set it before using this server."
)
MISSING_ARGUMENTS_MESSAGE = "Error: Missing arguments for tool call."


class MCPServer:
    """Hosts the Duffel tools: keeps the registry and dispatches calls to handlers."""

    def __init__(self, api_key: Optional[str], client: Optional[DuffelClient] = None):
        self.api_key = api_key
        if client is None and api_key:
            client = DuffelClient(api_key)
        self.client = client
        self.tools: Dict[str, ToolHandler] = {}
        self.tool_definitions: List[Tool] = []

    def register_tool(self, tool: Tool, handler: ToolHandler):
        """Register a handler under the descriptor's name."""
        if tool.name in self.tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self.tools[tool.name] = handler
        self.tool_definitions.append(tool)

    def list_tools(self) -> List[Dict[str, Any]]:
        return [tool.to_dict() for tool in self.tool_definitions]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        """
        Run a tool and wrap its outcome as a CallToolResult.

        Never raises: configuration problems, bad input, unknown names and
        provider failures all come back as results.
        """
        if not self.api_key:
            logger.warning(f"Tool {name} called without DUFFEL_API_KEY configured")
            return text_result(MISSING_API_KEY_MESSAGE)

        if arguments is None:
            return error_result(MISSING_ARGUMENTS_MESSAGE)

        if name not in self.tools:
            logger.warning(f"Unknown tool requested: {name}")
            return error_result(f"Unknown tool: {name}")

        logger.info(f"Calling tool {name}", extra={"tool": name})
        try:
            payload = await self.tools[name](self.client, arguments)
        except DuffelAPIError as e:
            logger.warning(f"Duffel API error in {name} ({e.status_code}): {e.message}", extra={"tool": name})
            return _failure(e.message, e.errors)
        except ValidationError as e:
            logger.warning(f"Validation failed in {name}: {e.error_count()} error(s)", extra={"tool": name})
            return _failure(str(e), e.errors(include_url=False, include_context=False))
        except Exception as e:
            logger.exception(f"Error executing tool {name}: {e}", extra={"tool": name})
            return _failure(str(e) or type(e).__name__, {"type": type(e).__name__})

        return text_result(json.dumps(payload, indent=2, ensure_ascii=False))


def _failure(message: str, details: Any) -> CallToolResult:
    return error_result(f"Error: {message}\n\nDetails: {json.dumps(details, indent=2, ensure_ascii=False, default=str)}")
