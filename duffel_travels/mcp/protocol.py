from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict

# MCP Specific Structures

class Tool(BaseModel):
    """A tool descriptor as advertised by tools/list."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    inputSchema: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

class CallToolResult(BaseModel):
    content: List[Dict[str, Any]]
    isError: bool = False

    @property
    def text(self) -> str:
        return "".join(item.get("text", "") for item in self.content)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

# Helpers to build results
def text_result(text: str) -> CallToolResult:
    return CallToolResult(content=[{"type": "text", "text": text}], isError=False)

def error_result(text: str) -> CallToolResult:
    return CallToolResult(content=[{"type": "text", "text": text}], isError=True)
