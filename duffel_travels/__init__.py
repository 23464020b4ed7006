"""MCP server exposing Duffel flight search and booking as tools."""

__version__ = "1.0.0"
