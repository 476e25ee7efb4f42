"""MCP server exposing scan, answer, analyze and check as tools."""

from specaudit.mcp.server import configure, get_settings, mcp

__all__ = ["configure", "get_settings", "mcp"]
