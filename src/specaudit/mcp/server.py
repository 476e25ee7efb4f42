"""MCP server: FastMCP instance with configure helpers."""

from __future__ import annotations

from fastmcp import FastMCP

from specaudit import __version__
from specaudit.config import Settings
from specaudit.mcp.tools import register_tools

mcp = FastMCP(
    name="specaudit",
    version=__version__,
    instructions=(
        "Ambiguity scanning and cross-artifact consistency analysis "
        "for spec-kit feature folders"
    ),
)

_settings: Settings | None = None

register_tools(mcp)


def configure(settings: Settings) -> None:
    """Set the settings used by MCP tools (project root, CLI)."""
    global _settings  # noqa: PLW0603
    _settings = settings


def get_settings() -> Settings:
    """Configured settings, or fresh ones from the environment."""
    if _settings is None:
        return Settings()
    return _settings
