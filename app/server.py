"""
MCP transport adapter: exposes every registry entry as a FastMCP tool.
Handlers answer with the text envelope's content items; there is no structured output
and no isError flag, callers read success or failure from the text.
"""
import functools
import logging
from typing import Mapping

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from app.config import Settings
from tools.base import ToolDefinition, text_envelope

logger = logging.getLogger(__name__)


def _as_mcp_tool(definition: ToolDefinition):
    """Wrap a registry handler so FastMCP sees its signature but receives TextContent items."""

    @functools.wraps(definition.handler)
    async def call(**arguments) -> list[TextContent]:
        logger.info("Tool call: %s", definition.name)
        text = await definition.handler(**arguments)
        envelope = text_envelope(text)
        return [TextContent(**item) for item in envelope["content"]]

    return call


def build_server(registry: Mapping[str, ToolDefinition], settings: Settings) -> FastMCP:
    """Create the FastMCP server and register all tools from the registry."""
    server = FastMCP(settings.server_name)
    for definition in registry.values():
        server.add_tool(
            _as_mcp_tool(definition),
            name=definition.name,
            description=definition.description,
            structured_output=False,
        )
        logger.debug("Registered tool %s", definition.name)
    return server
