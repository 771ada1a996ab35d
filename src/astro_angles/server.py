"""MCP server for astro-angles."""

import asyncio
import logging
import sys
from typing import Any, Optional

from mcp.server import Server
from mcp.types import Tool, TextContent

from .config import ConfigManager
from .tools import get_angle_tools, handle_angle_tool, ANGLE_TOOL_NAMES


logger = logging.getLogger(__name__)

# Initialize MCP server
app = Server("astro-angles")

# Global state
config: Optional[ConfigManager] = None


def init_config() -> ConfigManager:
    """Initialize the config manager (lazy singleton)."""
    global config
    if config is None:
        config = ConfigManager()
    return config


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available angle tools."""
    return get_angle_tools()


@app.call_tool()
async def call_tool(name: str, arguments: Any) -> list[TextContent]:
    """Handle tool calls."""
    if name in ANGLE_TOOL_NAMES:
        return await handle_angle_tool(name, arguments, init_config())

    logger.warning("Unknown tool requested: %s", name)
    return [TextContent(type="text", text=f"Unknown tool: {name}")]


async def main():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def run():
    """Sync entry point for the console script.

    Logs go to stderr; stdout carries the MCP stdio stream.
    """
    cfg = init_config()
    logging.basicConfig(
        stream=sys.stderr,
        level=cfg.get_log_level_value(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting astro-angles MCP server (config: %s)", cfg.config_path)
    asyncio.run(main())


if __name__ == "__main__":
    run()
