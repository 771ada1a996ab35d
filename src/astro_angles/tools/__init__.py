"""Angle tools for MCP server."""

from .angle_tools import (
    get_angle_tools,
    handle_angle_tool,
    ANGLE_TOOL_NAMES
)

__all__ = [
    'get_angle_tools',
    'handle_angle_tool',
    'ANGLE_TOOL_NAMES'
]
