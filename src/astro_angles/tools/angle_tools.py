"""Angle MCP tools.

Tools for formatting, normalizing, converting, and validating angles.
Values arrive as plain numbers in degrees or hours (optionally counted in
minutes or seconds) and are handled through the Angle / AcuteAngle types.
"""

import logging
import math
from typing import Any

from mcp.types import Tool, TextContent

from ..angle import AcuteAngle, Angle
from ..format import UNIT_PRECISION_NAMES, AngleRange, AngleUnitPrecision
from ..units import AngleUnit, AngleUnitSubdivision


logger = logging.getLogger(__name__)

_UNIT_NAMES = [u.value for u in AngleUnit]
_SUBDIVISION_NAMES = [s.value for s in AngleUnitSubdivision]
_RANGE_NAMES = [r.value for r in AngleRange]

# Largest fractional digit count a tool caller may request.
MAX_PRECISION = 28


# ============================================================================
# Tool Definitions
# ============================================================================

def get_angle_tools() -> list[Tool]:
    """Return list of angle tool definitions."""
    return [
        Tool(
            name="format_angle",
            description=(
                "Render an angle as sexagesimal text, e.g. 278°09′, -23°05′09.33″ "
                "or 21ʰ41ᵐ08ˢ.\n\n"
                "The angle is normalized into the requested range before and after "
                "rounding, so values never display as 60 seconds or 360°.\n\n"
                "Omitted 'format', 'precision' and 'range' fall back to the configured defaults."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "value": {
                        "type": "number",
                        "description": "Angle value in 'input_unit'"
                    },
                    "input_unit": {
                        "type": "string",
                        "enum": _UNIT_NAMES,
                        "description": "Unit of 'value' (default: degrees)"
                    },
                    "format": {
                        "type": "string",
                        "enum": list(UNIT_PRECISION_NAMES),
                        "description": "Output unit and finest subdivision"
                    },
                    "precision": {
                        "type": "integer",
                        "minimum": 0,
                        "maximum": MAX_PRECISION,
                        "description": "Fractional digits of the finest component"
                    },
                    "range": {
                        "type": "string",
                        "enum": _RANGE_NAMES,
                        "description": (
                            "non_negative: [0°, 360°) without sign; "
                            "symmetric: (-180°, 180°] with explicit sign"
                        )
                    }
                },
                "required": ["value"]
            }
        ),
        Tool(
            name="normalize_angle",
            description=(
                "Map an angle to its rotation-equivalent value in [0°, 360°) "
                "(non_negative) or (-180°, 180°] (symmetric), expressed in the "
                "requested unit and subdivision."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "value": {
                        "type": "number",
                        "description": "Angle value in 'input_unit'"
                    },
                    "input_unit": {
                        "type": "string",
                        "enum": _UNIT_NAMES,
                        "description": "Unit of 'value' (default: degrees)"
                    },
                    "unit": {
                        "type": "string",
                        "enum": _UNIT_NAMES,
                        "description": "Output unit (default: same as input_unit)"
                    },
                    "subdivision": {
                        "type": "string",
                        "enum": _SUBDIVISION_NAMES,
                        "description": "Output subdivision (default: wholes)"
                    },
                    "range": {
                        "type": "string",
                        "enum": _RANGE_NAMES,
                        "description": "Canonical interval (default: non_negative)"
                    }
                },
                "required": ["value"]
            }
        ),
        Tool(
            name="convert_angle",
            description=(
                "Convert an angle between degrees and hours and between "
                "whole units, minutes and seconds. No normalization is applied."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "value": {
                        "type": "number",
                        "description": "Value to convert"
                    },
                    "from_unit": {"type": "string", "enum": _UNIT_NAMES},
                    "from_subdivision": {"type": "string", "enum": _SUBDIVISION_NAMES},
                    "to_unit": {"type": "string", "enum": _UNIT_NAMES},
                    "to_subdivision": {"type": "string", "enum": _SUBDIVISION_NAMES}
                },
                "required": ["value", "from_unit", "to_unit"]
            }
        ),
        Tool(
            name="check_acute_angle",
            description=(
                "Check whether a value is a valid acute angle in [-90°, 90°], "
                "such as a declination or latitude. Out-of-range values are "
                "rejected, never clamped."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "value": {
                        "type": "number",
                        "description": "Angle value in 'input_unit'"
                    },
                    "input_unit": {
                        "type": "string",
                        "enum": _UNIT_NAMES,
                        "description": "Unit of 'value' (default: degrees)"
                    }
                },
                "required": ["value"]
            }
        ),
    ]


# ============================================================================
# Argument helpers
# ============================================================================

def _error(message: str) -> list[TextContent]:
    logger.warning("Rejected angle tool call: %s", message)
    return [TextContent(type="text", text=f"Error: {message}")]


def _number(arguments: dict, key: str = "value") -> float:
    value = arguments.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number")
    try:
        value = float(value)
    except OverflowError:
        raise ValueError(f"{key} is too large")
    if not math.isfinite(value):
        raise ValueError(f"{key} must be finite")
    return value


def _unit(arguments: dict, key: str, default: str = "degrees") -> AngleUnit:
    name = arguments.get(key) or default
    try:
        return AngleUnit(str(name).strip().lower())
    except ValueError:
        raise ValueError(f"{key} must be one of: {', '.join(_UNIT_NAMES)}")


def _subdivision(arguments: dict, key: str, default: str = "wholes") -> AngleUnitSubdivision:
    name = arguments.get(key) or default
    try:
        return AngleUnitSubdivision(str(name).strip().lower())
    except ValueError:
        raise ValueError(f"{key} must be one of: {', '.join(_SUBDIVISION_NAMES)}")


# ============================================================================
# Tool Handlers
# ============================================================================

async def handle_format_angle(arguments: dict, config) -> list[TextContent]:
    """Format a value using explicit options or the configured defaults."""
    try:
        value = _number(arguments)
        input_unit = _unit(arguments, "input_unit")
        default_precision, default_range = config.get_format_defaults()

        name = arguments.get("format") or default_precision.name
        precision = arguments.get("precision")
        if precision is None:
            precision = default_precision.precision
        unit_precision = AngleUnitPrecision.from_name(name, precision)
        if unit_precision.precision > MAX_PRECISION:
            raise ValueError(f"precision must be at most {MAX_PRECISION}")

        range_name = arguments.get("range")
        angle_range = AngleRange.from_name(range_name) if range_name else default_range

        angle = Angle.from_unit(value, input_unit)
        text = angle.format_angle(unit_precision, angle_range)
    except ValueError as e:
        return _error(str(e))

    return [TextContent(type="text", text=text)]


async def handle_normalize_angle(arguments: dict, config) -> list[TextContent]:
    """Normalize a value into the requested canonical interval."""
    try:
        value = _number(arguments)
        input_unit = _unit(arguments, "input_unit")
        unit = _unit(arguments, "unit", default=input_unit.value)
        subdivision = _subdivision(arguments, "subdivision")
        angle_range = AngleRange.from_name(arguments.get("range") or "non_negative")

        angle = Angle.from_unit(value, input_unit)
        result = angle.to_unit_subdivision_normalized(unit, subdivision, angle_range.to_bound())
    except ValueError as e:
        return _error(str(e))

    return [TextContent(type="text", text=repr(result))]


async def handle_convert_angle(arguments: dict, config) -> list[TextContent]:
    """Convert a value between units and subdivisions."""
    try:
        value = _number(arguments)
        from_unit = _unit(arguments, "from_unit")
        from_subdivision = _subdivision(arguments, "from_subdivision")
        to_unit = _unit(arguments, "to_unit")
        to_subdivision = _subdivision(arguments, "to_subdivision")

        angle = Angle.from_unit_subdivision(value, from_unit, from_subdivision)
        result = angle.to_unit_subdivision(to_unit, to_subdivision)
        if not math.isfinite(result):
            raise ValueError("converted value is out of range")
    except ValueError as e:
        return _error(str(e))

    return [TextContent(type="text", text=repr(result))]


async def handle_check_acute_angle(arguments: dict, config) -> list[TextContent]:
    """Validate a value as an acute angle."""
    try:
        value = _number(arguments)
        input_unit = _unit(arguments, "input_unit")
        acute = AcuteAngle.try_from_unit(value, input_unit)
    except ValueError as e:
        return _error(str(e))

    degrees = acute.to_degrees()
    text = (
        f"✓ Valid acute angle: {degrees!r}° "
        f"({acute.format_angle(AngleUnitPrecision.degree_seconds(2), AngleRange.SYMMETRIC)})"
    )
    return [TextContent(type="text", text=text)]


# ============================================================================
# Tool name registry + dispatcher
# ============================================================================

ANGLE_TOOL_NAMES = {
    "format_angle",
    "normalize_angle",
    "convert_angle",
    "check_acute_angle",
}


async def handle_angle_tool(name: str, arguments: Any, config) -> list[TextContent]:
    """Route angle tool calls to the appropriate handler."""
    arguments = arguments or {}
    logger.debug("Angle tool call %s(%r)", name, arguments)

    if name == "format_angle":
        return await handle_format_angle(arguments, config)
    elif name == "normalize_angle":
        return await handle_normalize_angle(arguments, config)
    elif name == "convert_angle":
        return await handle_convert_angle(arguments, config)
    elif name == "check_acute_angle":
        return await handle_check_acute_angle(arguments, config)
    else:
        return [TextContent(type="text", text=f"Unknown angle tool: {name}")]
