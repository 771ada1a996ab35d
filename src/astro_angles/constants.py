"""Shared constants for astro-angles.

Centralizes the sexagesimal lookup tables used by the unit model and the
formatter, so they are defined once and imported wherever needed.
"""

# Right ascension: 24ʰ make a full rotation, so one hour is 15°.
DEGREES_PER_HOUR: int = 15

# Each subdivision level is 60× finer than the previous one.
SEXAGESIMAL_BASE: int = 60

# Base units per full rotation, keyed by AngleUnit value.
UNITS_IN_ROTATION: dict[str, int] = {
    "degrees": 360,
    "hours":   24,
}

# Parts per base unit, keyed by AngleUnitSubdivision value.
PARTS_IN_UNIT: dict[str, int] = {
    "wholes":  1,
    "minutes": SEXAGESIMAL_BASE,
    "seconds": SEXAGESIMAL_BASE * SEXAGESIMAL_BASE,
}

# Display symbols for the (whole, minute, second) levels of each unit.
SUBDIVISION_SYMBOLS: dict[str, tuple[str, str, str]] = {
    "degrees": ("°", "′", "″"),
    "hours":   ("ʰ", "ᵐ", "ˢ"),
}
