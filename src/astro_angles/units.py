"""Angle units and their sexagesimal subdivisions."""

from enum import Enum

from .constants import PARTS_IN_UNIT, SUBDIVISION_SYMBOLS, UNITS_IN_ROTATION


class AngleUnitSubdivision(Enum):
    """Sexagesimal refinement level: whole unit, minute or second."""

    WHOLES = "wholes"
    MINUTES = "minutes"
    SECONDS = "seconds"

    def parts_in_unit(self) -> int:
        """Number of parts of this level in one base unit (1, 60 or 3600)."""
        return PARTS_IN_UNIT[self.value]


class AngleUnit(Enum):
    """Base unit of an angle: degrees, or hours of right ascension."""

    DEGREES = "degrees"
    HOURS = "hours"

    def units_in_rotation(self) -> int:
        """Number of base units in a full rotation (360 or 24)."""
        return UNITS_IN_ROTATION[self.value]

    def parts_in_rotation(self, subdivision: AngleUnitSubdivision) -> int:
        """Number of subdivision parts in a full rotation.

        Example:
            AngleUnit.DEGREES.parts_in_rotation(AngleUnitSubdivision.SECONDS) -> 1296000
        """
        return subdivision.parts_in_unit() * self.units_in_rotation()

    def subdivision_unit_symbols(self) -> tuple[str, str, str]:
        """Symbols for the (whole, minute, second) levels, e.g. ('°', '′', '″')."""
        return SUBDIVISION_SYMBOLS[self.value]
