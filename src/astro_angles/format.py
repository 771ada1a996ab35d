"""Sexagesimal text rendering for angles.

The pipeline runs in a fixed order:

    1. normalize into the canonical interval in float arithmetic
    2. convert the normalized float to Decimal
    3. round half away from zero to the requested precision
    4. normalize the rounded Decimal again
    5. split into whole / minute / second components and render

Step 4 exists because rounding can push a value onto the open edge of the
interval: 359.999° rounds to 360.00°, which must wrap back to 0.00°.

Examples:
    format_angle(Angle.from_degrees(638.1523),
                 AngleUnitPrecision.degree_minutes(0),
                 AngleRange.NON_NEGATIVE)                  -> "278°09′"
    format_angle(Angle.from_degrees(-23.085925),
                 AngleUnitPrecision.degree_seconds(2),
                 AngleRange.SYMMETRIC)                     -> "-23°05′09.33″"
    format_angle(Angle.from_hours(21.685442),
                 AngleUnitPrecision.hour_seconds(0),
                 AngleRange.NON_NEGATIVE)                  -> "21ʰ41ᵐ08ˢ"
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum

from .angle import Angle, AngleBound, AngleInto, LowerInclusive, UpperInclusive
from .constants import SEXAGESIMAL_BASE
from .units import AngleUnit, AngleUnitSubdivision


# Significant digits needed for the integer part of any normalized value
# (at most 1 296 000 arcseconds) plus headroom for the float's repr.
_INTEGER_DIGITS = 24


class AngleRange(Enum):
    """Canonical interval used when formatting."""

    NON_NEGATIVE = "non_negative"   # [0°, 360°)
    SYMMETRIC = "symmetric"         # (-180°, 180°]

    def to_bound(self) -> AngleBound:
        if self is AngleRange.NON_NEGATIVE:
            return LowerInclusive(Angle.ZERO)
        return UpperInclusive(Angle.HALF_ROTATION)

    @classmethod
    def from_name(cls, name: str) -> AngleRange:
        """Look up a range by name ('non_negative' or 'symmetric')."""
        try:
            return cls(name.strip().lower().replace("-", "_"))
        except (ValueError, AttributeError):
            valid = ", ".join(r.value for r in cls)
            raise ValueError(f"Unknown angle range: {name!r}. Expected one of: {valid}")


# Named unit + subdivision combinations accepted by AngleUnitPrecision.from_name().
UNIT_PRECISION_NAMES: dict[str, tuple[AngleUnit, AngleUnitSubdivision]] = {
    "degrees":        (AngleUnit.DEGREES, AngleUnitSubdivision.WHOLES),
    "degree_minutes": (AngleUnit.DEGREES, AngleUnitSubdivision.MINUTES),
    "degree_seconds": (AngleUnit.DEGREES, AngleUnitSubdivision.SECONDS),
    "hours":          (AngleUnit.HOURS,   AngleUnitSubdivision.WHOLES),
    "hour_minutes":   (AngleUnit.HOURS,   AngleUnitSubdivision.MINUTES),
    "hour_seconds":   (AngleUnit.HOURS,   AngleUnitSubdivision.SECONDS),
}


@dataclass(frozen=True)
class AngleUnitPrecision:
    """Finest displayed unit + subdivision and its number of fractional digits."""

    unit: AngleUnit
    subdivision: AngleUnitSubdivision
    precision: int

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"Precision must be an integer, got {self.precision!r}")
        if self.precision < 0:
            raise ValueError(f"Precision must be non-negative, got {self.precision}")

    @classmethod
    def degrees(cls, precision: int) -> AngleUnitPrecision:
        return cls(AngleUnit.DEGREES, AngleUnitSubdivision.WHOLES, precision)

    @classmethod
    def degree_minutes(cls, precision: int) -> AngleUnitPrecision:
        return cls(AngleUnit.DEGREES, AngleUnitSubdivision.MINUTES, precision)

    @classmethod
    def degree_seconds(cls, precision: int) -> AngleUnitPrecision:
        return cls(AngleUnit.DEGREES, AngleUnitSubdivision.SECONDS, precision)

    @classmethod
    def hours(cls, precision: int) -> AngleUnitPrecision:
        return cls(AngleUnit.HOURS, AngleUnitSubdivision.WHOLES, precision)

    @classmethod
    def hour_minutes(cls, precision: int) -> AngleUnitPrecision:
        return cls(AngleUnit.HOURS, AngleUnitSubdivision.MINUTES, precision)

    @classmethod
    def hour_seconds(cls, precision: int) -> AngleUnitPrecision:
        return cls(AngleUnit.HOURS, AngleUnitSubdivision.SECONDS, precision)

    @classmethod
    def from_name(cls, name: str, precision: int) -> AngleUnitPrecision:
        """Build from one of the names in UNIT_PRECISION_NAMES, e.g. 'hour_seconds'."""
        key = name.strip().lower().replace("-", "_") if isinstance(name, str) else name
        if key not in UNIT_PRECISION_NAMES:
            valid = ", ".join(UNIT_PRECISION_NAMES)
            raise ValueError(f"Unknown angle format: {name!r}. Expected one of: {valid}")
        unit, subdivision = UNIT_PRECISION_NAMES[key]
        return cls(unit, subdivision, precision)

    @property
    def name(self) -> str:
        return next(
            name for name, pair in UNIT_PRECISION_NAMES.items()
            if pair == (self.unit, self.subdivision)
        )

    def as_tuple(self) -> tuple[AngleUnit, AngleUnitSubdivision, int]:
        return self.unit, self.subdivision, self.precision


def _reduce(difference: Decimal, rotation: Decimal) -> Decimal:
    # Decimal % truncates toward zero like math.fmod; fold into [0, rotation).
    return (difference % rotation + rotation) % rotation


def _renormalize(value: Decimal, rotation: Decimal, angle_range: AngleRange) -> Decimal:
    if angle_range is AngleRange.NON_NEGATIVE:
        return _reduce(value, rotation)
    upper_bound = rotation / 2
    return upper_bound - _reduce(upper_bound - value, rotation)


def format_angle(
    angle: AngleInto,
    unit_precision: AngleUnitPrecision,
    angle_range: AngleRange,
) -> str:
    """Render an angle as fixed-width sexagesimal text.

    Args:
        angle: Any angle-like value (Angle, AcuteAngle, ...).
        unit_precision: Unit, finest subdivision and fractional digits.
        angle_range: NON_NEGATIVE renders without a sign glyph;
            SYMMETRIC always prefixes the outermost component with + or -.

    Returns:
        Text such as "278°09′", "-81°50.86′", "+7.735ʰ" or "21ʰ41ᵐ08ˢ".

    Raises:
        ValueError: If the angle is not finite.
    """
    unit, subdivision, precision = unit_precision.as_tuple()

    # Normalize before rounding; rounding first can cross the interval edge.
    angle_float = Angle.from_degrees(angle.to_degrees()).to_unit_subdivision_normalized(
        unit, subdivision, angle_range.to_bound()
    )
    if not math.isfinite(angle_float):
        raise ValueError(f"Cannot format a non-finite angle: {angle.to_degrees()!r}")

    with localcontext() as ctx:
        ctx.prec = _INTEGER_DIGITS + precision
        ctx.rounding = ROUND_HALF_UP

        # repr() gives the shortest decimal that round-trips to the same float
        angle_rounded = Decimal(repr(angle_float)).quantize(
            Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP
        )
        rotation = Decimal(unit.parts_in_rotation(subdivision))
        value = _renormalize(angle_rounded, rotation, angle_range)

        return _render(value, unit, subdivision, precision, angle_range)


def _render(
    value: Decimal,
    unit: AngleUnit,
    subdivision: AngleUnitSubdivision,
    precision: int,
    angle_range: AngleRange,
) -> str:
    """Split a rounded, normalized value into components and lay them out."""
    w_sym, m_sym, s_sym = unit.subdivision_unit_symbols()
    sign = "+" if angle_range is AngleRange.SYMMETRIC else ""
    sub_width = 2 + (precision + 1 if precision > 0 else 0)
    base = Decimal(SEXAGESIMAL_BASE)

    if subdivision is AngleUnitSubdivision.WHOLES:
        return f"{value:{sign}.{precision}f}{w_sym}"

    if subdivision is AngleUnitSubdivision.MINUTES:
        # Decimal // truncates toward zero and keeps the sign, so -0.5′ gives -0
        wholes = value // base
        minutes = abs(value % base)
        return (
            f"{wholes:{sign}.0f}{w_sym}"
            f"{minutes:0{sub_width}.{precision}f}{m_sym}"
        )

    wholes = value // (base * base)
    minutes = (abs(value) // base) % base
    seconds = abs(value) % base
    return (
        f"{wholes:{sign}.0f}{w_sym}"
        f"{minutes:02.0f}{m_sym}"
        f"{seconds:0{sub_width}.{precision}f}{s_sym}"
    )
