"""Angle value types and the conversions shared by every angle-like type.

An angle-like type supplies exactly one primitive per direction:

    from_degrees() / try_from_degrees()   construct from a degree value
    to_degrees()                          read the value in degrees

Every other conversion (hours, arbitrary unit, unit + subdivision, range
normalization) is derived from those primitives in the mixins below and
marked final, so conversions stay mutually consistent by construction.

Usage:
    a = Angle.from_hours(21.685442)
    a.to_degrees()                    # 325.28163
    a.to_degrees_symmetric()          # -34.71837
    a.format_angle(AngleUnitPrecision.hour_seconds(0), AngleRange.NON_NEGATIVE)
                                      # '21ʰ41ᵐ08ˢ'

    AcuteAngle.try_from_degrees(45.0)   # ok
    AcuteAngle.try_from_degrees(91.0)   # raises AcuteAngleError
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, final

from .constants import DEGREES_PER_HOUR
from .units import AngleUnit, AngleUnitSubdivision

if TYPE_CHECKING:
    from .format import AngleRange, AngleUnitPrecision


class AngleDomainError(ValueError):
    """Raised when a value lies outside the range allowed by an angle type."""
    pass


class AcuteAngleError(AngleDomainError):
    """Raised when an acute angle is built from a value outside [-90°, 90°]."""

    def __init__(self, message: str = "value outside the allowed range [-90°, 90°]"):
        super().__init__(message)


# ============================================================================
# Bounds
# ============================================================================

@dataclass(frozen=True)
class AngleBound:
    """Anchor of a canonical interval one rotation wide."""

    angle: AngleInto


@dataclass(frozen=True)
class LowerInclusive(AngleBound):
    """Interval [anchor, anchor + rotation)."""


@dataclass(frozen=True)
class UpperInclusive(AngleBound):
    """Interval (anchor - rotation, anchor]."""


def _reduce(difference: float, rotation: float) -> float:
    # fmod keeps the dividend's sign, so fold once more into [0, rotation).
    return math.fmod(math.fmod(difference, rotation) + rotation, rotation)


# ============================================================================
# Capability mixins
# ============================================================================

class AngleFrom(ABC):
    """Infallible construction from degrees, plus the derived constructors."""

    @classmethod
    @abstractmethod
    def from_degrees(cls, degrees: float):
        """Build an instance from a value in degrees."""

    @final
    @classmethod
    def from_hours(cls, hours: float):
        return cls.from_degrees(DEGREES_PER_HOUR * hours)

    @final
    @classmethod
    def from_unit(cls, value: float, unit: AngleUnit):
        if unit is AngleUnit.DEGREES:
            return cls.from_degrees(value)
        if unit is AngleUnit.HOURS:
            return cls.from_hours(value)
        raise ValueError(f"Unknown angle unit: {unit!r}")

    @final
    @classmethod
    def from_unit_subdivision(
        cls, value: float, unit: AngleUnit, subdivision: AngleUnitSubdivision
    ):
        """Build from a count of subdivision parts, e.g. 90 arcminutes -> 1.5°."""
        return cls.from_unit(value / subdivision.parts_in_unit(), unit)


class AngleTryFrom(ABC):
    """Fallible construction for range-restricted angle types.

    Only try_from_degrees() checks the range. The derived constructors
    convert their input to degrees and let its AngleDomainError propagate.
    """

    @classmethod
    @abstractmethod
    def try_from_degrees(cls, degrees: float):
        """Build an instance from degrees.

        Raises:
            AngleDomainError: If the value is outside the type's range.
        """

    @final
    @classmethod
    def try_from_hours(cls, hours: float):
        return cls.try_from_degrees(DEGREES_PER_HOUR * hours)

    @final
    @classmethod
    def try_from_unit(cls, value: float, unit: AngleUnit):
        if unit is AngleUnit.DEGREES:
            return cls.try_from_degrees(value)
        if unit is AngleUnit.HOURS:
            return cls.try_from_hours(value)
        raise ValueError(f"Unknown angle unit: {unit!r}")

    @final
    @classmethod
    def try_from_unit_subdivision(
        cls, value: float, unit: AngleUnit, subdivision: AngleUnitSubdivision
    ):
        return cls.try_from_unit(value / subdivision.parts_in_unit(), unit)


class AngleInto(ABC):
    """Reading an angle in any unit, derived from to_degrees()."""

    @abstractmethod
    def to_degrees(self) -> float:
        """Return the value in degrees."""

    @final
    def to_hours(self) -> float:
        return self.to_degrees() / DEGREES_PER_HOUR

    @final
    def to_unit(self, unit: AngleUnit) -> float:
        if unit is AngleUnit.DEGREES:
            return self.to_degrees()
        if unit is AngleUnit.HOURS:
            return self.to_hours()
        raise ValueError(f"Unknown angle unit: {unit!r}")

    @final
    def to_unit_subdivision(
        self, unit: AngleUnit, subdivision: AngleUnitSubdivision
    ) -> float:
        """Return the value as a count of subdivision parts, e.g. 1.5° -> 90 arcminutes."""
        return subdivision.parts_in_unit() * self.to_unit(unit)

    @final
    def to_unit_subdivision_normalized(
        self,
        unit: AngleUnit,
        subdivision: AngleUnitSubdivision,
        bound: AngleBound,
    ) -> float:
        """Return the rotation-equivalent value lying in the bound's interval.

        Args:
            unit: Target unit.
            subdivision: Target subdivision; the result is a count of its parts.
            bound: LowerInclusive(a) selects [a, a + rotation),
                   UpperInclusive(a) selects (a - rotation, a].

        Returns:
            The normalized value in the unit + subdivision scale.

        Example:
            Angle.from_degrees(-90.0).to_unit_subdivision_normalized(
                AngleUnit.DEGREES, AngleUnitSubdivision.WHOLES,
                LowerInclusive(Angle.ZERO)) -> 270.0
        """
        if not isinstance(bound, (LowerInclusive, UpperInclusive)):
            raise TypeError(f"Unsupported angle bound: {bound!r}")

        angle = self.to_unit_subdivision(unit, subdivision)
        rotation = float(unit.parts_in_rotation(subdivision))
        anchor = bound.angle.to_unit_subdivision(unit, subdivision)

        if isinstance(bound, LowerInclusive):
            return anchor + _reduce(angle - anchor, rotation)
        return anchor - _reduce(anchor - angle, rotation)

    @final
    def to_degrees_nonnegative(self) -> float:
        """Degrees in [0°, 360°)."""
        return self.to_unit_subdivision_normalized(
            AngleUnit.DEGREES, AngleUnitSubdivision.WHOLES, LowerInclusive(Angle.ZERO)
        )

    @final
    def to_degrees_symmetric(self) -> float:
        """Degrees in (-180°, 180°]."""
        return self.to_unit_subdivision_normalized(
            AngleUnit.DEGREES, AngleUnitSubdivision.WHOLES, UpperInclusive(Angle.HALF_ROTATION)
        )

    @final
    def to_hours_nonnegative(self) -> float:
        """Hours in [0ʰ, 24ʰ)."""
        return self.to_unit_subdivision_normalized(
            AngleUnit.HOURS, AngleUnitSubdivision.WHOLES, LowerInclusive(Angle.ZERO)
        )

    @final
    def to_hours_symmetric(self) -> float:
        """Hours in (-12ʰ, 12ʰ]."""
        return self.to_unit_subdivision_normalized(
            AngleUnit.HOURS, AngleUnitSubdivision.WHOLES, UpperInclusive(Angle.HALF_ROTATION)
        )

    @final
    def format_angle(
        self, unit_precision: AngleUnitPrecision, angle_range: AngleRange
    ) -> str:
        """Render as sexagesimal text. See astro_angles.format.format_angle()."""
        from .format import format_angle
        return format_angle(self, unit_precision, angle_range)


# ============================================================================
# Value types
# ============================================================================

@dataclass(frozen=True)
class Angle(AngleFrom, AngleInto):
    """An unrestricted angle, stored in degrees.

    Any finite value is valid; rotation equivalence is only applied when
    reading a normalized value, never on storage.
    """

    degrees: float

    ZERO: ClassVar[Angle]
    HALF_ROTATION: ClassVar[Angle]

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(degrees)

    @classmethod
    def from_acute(cls, acute: AcuteAngle) -> Angle:
        """Lossless conversion from an acute angle."""
        return cls.from_degrees(acute.to_degrees())

    def to_degrees(self) -> float:
        return self.degrees

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_degrees(self.to_degrees() + other.to_degrees())

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_degrees(self.to_degrees() - other.to_degrees())

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Angle.from_degrees(factor * self.to_degrees())

    __rmul__ = __mul__

    def __neg__(self) -> Angle:
        return Angle.from_degrees(-self.to_degrees())


Angle.ZERO = Angle(0.0)
Angle.HALF_ROTATION = Angle(180.0)


@dataclass(frozen=True)
class AcuteAngle(AngleTryFrom, AngleInto):
    """An angle restricted to [-90°, 90°], e.g. a declination or latitude.

    Construction always validates; there is no clamping.

    Raises:
        AcuteAngleError: If the degree value is outside [-90, 90].
    """

    degrees: float

    def __post_init__(self):
        if not -90.0 <= self.degrees <= 90.0:
            raise AcuteAngleError()

    @classmethod
    def try_from_degrees(cls, degrees: float) -> AcuteAngle:
        return cls(degrees)

    @classmethod
    def try_from_angle(cls, angle: Angle) -> AcuteAngle:
        """Re-validate an unrestricted angle."""
        return cls.try_from_degrees(angle.to_degrees())

    def to_degrees(self) -> float:
        return self.degrees

    def to_angle(self) -> Angle:
        return Angle.from_acute(self)
