"""Angles for astronomical computation.

Degrees and hours with sexagesimal subdivisions, range normalization and
decimal-safe sexagesimal formatting:

- Angle / AcuteAngle: value types (AcuteAngle is restricted to [-90°, 90°])
- AngleFrom / AngleTryFrom / AngleInto: conversion mixins for angle-like types
- LowerInclusive / UpperInclusive: canonical interval bounds
- AngleUnit / AngleUnitSubdivision: degrees or hours; wholes, minutes, seconds
- format_angle / AngleUnitPrecision / AngleRange: sexagesimal text output

Example usage:
    from astro_angles import Angle, AngleRange, AngleUnitPrecision

    Angle.from_degrees(638.1523).format_angle(
        AngleUnitPrecision.degree_minutes(0), AngleRange.NON_NEGATIVE
    )  # '278°09′'
"""

from .angle import (
    AcuteAngle,
    AcuteAngleError,
    Angle,
    AngleBound,
    AngleDomainError,
    AngleFrom,
    AngleInto,
    AngleTryFrom,
    LowerInclusive,
    UpperInclusive,
)
from .format import AngleRange, AngleUnitPrecision, format_angle
from .units import AngleUnit, AngleUnitSubdivision

__all__ = [
    "AcuteAngle",
    "AcuteAngleError",
    "Angle",
    "AngleBound",
    "AngleDomainError",
    "AngleFrom",
    "AngleInto",
    "AngleRange",
    "AngleTryFrom",
    "AngleUnit",
    "AngleUnitPrecision",
    "AngleUnitSubdivision",
    "LowerInclusive",
    "UpperInclusive",
    "format_angle",
]
