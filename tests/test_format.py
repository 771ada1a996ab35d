"""Unit tests for sexagesimal formatting.

Covers the request types (AngleUnitPrecision, AngleRange) and the
normalize → round → re-normalize → render pipeline, including the
rounding cases that land on an interval edge.
"""

import math
import re

import pytest

from astro_angles.angle import AcuteAngle, Angle, LowerInclusive, UpperInclusive
from astro_angles.format import AngleRange, AngleUnitPrecision, format_angle
from astro_angles.units import AngleUnit, AngleUnitSubdivision


NN = AngleRange.NON_NEGATIVE
SYM = AngleRange.SYMMETRIC


# ---------------------------------------------------------------------------
# Request types
# ---------------------------------------------------------------------------

class TestAngleUnitPrecision:
    """Six named unit + subdivision combinations with a precision."""

    @pytest.mark.parametrize("factory,unit,subdivision", [
        (AngleUnitPrecision.degrees,        AngleUnit.DEGREES, AngleUnitSubdivision.WHOLES),
        (AngleUnitPrecision.degree_minutes, AngleUnit.DEGREES, AngleUnitSubdivision.MINUTES),
        (AngleUnitPrecision.degree_seconds, AngleUnit.DEGREES, AngleUnitSubdivision.SECONDS),
        (AngleUnitPrecision.hours,          AngleUnit.HOURS,   AngleUnitSubdivision.WHOLES),
        (AngleUnitPrecision.hour_minutes,   AngleUnit.HOURS,   AngleUnitSubdivision.MINUTES),
        (AngleUnitPrecision.hour_seconds,   AngleUnit.HOURS,   AngleUnitSubdivision.SECONDS),
    ])
    def test_named_constructors(self, factory, unit, subdivision):
        assert factory(3).as_tuple() == (unit, subdivision, 3)

    def test_from_name(self):
        assert AngleUnitPrecision.from_name("hour_seconds", 0) == AngleUnitPrecision.hour_seconds(0)
        assert AngleUnitPrecision.from_name("Degree-Minutes", 2) == AngleUnitPrecision.degree_minutes(2)

    def test_name_round_trips(self):
        assert AngleUnitPrecision.degree_seconds(1).name == "degree_seconds"
        assert AngleUnitPrecision.hours(0).name == "hours"

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown angle format"):
            AngleUnitPrecision.from_name("radians", 2)

    @pytest.mark.parametrize("precision", [-1, 1.5, "2", True])
    def test_invalid_precision(self, precision):
        with pytest.raises(ValueError, match="Precision"):
            AngleUnitPrecision.degrees(precision)


class TestAngleRange:
    """Ranges map onto the two standard bounds."""

    def test_non_negative_bound(self):
        bound = AngleRange.NON_NEGATIVE.to_bound()
        assert isinstance(bound, LowerInclusive)
        assert bound.angle == Angle.ZERO

    def test_symmetric_bound(self):
        bound = AngleRange.SYMMETRIC.to_bound()
        assert isinstance(bound, UpperInclusive)
        assert bound.angle == Angle.HALF_ROTATION

    def test_from_name(self):
        assert AngleRange.from_name("symmetric") is SYM
        assert AngleRange.from_name("Non-Negative") is NN

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown angle range"):
            AngleRange.from_name("positive")


# ---------------------------------------------------------------------------
# Reference outputs
# ---------------------------------------------------------------------------

class TestFormatScenarios:
    """Exact outputs for each unit + subdivision in both ranges."""

    CASES = [
        (Angle.from_degrees(26.245),     AngleUnitPrecision.degrees(2),        NN,  "26.25°"),
        (Angle.from_degrees(270.65),     AngleUnitPrecision.degrees(1),        SYM, "-89.4°"),
        (Angle.from_degrees(638.1523),   AngleUnitPrecision.degree_minutes(0), NN,  "278°09′"),
        (Angle.from_degrees(638.1523),   AngleUnitPrecision.degree_minutes(2), SYM, "-81°50.86′"),
        (Angle.from_degrees(-23.085925), AngleUnitPrecision.degree_seconds(2), NN,  "336°54′50.67″"),
        (Angle.from_degrees(-23.085925), AngleUnitPrecision.degree_seconds(2), SYM, "-23°05′09.33″"),
        (Angle.from_hours(31.734579),    AngleUnitPrecision.hours(3),          NN,  "7.735ʰ"),
        (Angle.from_hours(31.734579),    AngleUnitPrecision.hours(3),          SYM, "+7.735ʰ"),
        (Angle.from_hours(22.276198),    AngleUnitPrecision.hour_minutes(3),   NN,  "22ʰ16.572ᵐ"),
        (Angle.from_hours(22.276198),    AngleUnitPrecision.hour_minutes(3),   SYM, "-1ʰ43.428ᵐ"),
        (Angle.from_hours(21.685442),    AngleUnitPrecision.hour_seconds(0),   NN,  "21ʰ41ᵐ08ˢ"),
        (Angle.from_hours(21.685442),    AngleUnitPrecision.hour_seconds(2),   SYM, "-2ʰ18ᵐ52.41ˢ"),
    ]

    @pytest.mark.parametrize("angle,unit_precision,angle_range,expected", CASES)
    def test_format(self, angle, unit_precision, angle_range, expected):
        assert format_angle(angle, unit_precision, angle_range) == expected

    @pytest.mark.parametrize("angle,unit_precision,angle_range,expected", CASES)
    def test_method_matches_function(self, angle, unit_precision, angle_range, expected):
        assert angle.format_angle(unit_precision, angle_range) == expected


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

class TestRounding:
    """Rounding happens in Decimal, half away from zero, then re-normalizes."""

    def test_rounding_up_wraps_to_zero(self):
        """359.999° rounds to 360.00°, which is outside [0, 360) and wraps."""
        result = Angle.from_degrees(359.999).format_angle(AngleUnitPrecision.degrees(2), NN)
        assert result == "0.00°"

    def test_rounding_onto_closed_symmetric_edge(self):
        """-179.5° rounds to -180°, which maps to the included +180° edge."""
        result = Angle.from_degrees(-179.5).format_angle(AngleUnitPrecision.degrees(0), SYM)
        assert result == "+180°"

    def test_rounding_just_past_half_rotation(self):
        result = Angle.from_degrees(180.004).format_angle(AngleUnitPrecision.degrees(2), SYM)
        assert result == "+180.00°"

    def test_hours_symmetric_edge(self):
        result = Angle.from_hours(-11.9999).format_angle(AngleUnitPrecision.hours(2), SYM)
        assert result == "+12.00ʰ"

    def test_seconds_never_show_sixty(self):
        result = Angle.from_degrees(10.99999999).format_angle(
            AngleUnitPrecision.degree_seconds(0), NN)
        assert result == "11°00′00″"

    def test_seconds_carry_into_full_rotation(self):
        result = Angle.from_degrees(359.9999999).format_angle(
            AngleUnitPrecision.degree_seconds(2), NN)
        assert result == "0°00′00.00″"

    def test_minutes_carry_into_full_rotation(self):
        result = Angle.from_hours(23.99999).format_angle(AngleUnitPrecision.hour_minutes(0), NN)
        assert result == "0ʰ00ᵐ"

    @pytest.mark.parametrize("degrees,expected", [
        (0.125, "0.13°"),
        (0.625, "0.63°"),
        (0.375, "0.38°"),
    ])
    def test_ties_round_away_from_zero(self, degrees, expected):
        """Exact binary ties round up in magnitude, not to even."""
        assert Angle(degrees).format_angle(AngleUnitPrecision.degrees(2), NN) == expected

    def test_negative_tie_rounds_away_from_zero(self):
        assert Angle(-0.125).format_angle(AngleUnitPrecision.degrees(2), SYM) == "-0.13°"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

class TestLayout:
    """Signs, zero padding and widths."""

    def test_symmetric_zero_has_plus_sign(self):
        assert Angle(0.0).format_angle(AngleUnitPrecision.degrees(0), SYM) == "+0°"

    def test_non_negative_has_no_sign(self):
        assert Angle(0.0).format_angle(AngleUnitPrecision.degrees(0), NN) == "0°"

    def test_negative_fraction_of_a_degree_keeps_sign(self):
        """-15′ has a zero whole-degree part but is still negative."""
        result = Angle(-0.25).format_angle(AngleUnitPrecision.degree_minutes(0), SYM)
        assert result == "-0°15′"

    def test_minutes_width_with_precision(self):
        result = Angle(-23.085925).format_angle(AngleUnitPrecision.degree_minutes(1), SYM)
        assert result == "-23°05.2′"

    def test_inner_components_unsigned(self):
        result = Angle(-23.085925).format_angle(AngleUnitPrecision.degree_seconds(2), SYM)
        assert result.count("-") == 1
        assert result.startswith("-")

    def test_large_precision(self):
        result = Angle(1 / 3).format_angle(AngleUnitPrecision.degrees(20), NN)
        assert re.fullmatch(r"0\.\d{20}°", result)

    def test_acute_angle_formats(self):
        acute = AcuteAngle.try_from_degrees(-23.085925)
        assert acute.format_angle(AngleUnitPrecision.degree_seconds(2), SYM) == "-23°05′09.33″"


class TestContractViolations:
    """Non-finite angles cannot be formatted."""

    @pytest.mark.parametrize("degrees", [math.inf, -math.inf, math.nan])
    def test_non_finite_rejected(self, degrees):
        with pytest.raises(ValueError):
            format_angle(Angle(degrees), AngleUnitPrecision.degrees(2), NN)
