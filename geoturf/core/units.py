"""Angle and length unit conversion.

Each Unit carries one constant: the mean Earth radius expressed in that unit.
Lengths convert through radians of arc on the sphere:

    radians = distance / unit.factor
    distance = radians * unit.factor

Conversions use the truncated remainder (math.fmod), so negative angles keep
their sign: degrees_to_radians(-75) is negative, not 285° in radians.
"""

from enum import Enum
from math import fmod, pi


class Unit(Enum):
    """Supported units with their Earth-radius factor.

    The metric spelling aliases (KILOMETRES, METRES, CENTIMETRES) share their
    factor with the American spelling and are therefore Enum aliases.
    """

    MILES = 3960.0
    NAUTICAL_MILES = 3441.145
    KILOMETERS = 6373.0
    RADIANS = 1.0
    DEGREES = 57.2957795
    INCHES = 250905600.0
    YARDS = 6969600.0
    METERS = 6373000.0
    CENTIMETERS = 6.373e8
    FEET = 20908792.65
    CENTIMETRES = 6.373e8
    METRES = 6373000.0
    KILOMETRES = 6373.0

    @property
    def factor(self) -> float:
        """Earth radius expressed in this unit."""
        return self.value


DEFAULT_UNIT = Unit.KILOMETERS


class UnitConverter:
    """Static methods for angle and length conversion."""

    @staticmethod
    def degrees_to_radians(degrees: float) -> float:
        """Convert an angle in degrees to radians (after reducing modulo 360)."""
        return fmod(degrees, 360) * pi / 180

    @staticmethod
    def radians_to_degrees(radians: float) -> float:
        """Convert an angle in radians to degrees (after reducing modulo 2π)."""
        return fmod(radians, 2 * pi) * 180 / pi

    @staticmethod
    def length_to_radians(distance: float, unit: Unit = DEFAULT_UNIT) -> float:
        """Convert a real-world length into radians of arc on the sphere."""
        return distance / unit.factor

    @staticmethod
    def radians_to_length(radians: float, unit: Unit = DEFAULT_UNIT) -> float:
        """Convert radians of arc on the sphere into a real-world length."""
        return radians * unit.factor

    @staticmethod
    def length_to_degrees(distance: float, unit: Unit = DEFAULT_UNIT) -> float:
        """Convert a real-world length into degrees of arc on the sphere."""
        return UnitConverter.radians_to_degrees(UnitConverter.length_to_radians(distance=distance, unit=unit))

    @staticmethod
    def convert_length(distance: float, original_unit: Unit, final_unit: Unit = DEFAULT_UNIT) -> float:
        """Convert a length from one unit to another.

        Example:
            UnitConverter.convert_length(1.0, Unit.MILES, Unit.FEET)
        """
        radians = UnitConverter.length_to_radians(distance=distance, unit=original_unit)
        return UnitConverter.radians_to_length(radians=radians, unit=final_unit)
