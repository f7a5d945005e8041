from __future__ import annotations
from enum import Enum

from ..core.errors import InvalidEraError


class SolarHijriEra(Enum):
    """
    BH: 'Before the Hijra', numeric value 0, proleptic years <= 0.
    AH: 'Anno Hegirae', numeric value 1, proleptic years >= 1.
    """
    BH = 0
    AH = 1

    @staticmethod
    def from_number(value: int) -> "SolarHijriEra":
        if value == 0:
            return SolarHijriEra.BH
        if value == 1:
            return SolarHijriEra.AH
        raise InvalidEraError(f"Invalid era: {value}")

    def to_number(self) -> int:
        return self.value

    @staticmethod
    def of_year(proleptic_year: int) -> "SolarHijriEra":
        return SolarHijriEra.AH if proleptic_year >= 1 else SolarHijriEra.BH

    def proleptic_year(self, year_of_era: int) -> int:
        return year_of_era if self is SolarHijriEra.AH else 1 - year_of_era

    def __str__(self) -> str:
        return self.name


def year_of_era(proleptic_year: int) -> int:
    return proleptic_year if proleptic_year >= 1 else 1 - proleptic_year
