# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Static rate table for the rating engine.

The table maps dot-namespaced keys (``baseRate.sedan``, ``ageFactor.20-24``,
``accidentSurcharge.1``) to decimal values. It is populated once when the
engine is built and exposes no update operation. Rules go through the typed
helpers, which build keys from enum members; every lookup still funnels into
:meth:`RateTable.get`, which raises :class:`MissingRateError` for an absent
key instead of defaulting to zero.
"""

from collections.abc import Iterator, Mapping
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Final

from beartype import beartype

from ...core.exceptions import MissingRateError
from ...core.logging_utils import get_logger
from .vehicle_classifier import VehicleCategory

logger = get_logger(__name__)

BASE_RATE_NAMESPACE: Final = "baseRate"
AGE_FACTOR_NAMESPACE: Final = "ageFactor"
ACCIDENT_SURCHARGE_NAMESPACE: Final = "accidentSurcharge"


class AgeBracket(str, Enum):
    """Driver age brackets with their own risk factor."""

    TEEN = "16-19"
    YOUNG_ADULT = "20-24"
    ADULT = "25-65"
    SENIOR = "66+"

    @classmethod
    @beartype
    def for_age(cls, age: int) -> "AgeBracket":
        """Bracket for a driver age."""
        if age < 20:
            return cls.TEEN
        if age < 25:
            return cls.YOUNG_ADULT
        if age < 66:
            return cls.ADULT
        return cls.SENIOR


class AccidentBand(str, Enum):
    """Accident-count bands with their own surcharge."""

    NONE = "0"
    ONE = "1"
    TWO_OR_MORE = "2+"

    @classmethod
    @beartype
    def for_count(cls, accidents: int) -> "AccidentBand":
        """Band for a number of accidents."""
        if accidents <= 0:
            return cls.NONE
        if accidents == 1:
            return cls.ONE
        return cls.TWO_OR_MORE


@beartype
def rate_key(namespace: str, name: str) -> str:
    """Join a namespace and entry name into a table key."""
    return f"{namespace}.{name}"


DEFAULT_RATES: Final[Mapping[str, Decimal]] = MappingProxyType(
    {
        # Base rates by vehicle category
        rate_key(BASE_RATE_NAMESPACE, VehicleCategory.SEDAN.value): Decimal("1000.0"),
        rate_key(BASE_RATE_NAMESPACE, VehicleCategory.SUV.value): Decimal("1200.0"),
        rate_key(BASE_RATE_NAMESPACE, VehicleCategory.LUXURY.value): Decimal("1500.0"),
        rate_key(BASE_RATE_NAMESPACE, VehicleCategory.SPORTS.value): Decimal("1800.0"),
        # Age risk multipliers
        rate_key(AGE_FACTOR_NAMESPACE, AgeBracket.TEEN.value): Decimal("2.0"),
        rate_key(AGE_FACTOR_NAMESPACE, AgeBracket.YOUNG_ADULT.value): Decimal("1.5"),
        rate_key(AGE_FACTOR_NAMESPACE, AgeBracket.ADULT.value): Decimal("1.0"),
        rate_key(AGE_FACTOR_NAMESPACE, AgeBracket.SENIOR.value): Decimal("1.3"),
        # Accident surcharges
        rate_key(ACCIDENT_SURCHARGE_NAMESPACE, AccidentBand.NONE.value): Decimal("0.0"),
        rate_key(ACCIDENT_SURCHARGE_NAMESPACE, AccidentBand.ONE.value): Decimal("300.0"),
        rate_key(ACCIDENT_SURCHARGE_NAMESPACE, AccidentBand.TWO_OR_MORE.value): Decimal(
            "600.0"
        ),
    }
)


@beartype
class RateTable:
    """Read-only mapping of rate keys to values."""

    def __init__(self, rates: Mapping[str, Decimal | int | float]) -> None:
        """Copy the given rates into an immutable view."""
        self._rates: Mapping[str, Decimal] = MappingProxyType(
            {
                key: value if isinstance(value, Decimal) else Decimal(str(value))
                for key, value in rates.items()
            }
        )

    @classmethod
    def default(cls) -> "RateTable":
        """Table with the standard base rates, age factors and surcharges."""
        return cls(DEFAULT_RATES)

    def get(self, key: str) -> Decimal:
        """Value for ``key``; raises MissingRateError if absent."""
        try:
            return self._rates[key]
        except KeyError:
            logger.error("Rate table lookup failed for key %s", key)
            raise MissingRateError(key) from None

    def base_rate(self, category: VehicleCategory) -> Decimal:
        """Base rate for a vehicle category."""
        return self.get(rate_key(BASE_RATE_NAMESPACE, category.value))

    def age_factor(self, bracket: AgeBracket) -> Decimal:
        """Risk multiplier for an age bracket."""
        return self.get(rate_key(AGE_FACTOR_NAMESPACE, bracket.value))

    def accident_surcharge(self, band: AccidentBand) -> Decimal:
        """Flat surcharge for an accident band."""
        return self.get(rate_key(ACCIDENT_SURCHARGE_NAMESPACE, band.value))

    def keys(self) -> list[str]:
        """All keys, sorted."""
        return sorted(self._rates)

    def as_dict(self) -> dict[str, Decimal]:
        """Detached copy of the table contents."""
        return dict(self._rates)

    def __contains__(self, key: object) -> bool:
        return key in self._rates

    def __len__(self) -> int:
        return len(self._rates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rates)

    def __repr__(self) -> str:
        return f"RateTable({len(self._rates)} entries)"
