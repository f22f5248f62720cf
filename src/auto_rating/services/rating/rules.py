# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Pricing rules.

A rule is a plain record of a name, a condition over the profile and an
action that mutates the premium. Every rule has the same shape, so there is
no subclass per rule: the built-in rules are produced by factory functions
whose actions close over the rate table.
"""

from collections.abc import Callable
from decimal import Decimal
from typing import Final

from attrs import field, frozen
from beartype import beartype

from ...models.premium import Premium
from ...models.profile import DriverProfile
from .rate_tables import AccidentBand, AgeBracket, RateTable
from .vehicle_classifier import classify_vehicle

Condition = Callable[[DriverProfile], bool]
Action = Callable[[DriverProfile, Premium], None]

BASE_RATE_RULE: Final = "base rate"
AGE_FACTOR_RULE: Final = "age factor"
ACCIDENT_HISTORY_RULE: Final = "accident history"

AGE_FACTOR_LABEL: Final = "Age factor"
ACCIDENT_HISTORY_LABEL: Final = "Accident history"

AGE_EXPLANATIONS: Final[dict[AgeBracket, str]] = {
    AgeBracket.TEEN: "Drivers under 20 have higher statistical risk",
    AgeBracket.YOUNG_ADULT: "Drivers 20-24 have moderately higher risk",
    AgeBracket.ADULT: "Standard rate for drivers 25-65",
    AgeBracket.SENIOR: "Slight increase for senior drivers",
}

ACCIDENT_EXPLANATIONS: Final[dict[AccidentBand, str]] = {
    AccidentBand.ONE: "Surcharge for 1 accident in past 5 years",
    AccidentBand.TWO_OR_MORE: "Major surcharge for 2+ accidents in past 5 years",
}


@frozen
class Rule:
    """Named (condition, action) pair."""

    name: str = field()
    condition: Condition = field()
    action: Action = field()

    @name.validator
    def _check_name(self, attribute: object, value: str) -> None:
        if not value.strip():
            raise ValueError("Rule name must not be blank")

    @beartype
    def matches(self, profile: DriverProfile) -> bool:
        """Whether the rule applies to the profile. No side effects."""
        return bool(self.condition(profile))

    @beartype
    def apply(self, profile: DriverProfile, premium: Premium) -> None:
        """Run the action against the premium."""
        self.action(profile, premium)


def always(profile: DriverProfile) -> bool:
    """Condition that holds for every profile."""
    return True


@beartype
def base_rate_rule(rate_table: RateTable) -> Rule:
    """Sets the premium's base rate from the vehicle category."""

    def action(profile: DriverProfile, premium: Premium) -> None:
        category = classify_vehicle(profile)
        premium.set_base_rate(rate_table.base_rate(category))

    return Rule(name=BASE_RATE_RULE, condition=always, action=action)


@beartype
def age_factor_rule(rate_table: RateTable) -> Rule:
    """Adjusts the base rate by the driver's age-bracket factor.

    Profiles without a known age (``age <= 0``) do not match. A factor of
    1.0 still appends an adjustment, with a zero amount.
    """

    def condition(profile: DriverProfile) -> bool:
        return profile.age > 0

    def action(profile: DriverProfile, premium: Premium) -> None:
        bracket = AgeBracket.for_age(profile.age)
        factor = rate_table.age_factor(bracket)
        adjustment = premium.require_base_rate() * (factor - Decimal("1.0"))
        premium.add_adjustment(AGE_FACTOR_LABEL, adjustment, AGE_EXPLANATIONS[bracket])

    return Rule(name=AGE_FACTOR_RULE, condition=condition, action=action)


@beartype
def accident_history_rule(rate_table: RateTable) -> Rule:
    """Adds a flat surcharge for accidents in the last five years."""

    def condition(profile: DriverProfile) -> bool:
        return profile.accidents_in_last_five_years > 0

    def action(profile: DriverProfile, premium: Premium) -> None:
        band = AccidentBand.for_count(profile.accidents_in_last_five_years)
        surcharge = rate_table.accident_surcharge(band)
        premium.add_adjustment(
            ACCIDENT_HISTORY_LABEL, surcharge, ACCIDENT_EXPLANATIONS[band]
        )

    return Rule(name=ACCIDENT_HISTORY_RULE, condition=condition, action=action)


@beartype
def build_default_rules(rate_table: RateTable) -> tuple[Rule, ...]:
    """Built-in rules in evaluation order.

    Base rate comes first; the age factor reads the base rate it sets.
    """
    return (
        base_rate_rule(rate_table),
        age_factor_rule(rate_table),
        accident_history_rule(rate_table),
    )
