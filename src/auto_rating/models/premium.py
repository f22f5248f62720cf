# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Premium accumulator and its adjustment records.

A :class:`Premium` is created empty for every rating call. The base rate rule
sets ``base_rate`` exactly once; later rules append :class:`Adjustment`
entries in the order they fire. ``total`` is always
``base_rate + sum(adjustment.amount)``.
"""

from decimal import Decimal

from beartype import beartype
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    computed_field,
)

from ..core.exceptions import InvalidAmountError, RuleOrderError
from .base import BaseModelConfig, to_money


class Adjustment(BaseModelConfig):
    """A labeled, explained delta applied on top of the base rate."""

    label: str = Field(..., min_length=1, max_length=100, description="Short label")
    amount: Decimal = Field(
        ...,
        decimal_places=2,
        description="Signed amount (negative for discounts)",
    )
    explanation: str = Field(
        default="", max_length=500, description="Human-readable justification"
    )


class Premium(BaseModel):
    """Mutable premium breakdown filled in by the rating rules."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        validate_default=True,
    )

    base_rate: Decimal = Field(
        default=Decimal("0.00"),
        ge=Decimal("0"),
        decimal_places=2,
        description="Base rate for the vehicle category",
    )
    adjustments: list[Adjustment] = Field(
        default_factory=list, description="Adjustments in application order"
    )
    applied_rules: list[str] = Field(
        default_factory=list, description="Names of the rules that fired, in order"
    )

    _base_rate_set: bool = PrivateAttr(default=False)

    @beartype
    def set_base_rate(self, amount: Decimal | int | float) -> None:
        """Set the base rate. Only one rule may do this per premium.

        Raises:
            RuleOrderError: The base rate was already set.
            InvalidAmountError: The amount is negative or not a finite number.
        """
        if self._base_rate_set:
            raise RuleOrderError("Base rate has already been set for this premium")
        try:
            self.base_rate = to_money(amount)
        except (ValidationError, ArithmeticError) as e:
            raise InvalidAmountError("base rate", amount) from e
        self._base_rate_set = True

    @property
    def is_base_rate_set(self) -> bool:
        """Whether a rule has set the base rate yet."""
        return self._base_rate_set

    @beartype
    def require_base_rate(self) -> Decimal:
        """Base rate for rules that derive their amount from it."""
        if not self._base_rate_set:
            raise RuleOrderError(
                "Base rate must be set before rules that depend on it are applied"
            )
        return self.base_rate

    @beartype
    def add_adjustment(
        self, label: str, amount: Decimal | int | float, explanation: str = ""
    ) -> Adjustment:
        """Append an adjustment and return it.

        Raises:
            InvalidAmountError: The amount is not a finite number, or the
                label or explanation is out of bounds.
        """
        try:
            adjustment = Adjustment(
                label=label, amount=to_money(amount), explanation=explanation
            )
        except (ValidationError, ArithmeticError) as e:
            raise InvalidAmountError(f"adjustment '{label}'", amount) from e
        self.adjustments.append(adjustment)
        return adjustment

    @beartype
    def record_rule(self, rule_name: str) -> None:
        """Note that a rule fired."""
        self.applied_rules.append(rule_name)

    @beartype
    def adjustments_labeled(self, label: str) -> list[Adjustment]:
        """Adjustments carrying the given label."""
        return [a for a in self.adjustments if a.label == label]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def adjustment_total(self) -> Decimal:
        """Sum of all adjustment amounts."""
        return sum((a.amount for a in self.adjustments), Decimal("0.00"))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> Decimal:
        """Final premium: base rate plus every adjustment."""
        return to_money(self.base_rate + self.adjustment_total)
