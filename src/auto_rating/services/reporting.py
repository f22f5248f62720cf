# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Plain-text premium breakdown reports."""

from decimal import Decimal

from beartype import beartype

from ..models.premium import Premium
from ..models.profile import DriverProfile
from .rating.vehicle_classifier import classify_vehicle

_LABEL_WIDTH = 20


@beartype
def format_amount(amount: Decimal, currency: str = "USD", *, signed: bool = False) -> str:
    """Render an amount as ``USD 1,234.56`` (``+``/``-`` prefixed when signed)."""
    if not signed:
        return f"{currency} {amount:,.2f}"
    sign = "-" if amount < 0 else "+"
    return f"{sign}{currency} {abs(amount):,.2f}"


@beartype
def format_premium_report(
    profile: DriverProfile, premium: Premium, currency: str = "USD"
) -> str:
    """Multi-line breakdown of how a premium was built."""
    age = f"age {profile.age}" if profile.has_known_age else "age unknown"
    vehicle = f"{profile.vehicle_make} {profile.vehicle_model}".strip()
    category = classify_vehicle(profile).value

    lines = [
        "Premium breakdown",
        f"  Driver:  {age}, {profile.accidents_in_last_five_years} accident(s) in last 5 years",
        f"  Vehicle: {vehicle} ({category})",
        f"  {'Base rate':<{_LABEL_WIDTH}} {format_amount(premium.base_rate, currency)}",
    ]
    for adjustment in premium.adjustments:
        amount = format_amount(adjustment.amount, currency, signed=True)
        line = f"  {adjustment.label:<{_LABEL_WIDTH}} {amount}"
        if adjustment.explanation:
            line += f"  ({adjustment.explanation})"
        lines.append(line)
    lines.append(f"  {'Total':<{_LABEL_WIDTH}} {format_amount(premium.total, currency)}")
    return "\n".join(lines)
