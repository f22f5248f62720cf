#!/usr/bin/env python3
"""Demo script showcasing the rule-based rating engine.

This script demonstrates:
1. Vehicle classification into base-rate categories
2. Age factor adjustments
3. Accident history surcharges
4. Plain-text premium breakdowns
"""

import time

from auto_rating.models.profile import DriverProfile
from auto_rating.services.rating import RatingEngine
from auto_rating.services.reporting import format_premium_report

SCENARIOS: list[tuple[str, DriverProfile]] = [
    (
        "Teen driver, two accidents, family sedan",
        DriverProfile(
            age=18,
            accidents_in_last_five_years=2,
            vehicle_make="Toyota",
            vehicle_model="Camry",
        ),
    ),
    (
        "Adult driver, clean record, sports car",
        DriverProfile(
            age=30,
            accidents_in_last_five_years=0,
            vehicle_make="Ferrari",
            vehicle_model="F8",
        ),
    ),
    (
        "Young adult, one accident, SUV",
        DriverProfile(
            age=22,
            accidents_in_last_five_years=1,
            vehicle_make="Ford",
            vehicle_model="Explorer",
        ),
    ),
    (
        "Senior driver, luxury muscle car",
        DriverProfile(
            age=70,
            accidents_in_last_five_years=0,
            vehicle_make="BMW",
            vehicle_model="Mustang",
        ),
    ),
    (
        "Unknown age, one accident",
        DriverProfile(
            age=0,
            accidents_in_last_five_years=1,
            vehicle_make="Honda",
            vehicle_model="Civic",
        ),
    ),
]


def main() -> None:
    """Rate every scenario and print its breakdown."""
    engine = RatingEngine()

    print("Auto Rating Engine Demo")
    print("=" * 60)
    print(f"Rules: {', '.join(engine.rule_names)}")

    for title, profile in SCENARIOS:
        start = time.perf_counter()
        premium = engine.calculate_premium(profile)
        elapsed_ms = (time.perf_counter() - start) * 1000

        print()
        print(f"{title} ({elapsed_ms:.3f}ms)")
        print("-" * 60)
        print(format_premium_report(profile, premium))


if __name__ == "__main__":
    main()
