# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Vehicle category classification from make and model text."""

from enum import Enum
from typing import Final

from beartype import beartype

from ...models.profile import DriverProfile


class VehicleCategory(str, Enum):
    """Vehicle categories with their own base rate."""

    SEDAN = "sedan"
    SUV = "suv"
    LUXURY = "luxury"
    SPORTS = "sports"


LUXURY_MAKES: Final = frozenset({"bmw", "mercedes", "lexus", "audi"})
SPORTS_MAKES: Final = frozenset({"ferrari", "porsche", "corvette"})
SPORTS_MODELS: Final = frozenset({"mustang"})
SUV_MODELS: Final = frozenset({"suv", "explorer", "tahoe", "highlander"})


@beartype
def classify_vehicle(profile: DriverProfile) -> VehicleCategory:
    """Map a profile's vehicle to a category.

    Checks run in priority order and the first match wins: luxury makes,
    then sports makes or models, then SUV models. Anything else is a sedan.
    Luxury is checked first, so a BMW Mustang is luxury, not sports.
    """
    make = profile.vehicle_make.lower()
    model = profile.vehicle_model.lower()

    if make in LUXURY_MAKES:
        return VehicleCategory.LUXURY
    if make in SPORTS_MAKES or model in SPORTS_MODELS:
        return VehicleCategory.SPORTS
    if model in SUV_MODELS:
        return VehicleCategory.SUV
    return VehicleCategory.SEDAN
