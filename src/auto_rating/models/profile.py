# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Driver profile domain model."""

from beartype import beartype
from pydantic import Field, ValidationError

from ..core.exceptions import InvalidProfileError
from .base import BaseModelConfig


class DriverProfile(BaseModelConfig):
    """Attributes the rating rules read about a driver and their vehicle.

    An ``age`` of ``0`` means the age is unknown; the age factor rule skips
    such profiles instead of rejecting them.
    """

    age: int = Field(..., ge=0, description="Driver age in years (0 if unknown)")
    accidents_in_last_five_years: int = Field(
        default=0, ge=0, description="At-fault accidents in the last five years"
    )
    vehicle_make: str = Field(
        ..., min_length=1, max_length=100, description="Vehicle manufacturer"
    )
    vehicle_model: str = Field(
        default="", max_length=100, description="Vehicle model name"
    )

    @classmethod
    @beartype
    def create(
        cls,
        *,
        age: int,
        accidents_in_last_five_years: int = 0,
        vehicle_make: str,
        vehicle_model: str = "",
    ) -> "DriverProfile":
        """Build a profile, raising InvalidProfileError on bad input."""
        try:
            return cls(
                age=age,
                accidents_in_last_five_years=accidents_in_last_five_years,
                vehicle_make=vehicle_make,
                vehicle_model=vehicle_model,
            )
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise InvalidProfileError(errors) from e

    @property
    def has_known_age(self) -> bool:
        """Whether an age was supplied."""
        return self.age > 0
