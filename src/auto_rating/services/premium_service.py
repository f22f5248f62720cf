# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Premium quoting service."""

from beartype import beartype
from pydantic import Field

from ..core.exceptions import RatingError
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.base import BaseModelConfig
from ..models.premium import Premium
from ..models.profile import DriverProfile
from .rating.rating_engine import RatingEngine
from .rating.vehicle_classifier import VehicleCategory, classify_vehicle
from .reporting import format_premium_report

logger = get_logger(__name__)


class PremiumQuote(BaseModelConfig):
    """A priced profile."""

    profile: DriverProfile = Field(..., description="Profile that was rated")
    vehicle_category: VehicleCategory = Field(..., description="Derived category")
    premium: Premium = Field(..., description="Premium breakdown")


@beartype
class PremiumService:
    """Runs the rating engine and reports failures as ``Err`` values."""

    def __init__(self, engine: RatingEngine | None = None) -> None:
        """Initialize premium service."""
        self._engine = engine if engine is not None else RatingEngine()

    @property
    def engine(self) -> RatingEngine:
        """Engine used for rating."""
        return self._engine

    def quote(self, profile: DriverProfile) -> Result[PremiumQuote, str]:
        """Price a profile."""
        try:
            premium = self._engine.calculate_premium(profile)
        except RatingError as e:
            logger.error("Premium calculation failed: %s", e.message)
            return Err(f"Premium calculation failed: {e.message}")

        category = classify_vehicle(profile)
        logger.info(
            "Quoted %s %s (%s): total=%s",
            profile.vehicle_make,
            profile.vehicle_model,
            category.value,
            premium.total,
        )
        return Ok(
            PremiumQuote(profile=profile, vehicle_category=category, premium=premium)
        )

    def report(self, profile: DriverProfile, currency: str = "USD") -> Result[str, str]:
        """Price a profile and render the breakdown as text."""
        return self.quote(profile).map(
            lambda quote: format_premium_report(profile, quote.premium, currency)
        )
