"""Premium API request and response schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from ..models.profile import DriverProfile
from ..services.premium_service import PremiumQuote


class PremiumRequest(DriverProfile):
    """Profile to be rated.

    Fields and constraints come from :class:`DriverProfile`.
    """

    def to_profile(self) -> DriverProfile:
        """Convert request to domain model."""
        return DriverProfile(**self.model_dump())


class AdjustmentResponse(BaseModel):
    """Single adjustment line."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str = Field(..., description="Short label")
    amount: Decimal = Field(..., description="Signed amount")
    explanation: str = Field(..., description="Human-readable justification")


class PremiumResponse(BaseModel):
    """Priced profile breakdown."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    vehicle_category: str = Field(..., description="Derived vehicle category")
    base_rate: Decimal = Field(..., description="Base rate for the category")
    adjustments: list[AdjustmentResponse] = Field(
        default_factory=list, description="Adjustments in application order"
    )
    total: Decimal = Field(..., description="Final premium")
    applied_rules: list[str] = Field(
        default_factory=list, description="Rules that fired, in order"
    )
    currency: str = Field(..., description="ISO 4217 currency code")

    @classmethod
    def from_quote(cls, quote: PremiumQuote, currency: str) -> "PremiumResponse":
        """Build the response from a service quote."""
        premium = quote.premium
        return cls(
            vehicle_category=quote.vehicle_category.value,
            base_rate=premium.base_rate,
            adjustments=[
                AdjustmentResponse(
                    label=a.label, amount=a.amount, explanation=a.explanation
                )
                for a in premium.adjustments
            ],
            total=premium.total,
            applied_rules=list(premium.applied_rules),
            currency=currency,
        )


class APIInfo(BaseModel):
    """API information response."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    name: str = Field(..., description="API name")
    version: str = Field(..., description="API version")
    status: str = Field(..., description="API status")
    environment: str = Field(..., description="Environment name")


class HealthResponse(BaseModel):
    """Overall service health response."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: str = Field(..., pattern=r"^(healthy|unhealthy|degraded)$")
    timestamp: datetime = Field(..., description="Health check timestamp")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    rule_count: int = Field(..., ge=0, description="Rules loaded in the engine")
