"""API schemas."""

from .premium import (
    AdjustmentResponse,
    APIInfo,
    HealthResponse,
    PremiumRequest,
    PremiumResponse,
)

__all__ = [
    "AdjustmentResponse",
    "APIInfo",
    "HealthResponse",
    "PremiumRequest",
    "PremiumResponse",
]
