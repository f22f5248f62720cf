# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""FastAPI dependency providers."""

from beartype import beartype

from ..services.premium_service import PremiumService
from ..services.rating.rating_engine import RatingEngine

_engine: RatingEngine | None = None


@beartype
def get_rating_engine() -> RatingEngine:
    """Process-wide rating engine, built on first use."""
    global _engine
    if _engine is None:
        _engine = RatingEngine()
    return _engine


@beartype
def get_premium_service() -> PremiumService:
    """Premium service bound to the shared engine."""
    return PremiumService(get_rating_engine())


@beartype
def clear_engine_cache() -> None:
    """Drop the shared engine (for testing)."""
    global _engine
    _engine = None
