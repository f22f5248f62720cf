# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Base Pydantic model configuration for all domain models.

This module provides the foundation for the rating domain models,
enforcing immutability and strict validation, plus the money helper
every model uses for rounding.
"""

from decimal import ROUND_HALF_UP, Decimal

from beartype import beartype
from pydantic import BaseModel, ConfigDict

CENT = Decimal("0.01")


@beartype
def to_money(value: Decimal | int | float) -> Decimal:
    """Round a monetary amount half-up to the nearest cent."""
    if isinstance(value, float):
        value = Decimal(str(value))
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


@beartype
class BaseModelConfig(BaseModel):
    """Base model with strict configuration for all domain entities.

    Enforces:
    - Immutability (frozen=True)
    - No extra fields allowed (extra="forbid")
    - Validation on assignment
    - Automatic whitespace stripping
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )
