# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Service layer for the Auto Rating Engine."""

from .premium_service import PremiumQuote, PremiumService
from .rating import RatingEngine
from .reporting import format_premium_report

__all__ = [
    "PremiumQuote",
    "PremiumService",
    "RatingEngine",
    "format_premium_report",
]
