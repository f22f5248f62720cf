# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Domain models for the rating engine."""

from .base import BaseModelConfig, to_money
from .premium import Adjustment, Premium
from .profile import DriverProfile

__all__ = [
    "BaseModelConfig",
    "to_money",
    "Adjustment",
    "Premium",
    "DriverProfile",
]
