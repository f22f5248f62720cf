"""Rating engine services package.

This package provides rule-based premium calculation with:
- A static, read-only rate table
- Vehicle category classification
- Named (condition, action) pricing rules
- An engine that applies matching rules in a fixed order
"""

from .rate_tables import AccidentBand, AgeBracket, RateTable
from .rating_engine import RatingEngine
from .rules import (
    Rule,
    accident_history_rule,
    age_factor_rule,
    base_rate_rule,
    build_default_rules,
)
from .vehicle_classifier import VehicleCategory, classify_vehicle

__all__ = [
    # Main Engine
    "RatingEngine",
    # Rules
    "Rule",
    "base_rate_rule",
    "age_factor_rule",
    "accident_history_rule",
    "build_default_rules",
    # Rate tables
    "RateTable",
    "AgeBracket",
    "AccidentBand",
    # Classification
    "VehicleCategory",
    "classify_vehicle",
]
