"""Test configuration and fixtures for the Auto Rating Engine."""

from collections.abc import Callable, Generator
from typing import Any

import pytest

from auto_rating.api.dependencies import clear_engine_cache
from auto_rating.core.config import clear_settings_cache
from auto_rating.models.profile import DriverProfile
from auto_rating.services.rating import RatingEngine, RateTable


@pytest.fixture(autouse=True)
def reset_cached_singletons() -> Generator[None, None, None]:
    """Isolate cached settings and the shared engine between tests."""
    clear_settings_cache()
    clear_engine_cache()
    yield
    clear_settings_cache()
    clear_engine_cache()


@pytest.fixture
def engine() -> RatingEngine:
    """Engine with the default rate table and built-in rules."""
    return RatingEngine()


@pytest.fixture
def rate_table() -> RateTable:
    """Default rate table."""
    return RateTable.default()


@pytest.fixture
def make_profile() -> Callable[..., DriverProfile]:
    """Factory for profiles with sensible defaults."""

    def _make(**overrides: Any) -> DriverProfile:
        data: dict[str, Any] = {
            "age": 40,
            "accidents_in_last_five_years": 0,
            "vehicle_make": "Toyota",
            "vehicle_model": "Camry",
        }
        data.update(overrides)
        return DriverProfile(**data)

    return _make
