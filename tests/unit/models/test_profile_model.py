"""Unit tests for the driver profile model."""

import pytest
from pydantic import ValidationError

from auto_rating.core.exceptions import InvalidProfileError
from auto_rating.models.profile import DriverProfile


class TestDriverProfile:
    """Profile construction and validation."""

    def test_valid_profile(self) -> None:
        """All attributes are exposed as given."""
        profile = DriverProfile(
            age=30,
            accidents_in_last_five_years=1,
            vehicle_make="Toyota",
            vehicle_model="Camry",
        )

        assert profile.age == 30
        assert profile.accidents_in_last_five_years == 1
        assert profile.vehicle_make == "Toyota"
        assert profile.vehicle_model == "Camry"
        assert profile.has_known_age

    def test_immutable(self) -> None:
        """Profiles are frozen."""
        profile = DriverProfile(age=30, vehicle_make="Toyota")

        with pytest.raises(ValidationError):
            profile.age = 31  # type: ignore[misc]

    def test_zero_age_is_allowed(self) -> None:
        """age == 0 marks an unknown age."""
        profile = DriverProfile(age=0, vehicle_make="Toyota")

        assert not profile.has_known_age

    def test_defaults(self) -> None:
        """Accidents and model are optional."""
        profile = DriverProfile(age=45, vehicle_make="Honda")

        assert profile.accidents_in_last_five_years == 0
        assert profile.vehicle_model == ""

    def test_equal_profiles_compare_equal(self) -> None:
        """Value semantics."""
        assert DriverProfile(age=18, vehicle_make="Kia") == DriverProfile(
            age=18, vehicle_make="Kia"
        )

    def test_unknown_fields_rejected(self) -> None:
        """extra='forbid'."""
        with pytest.raises(ValidationError):
            DriverProfile(age=18, vehicle_make="Kia", colour="red")  # type: ignore[call-arg]


class TestCreate:
    """Domain factory raising InvalidProfileError."""

    def test_create_valid(self) -> None:
        """Valid input builds a profile."""
        profile = DriverProfile.create(
            age=22, accidents_in_last_five_years=0, vehicle_make="Ford", vehicle_model="Focus"
        )

        assert profile.vehicle_model == "Focus"

    def test_negative_accidents(self) -> None:
        """Negative accident counts are rejected."""
        with pytest.raises(InvalidProfileError) as exc_info:
            DriverProfile.create(
                age=30, accidents_in_last_five_years=-1, vehicle_make="Ford"
            )

        assert any(
            e.startswith("accidents_in_last_five_years") for e in exc_info.value.errors
        )

    def test_empty_make(self) -> None:
        """Blank makes are rejected after whitespace stripping."""
        with pytest.raises(InvalidProfileError) as exc_info:
            DriverProfile.create(age=30, vehicle_make="   ")

        assert any(e.startswith("vehicle_make") for e in exc_info.value.errors)

    def test_negative_age(self) -> None:
        """Negative ages are rejected."""
        with pytest.raises(InvalidProfileError) as exc_info:
            DriverProfile.create(age=-5, vehicle_make="Ford")

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_collects_every_problem(self) -> None:
        """All field errors are reported together."""
        with pytest.raises(InvalidProfileError) as exc_info:
            DriverProfile.create(
                age=-1, accidents_in_last_five_years=-1, vehicle_make=""
            )

        assert len(exc_info.value.errors) == 3
        assert exc_info.value.to_dict()["error"] == "InvalidProfileError"
