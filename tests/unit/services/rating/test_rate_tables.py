"""Unit tests for the static rate table."""

from decimal import Decimal

import pytest

from auto_rating.core.exceptions import MissingRateError
from auto_rating.services.rating.rate_tables import (
    AccidentBand,
    AgeBracket,
    RateTable,
    rate_key,
)
from auto_rating.services.rating.vehicle_classifier import VehicleCategory


class TestDefaultRates:
    """Default table contents."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("baseRate.sedan", Decimal("1000.0")),
            ("baseRate.suv", Decimal("1200.0")),
            ("baseRate.luxury", Decimal("1500.0")),
            ("baseRate.sports", Decimal("1800.0")),
            ("ageFactor.16-19", Decimal("2.0")),
            ("ageFactor.20-24", Decimal("1.5")),
            ("ageFactor.25-65", Decimal("1.0")),
            ("ageFactor.66+", Decimal("1.3")),
            ("accidentSurcharge.0", Decimal("0.0")),
            ("accidentSurcharge.1", Decimal("300.0")),
            ("accidentSurcharge.2+", Decimal("600.0")),
        ],
    )
    def test_default_values(self, rate_table: RateTable, key: str, expected: Decimal) -> None:
        """Every documented key carries its documented value."""
        assert rate_table.get(key) == expected

    def test_default_table_has_exactly_eleven_entries(self, rate_table: RateTable) -> None:
        """No keys beyond the three namespaces."""
        assert len(rate_table) == 11
        assert all(
            key.split(".", 1)[0] in {"baseRate", "ageFactor", "accidentSurcharge"}
            for key in rate_table.keys()
        )

    def test_typed_helpers_match_string_keys(self, rate_table: RateTable) -> None:
        """Typed lookups resolve to the same entries as raw keys."""
        assert rate_table.base_rate(VehicleCategory.SUV) == rate_table.get("baseRate.suv")
        assert rate_table.age_factor(AgeBracket.SENIOR) == rate_table.get("ageFactor.66+")
        assert rate_table.accident_surcharge(
            AccidentBand.TWO_OR_MORE
        ) == rate_table.get("accidentSurcharge.2+")


class TestLookupFailures:
    """Missing keys fail fast."""

    def test_missing_key_raises(self, rate_table: RateTable) -> None:
        """Absent key raises MissingRateError carrying the key."""
        with pytest.raises(MissingRateError) as exc_info:
            rate_table.get("baseRate.truck")

        assert exc_info.value.key == "baseRate.truck"
        assert "baseRate.truck" in str(exc_info.value)

    def test_typed_helper_raises_for_partial_table(self) -> None:
        """A table without an entry never reports zero for it."""
        table = RateTable({"baseRate.sedan": 1000})

        with pytest.raises(MissingRateError) as exc_info:
            table.age_factor(AgeBracket.ADULT)

        assert exc_info.value.key == "ageFactor.25-65"

    def test_missing_rate_error_payload(self) -> None:
        """Error serialises with its key."""
        payload = MissingRateError("ageFactor.66+").to_dict()

        assert payload["error"] == "MissingRateError"
        assert payload["key"] == "ageFactor.66+"


class TestImmutability:
    """Table cannot be changed after construction."""

    def test_source_mapping_changes_do_not_leak(self) -> None:
        """Table copies its input."""
        source = {"baseRate.sedan": Decimal("1000")}
        table = RateTable(source)
        source["baseRate.sedan"] = Decimal("1")

        assert table.get("baseRate.sedan") == Decimal("1000")

    def test_as_dict_is_detached(self, rate_table: RateTable) -> None:
        """Mutating the exported dict leaves the table intact."""
        exported = rate_table.as_dict()
        exported["baseRate.sedan"] = Decimal("0")

        assert rate_table.get("baseRate.sedan") == Decimal("1000.0")

    def test_no_item_assignment(self, rate_table: RateTable) -> None:
        """RateTable exposes no setter."""
        with pytest.raises(TypeError):
            rate_table["baseRate.sedan"] = Decimal("1")  # type: ignore[index]

    def test_numeric_inputs_are_stored_as_decimal(self) -> None:
        """Ints and floats are converted exactly."""
        table = RateTable({"ageFactor.66+": 1.3, "baseRate.sedan": 1000})

        assert table.get("ageFactor.66+") == Decimal("1.3")
        assert isinstance(table.get("baseRate.sedan"), Decimal)


class TestBrackets:
    """Age brackets and accident bands."""

    @pytest.mark.parametrize(
        ("age", "bracket"),
        [
            (16, AgeBracket.TEEN),
            (19, AgeBracket.TEEN),
            (20, AgeBracket.YOUNG_ADULT),
            (24, AgeBracket.YOUNG_ADULT),
            (25, AgeBracket.ADULT),
            (65, AgeBracket.ADULT),
            (66, AgeBracket.SENIOR),
            (90, AgeBracket.SENIOR),
        ],
    )
    def test_age_bracket_boundaries(self, age: int, bracket: AgeBracket) -> None:
        """Bracket edges are inclusive at the lower bound."""
        assert AgeBracket.for_age(age) is bracket

    @pytest.mark.parametrize(
        ("count", "band"),
        [
            (0, AccidentBand.NONE),
            (1, AccidentBand.ONE),
            (2, AccidentBand.TWO_OR_MORE),
            (7, AccidentBand.TWO_OR_MORE),
        ],
    )
    def test_accident_bands(self, count: int, band: AccidentBand) -> None:
        """Counts above one share the 2+ band."""
        assert AccidentBand.for_count(count) is band

    def test_rate_key_format(self) -> None:
        """Keys are dot-namespaced."""
        assert rate_key("baseRate", "sedan") == "baseRate.sedan"
