# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Rating error hierarchy.

Every error raised by the rating core derives from :class:`RatingError` so
callers can handle the whole family with a single ``except`` clause.
"""

from typing import Any

from beartype import beartype


class RatingError(Exception):
    """Base class for rating failures."""

    def __init__(self, message: str) -> None:
        """Initialize rating error."""
        self.message = message
        super().__init__(message)

    @beartype
    def to_dict(self) -> dict[str, Any]:
        """Convert to error response payload."""
        return {"error": type(self).__name__, "message": self.message}


class MissingRateError(RatingError):
    """A rule requested a rate table key that does not exist."""

    def __init__(self, key: str) -> None:
        """Initialize with the missing key."""
        self.key = key
        super().__init__(f"Rate table has no entry for key '{key}'")

    @beartype
    def to_dict(self) -> dict[str, Any]:
        """Convert to error response payload."""
        payload = super().to_dict()
        payload["key"] = self.key
        return payload


class InvalidProfileError(RatingError):
    """Driver profile failed validation."""

    def __init__(self, errors: list[str]) -> None:
        """Initialize with the list of field problems."""
        self.errors = errors
        super().__init__("Invalid driver profile: " + "; ".join(errors))

    @beartype
    def to_dict(self) -> dict[str, Any]:
        """Convert to error response payload."""
        payload = super().to_dict()
        payload["errors"] = list(self.errors)
        return payload


class RuleOrderError(RatingError):
    """Base rate was set twice or read before any rule set it."""


class InvalidAmountError(RatingError):
    """A rule produced a monetary amount the premium cannot hold."""

    def __init__(self, field: str, amount: object) -> None:
        """Initialize with the rejected field and value."""
        self.field = field
        self.amount = str(amount)
        super().__init__(f"Invalid {field} amount: {self.amount}")

    @beartype
    def to_dict(self) -> dict[str, Any]:
        """Convert to error response payload."""
        payload = super().to_dict()
        payload["field"] = self.field
        payload["amount"] = self.amount
        return payload
