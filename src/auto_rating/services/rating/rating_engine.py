# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Rule-based rating engine.

The engine owns a rate table and an ordered tuple of rules, both fixed at
construction. ``calculate_premium`` walks the rules in order and applies
every one whose condition holds to a fresh :class:`Premium`. The engine keeps
no per-call state, so one instance can serve any number of callers.
"""

from collections.abc import Sequence

from beartype import beartype

from ...core.exceptions import RatingError
from ...core.logging_utils import get_logger
from ...models.premium import Premium
from ...models.profile import DriverProfile
from .rate_tables import RateTable
from .rules import Rule, build_default_rules

logger = get_logger(__name__)


@beartype
class RatingEngine:
    """Evaluates pricing rules against driver profiles."""

    def __init__(
        self,
        rate_table: RateTable | None = None,
        rules: Sequence[Rule] | None = None,
    ) -> None:
        """Initialize rating engine.

        Args:
            rate_table: Rates to price against. Defaults to the standard table.
            rules: Rules in evaluation order. Defaults to the built-in rules
                bound to ``rate_table``.
        """
        self._rate_table = (
            rate_table if rate_table is not None else RateTable.default()
        )
        self._rules: tuple[Rule, ...] = (
            tuple(rules) if rules is not None else build_default_rules(self._rate_table)
        )

    @property
    def rate_table(self) -> RateTable:
        """Rate table the built-in rules read."""
        return self._rate_table

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules in evaluation order."""
        return self._rules

    @property
    def rule_names(self) -> tuple[str, ...]:
        """Rule names in evaluation order."""
        return tuple(rule.name for rule in self._rules)

    def with_rules(self, *rules: Rule) -> "RatingEngine":
        """New engine with ``rules`` appended after the current ones."""
        return RatingEngine(self._rate_table, self._rules + rules)

    def calculate_premium(self, profile: DriverProfile) -> Premium:
        """Apply every matching rule, in order, to a fresh premium.

        Raises:
            RatingError: A rule failed (for example a missing rate key). No
                partial premium is returned.
        """
        premium = Premium()

        for rule in self._rules:
            if not rule.matches(profile):
                logger.debug("Rule '%s' skipped", rule.name)
                continue

            try:
                rule.apply(profile, premium)
            except RatingError as e:
                logger.error("Rule '%s' failed: %s", rule.name, e.message)
                raise

            premium.record_rule(rule.name)
            logger.debug("Rule '%s' applied", rule.name)

        logger.debug(
            "Premium calculated: base=%s adjustments=%d total=%s",
            premium.base_rate,
            len(premium.adjustments),
            premium.total,
        )
        return premium
