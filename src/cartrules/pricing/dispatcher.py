"""
Discount dispatcher: ordered rules, first applicable rule wins.
Later rules are never evaluated or combined once one matches.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from cartrules.core.logging import get_logger
from cartrules.errors import InvalidInput
from cartrules.pricing.domain import CartItem, DiscountRule

logger = get_logger(__name__)


class DiscountDispatcher:
    """Holds an ordered, immutable sequence of rules; order is precedence."""

    def __init__(self, rules: Iterable[DiscountRule] = ()) -> None:
        self._rules: tuple[DiscountRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[DiscountRule, ...]:
        return self._rules

    def match(self, item: CartItem) -> DiscountRule | None:
        """First rule whose predicate holds for item, or None."""
        if item is None:
            raise InvalidInput("cart item is required")
        for rule in self._rules:
            if rule.is_applicable(item):
                return rule
        return None

    def final_price(self, item: CartItem) -> Decimal:
        rule = self.match(item)
        if rule is None:
            logger.debug("no rule applies to %s, keeping %s", item.name, item.price)
            return item.price
        logger.debug("rule %s applies to %s", rule.name, item.name)
        return rule.apply(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[r.name for r in self._rules]!r})"


def final_price(item: CartItem, rules: Iterable[DiscountRule] = ()) -> Decimal:
    """Price after the first applicable rule in rules; item.price if none applies."""
    return DiscountDispatcher(rules).final_price(item)
