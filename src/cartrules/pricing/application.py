"""Pricing: queries and handlers (dispatcher injected from the container)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cartrules.core.config import parse_bool
from cartrules.core.logging import get_logger
from cartrules.ddd.queries import Query
from cartrules.errors import InvalidInput
from cartrules.pricing.dispatcher import DiscountDispatcher
from cartrules.pricing.domain import CartItem, format_price
from cartrules.pricing.registry import RULES, rules_from_names

logger = get_logger(__name__)


@dataclass
class FinalPrice(Query):
    """Price one cart item. rules overrides the configured order for this request only."""

    name: str
    price: str | float
    is_vip: bool = False
    rules: str | list[str] | None = None


@dataclass
class ListRules(Query):
    pass


class FinalPriceHandler:
    def __init__(self, dispatcher: DiscountDispatcher):
        self._dispatcher = dispatcher

    def __call__(self, query: FinalPrice) -> dict[str, Any]:
        try:
            is_vip = parse_bool(query.is_vip)
        except ValueError as e:
            raise InvalidInput(f"is_vip must be a boolean, got {query.is_vip!r}") from e
        item = CartItem(name=query.name, price=query.price, is_vip=is_vip)

        dispatcher = self._dispatcher
        if query.rules is not None:
            dispatcher = DiscountDispatcher(rules_from_names(query.rules))

        rule = dispatcher.match(item)
        final = rule.apply(item) if rule is not None else item.price
        applied = rule.name if rule is not None else None
        logger.info(
            "priced %s: %s -> %s (%s)",
            item.name,
            item.price,
            final,
            applied or "no discount",
            extra={"item": item.name, "rule": applied, "final_price": format_price(final)},
        )
        return {
            "name": item.name,
            "price": format_price(item.price),
            "final_price": format_price(final),
            "applied_rule": applied,
        }


class ListRulesHandler:
    def __init__(self, dispatcher: DiscountDispatcher):
        self._dispatcher = dispatcher

    def __call__(self, query: ListRules) -> dict[str, Any]:
        return {
            "order": [r.name for r in self._dispatcher.rules],
            "available": sorted(RULES),
        }
