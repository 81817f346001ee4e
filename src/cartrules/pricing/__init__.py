"""Pricing context: cart items, discount rules, first-match-wins dispatcher."""
from cartrules.pricing.dispatcher import DiscountDispatcher, final_price
from cartrules.pricing.domain import CartItem, DiscountRule, HolidayRule, VIPRule, format_price
from cartrules.pricing.registry import RULES, register_rule, rules_from_names

__all__ = [
    "CartItem",
    "DiscountDispatcher",
    "DiscountRule",
    "HolidayRule",
    "RULES",
    "VIPRule",
    "final_price",
    "format_price",
    "register_rule",
    "rules_from_names",
]
