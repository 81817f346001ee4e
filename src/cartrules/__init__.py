"""
cartrules — cart discount rules: the first applicable rule sets the price.
Usable in-process (final_price, DiscountDispatcher), over HTTP (create_app) or from the CLI.
"""
__version__ = "0.1.0"

from cartrules.core import Application, Config, Container, Module
from cartrules.errors import InvalidInput, PricingError, UnknownRule
from cartrules.pricing import (
    RULES,
    CartItem,
    DiscountDispatcher,
    DiscountRule,
    HolidayRule,
    VIPRule,
    final_price,
    register_rule,
    rules_from_names,
)

__all__ = [
    "Application",
    "CartItem",
    "Config",
    "Container",
    "DiscountDispatcher",
    "DiscountRule",
    "HolidayRule",
    "InvalidInput",
    "Module",
    "PricingError",
    "RULES",
    "UnknownRule",
    "VIPRule",
    "final_price",
    "register_rule",
    "rules_from_names",
]
