"""Pricing bounded context: dispatcher via .bind(), price and rule queries."""
from cartrules.ddd import DomainModule

from cartrules.pricing.application import FinalPrice, FinalPriceHandler, ListRules, ListRulesHandler
from cartrules.pricing.dispatcher import DiscountDispatcher
from cartrules.pricing.infrastructure import ConfiguredDispatcher


def pricing_module(prefix: str | None = None) -> DomainModule:
    return (
        DomainModule("pricing", prefix=prefix)
        .bind(DiscountDispatcher, ConfiguredDispatcher)
        .query(FinalPrice, FinalPriceHandler)
        .query(ListRules, ListRulesHandler)
    )
