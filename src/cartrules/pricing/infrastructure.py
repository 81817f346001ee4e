"""Pricing: dispatcher wired from application config."""
from __future__ import annotations

from cartrules.core.config import Config
from cartrules.pricing.dispatcher import DiscountDispatcher
from cartrules.pricing.registry import rules_from_names


class ConfiguredDispatcher(DiscountDispatcher):
    """Dispatcher whose rule order is Config.rules."""

    def __init__(self, config: Config):
        super().__init__(rules_from_names(config.rules))
