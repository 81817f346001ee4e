"""User-defined rule: registered by name, then usable from config, CLI or request."""
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from cartrules import CartItem, register_rule


@register_rule
@dataclass(frozen=True)
class ClearanceRule:
    """30% off anything priced 500 or more."""

    name: ClassVar[str] = "clearance"

    def is_applicable(self, item: CartItem) -> bool:
        return item.price >= 500

    def apply(self, item: CartItem) -> Decimal:
        return item.price * Decimal("0.7")
