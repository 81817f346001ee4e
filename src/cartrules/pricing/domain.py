"""Pricing context: cart item and discount rules (no framework imports)."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import ClassVar, Protocol, runtime_checkable

from cartrules.domain import ValueObject
from cartrules.errors import InvalidInput

MAX_PRICE = Decimal("1e15")
MAX_PRICE_PLACES = 12


def to_price(value: object) -> Decimal:
    """
    Coerce int/str/float/Decimal to a non-negative finite Decimal.
    Bounded: below MAX_PRICE, at most MAX_PRICE_PLACES decimal places.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidInput(f"price must be a number, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        price = Decimal(value.strip() if isinstance(value, str) else value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidInput(f"price must be a number, got {value!r}") from e
    if not price.is_finite():
        raise InvalidInput(f"price must be finite, got {value!r}")
    if price < 0:
        raise InvalidInput(f"price must not be negative, got {value!r}")
    if price >= MAX_PRICE:
        raise InvalidInput(f"price must be below {format_price(MAX_PRICE)}, got {value!r}")
    if price.as_tuple().exponent < -MAX_PRICE_PLACES:
        raise InvalidInput(f"price must have at most {MAX_PRICE_PLACES} decimal places, got {value!r}")
    return price


def format_price(price: Decimal) -> str:
    """Plain notation, never exponent form: Decimal('9E+2') -> '900'."""
    return format(price, "f")


@dataclass(frozen=True)
class CartItem(ValueObject):
    """Unit of pricing data: name, non-negative price, VIP flag."""

    name: str
    price: Decimal
    is_vip: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidInput(f"name must be a string, got {self.name!r}")
        if not isinstance(self.is_vip, bool):
            raise InvalidInput(f"is_vip must be a boolean, got {self.is_vip!r}")
        object.__setattr__(self, "price", to_price(self.price))


@runtime_checkable
class DiscountRule(Protocol):
    """Predicate + transform pair: conditionally computes a reduced price."""

    name: str

    def is_applicable(self, item: CartItem) -> bool:
        ...

    def apply(self, item: CartItem) -> Decimal:
        ...


@dataclass(frozen=True)
class VIPRule(ValueObject):
    """20% off, VIP items only."""

    name: ClassVar[str] = "vip"
    multiplier: ClassVar[Decimal] = Decimal("0.8")

    def is_applicable(self, item: CartItem) -> bool:
        return item.is_vip

    def apply(self, item: CartItem) -> Decimal:
        return item.price * self.multiplier


@dataclass(frozen=True)
class HolidayRule(ValueObject):
    """10% off, every item."""

    name: ClassVar[str] = "holiday"
    multiplier: ClassVar[Decimal] = Decimal("0.9")

    def is_applicable(self, item: CartItem) -> bool:
        return True

    def apply(self, item: CartItem) -> Decimal:
        return item.price * self.multiplier
