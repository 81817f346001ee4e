"""Tests for first-match-wins discount dispatch."""
from dataclasses import dataclass
from decimal import Decimal

import pytest

from cartrules.errors import InvalidInput
from cartrules.pricing.dispatcher import DiscountDispatcher, final_price
from cartrules.pricing.domain import CartItem, HolidayRule, VIPRule


@dataclass
class RecordingRule:
    """Rule double: fixed applicability and result, records every call."""

    name: str
    applicable: bool
    result: Decimal
    calls: list

    def is_applicable(self, item):
        self.calls.append(("is_applicable", self.name))
        return self.applicable

    def apply(self, item):
        self.calls.append(("apply", self.name))
        return self.result


class TestSampleCart:
    def test_normal_item_gets_holiday_discount(self, laptop, default_rules):
        assert final_price(laptop, default_rules) == Decimal("900.0")

    def test_vip_item_gets_vip_discount(self, smartphone, default_rules):
        assert final_price(smartphone, default_rules) == Decimal("640.0")

    def test_reversed_order_gives_everyone_holiday_discount(self, laptop, smartphone):
        rules = [HolidayRule(), VIPRule()]
        assert final_price(laptop, rules) == Decimal("900")
        assert final_price(smartphone, rules) == Decimal("720")


class TestDispatch:
    @pytest.mark.parametrize("price", ["0", "1", "19.99", "1000", "123456.78"])
    def test_vip_items_pay_eighty_percent(self, price, default_rules):
        item = CartItem("x", price, is_vip=True)
        assert final_price(item, default_rules) == Decimal(price) * Decimal("0.8")

    @pytest.mark.parametrize("price", ["0", "1", "19.99", "1000", "123456.78"])
    def test_non_vip_items_pay_ninety_percent(self, price, default_rules):
        item = CartItem("x", price, is_vip=False)
        assert final_price(item, default_rules) == Decimal(price) * Decimal("0.9")

    def test_empty_rules_keep_original_price(self, laptop, smartphone):
        assert final_price(laptop, []) == laptop.price
        assert final_price(smartphone) == smartphone.price
        assert DiscountDispatcher().final_price(laptop) == Decimal("1000")

    def test_no_applicable_rule_keeps_original_price(self, laptop):
        assert final_price(laptop, [VIPRule()]) == Decimal("1000")

    def test_later_rules_are_not_evaluated_after_a_match(self, laptop):
        calls = []
        first = RecordingRule("first", True, Decimal("1"), calls)
        second = RecordingRule("second", True, Decimal("2"), calls)

        assert final_price(laptop, [first, second]) == Decimal("1")
        assert calls == [("is_applicable", "first"), ("apply", "first")]

    def test_skips_inapplicable_rules_in_order(self, laptop):
        calls = []
        rules = [
            RecordingRule("a", False, Decimal("1"), calls),
            RecordingRule("b", True, Decimal("2"), calls),
            RecordingRule("c", True, Decimal("3"), calls),
        ]
        assert final_price(laptop, rules) == Decimal("2")
        assert calls == [("is_applicable", "a"), ("is_applicable", "b"), ("apply", "b")]

    def test_is_idempotent(self, smartphone, default_rules):
        dispatcher = DiscountDispatcher(default_rules)
        assert dispatcher.final_price(smartphone) == dispatcher.final_price(smartphone)
        assert smartphone.price == Decimal("800")

    def test_accepts_any_iterable(self, laptop):
        dispatcher = DiscountDispatcher(r for r in (VIPRule(), HolidayRule()))
        assert dispatcher.rules == (VIPRule(), HolidayRule())
        assert dispatcher.final_price(laptop) == Decimal("900")

    def test_none_item_is_invalid_input(self, default_rules):
        with pytest.raises(InvalidInput) as exc_info:
            final_price(None, default_rules)
        assert exc_info.value.code == "INVALID_INPUT"

    def test_none_item_rejected_even_without_rules(self):
        with pytest.raises(InvalidInput):
            DiscountDispatcher().final_price(None)


class TestMatch:
    def test_returns_first_applicable_rule(self, laptop, smartphone, default_rules):
        dispatcher = DiscountDispatcher(default_rules)
        assert isinstance(dispatcher.match(smartphone), VIPRule)
        assert isinstance(dispatcher.match(laptop), HolidayRule)

    def test_returns_none_when_nothing_applies(self, laptop):
        assert DiscountDispatcher([VIPRule()]).match(laptop) is None

    def test_matched_rule_produces_final_price(self, laptop, smartphone, default_rules):
        dispatcher = DiscountDispatcher(default_rules)
        for item in (laptop, smartphone):
            assert dispatcher.match(item).apply(item) == dispatcher.final_price(item)

    def test_repr_lists_rule_names(self, default_rules):
        assert repr(DiscountDispatcher(default_rules)) == "DiscountDispatcher(['vip', 'holiday'])"
