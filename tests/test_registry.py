"""Tests for name-based rule lookup."""
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

import pytest

from cartrules.errors import InvalidInput, UnknownRule
from cartrules.pricing import registry
from cartrules.pricing.dispatcher import final_price
from cartrules.pricing.domain import CartItem, HolidayRule, VIPRule
from cartrules.pricing.registry import RULES, parse_rule_names, register_rule, rules_from_names


@pytest.fixture
def restore_registry():
    saved = dict(RULES)
    yield
    registry.RULES.clear()
    registry.RULES.update(saved)


@dataclass(frozen=True)
class ClearanceRule:
    """Half price for anything at or above 500."""

    name: ClassVar[str] = "clearance"

    def is_applicable(self, item):
        return item.price >= 500

    def apply(self, item):
        return item.price / 2


class TestParseRuleNames:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("vip,holiday", ["vip", "holiday"]),
            (" VIP , Holiday ", ["vip", "holiday"]),
            ("holiday,,", ["holiday"]),
            ("", []),
            (None, []),
            (["Holiday", " vip"], ["holiday", "vip"]),
        ],
    )
    def test_parses(self, value, expected):
        assert parse_rule_names(value) == expected

    @pytest.mark.parametrize("value", [5, True, {"vip": 1}, ["vip", 5]])
    def test_rejects_non_string_values(self, value):
        with pytest.raises(InvalidInput):
            parse_rule_names(value)


class TestRulesFromNames:
    def test_builds_rules_in_order(self):
        assert rules_from_names(["holiday", "vip"]) == (HolidayRule(), VIPRule())

    def test_accepts_comma_separated_string(self):
        assert rules_from_names("vip,holiday") == (VIPRule(), HolidayRule())

    def test_empty_gives_no_rules(self):
        assert rules_from_names([]) == ()

    def test_unknown_rule(self):
        with pytest.raises(UnknownRule) as exc_info:
            rules_from_names(["vip", "blackfriday"])
        assert exc_info.value.code == "UNKNOWN_RULE"
        assert "blackfriday" in exc_info.value.message


class TestRegisterRule:
    def test_registered_rule_is_addressable(self, restore_registry):
        register_rule(ClearanceRule)
        rules = rules_from_names("clearance,holiday")
        assert final_price(CartItem("TV", 600), rules) == Decimal("300")
        assert final_price(CartItem("Cable", 10), rules) == Decimal("9.0")

    def test_reregistering_same_class_is_allowed(self, restore_registry):
        register_rule(ClearanceRule)
        assert register_rule(ClearanceRule) is ClearanceRule

    def test_name_clash_is_rejected(self, restore_registry):
        @dataclass(frozen=True)
        class FakeVip:
            name: ClassVar[str] = "vip"

        with pytest.raises(ValueError):
            register_rule(FakeVip)
        assert RULES["vip"] is VIPRule
