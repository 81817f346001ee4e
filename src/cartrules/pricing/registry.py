"""Rule registry: name -> rule class, so rule order can come from config, CLI or request."""
from __future__ import annotations

from typing import Sequence

from cartrules.errors import InvalidInput, UnknownRule
from cartrules.pricing.domain import DiscountRule, HolidayRule, VIPRule

RULES: dict[str, type] = {
    VIPRule.name: VIPRule,
    HolidayRule.name: HolidayRule,
}


def register_rule(rule_cls: type) -> type:
    """Add a user-defined rule class under its name. Usable as a class decorator."""
    name = rule_cls.name.strip().lower()
    existing = RULES.get(name)
    if existing is not None and existing is not rule_cls:
        raise ValueError(f"Rule {name!r} already registered as {existing.__name__}")
    RULES[name] = rule_cls
    return rule_cls


def parse_rule_names(value: str | Sequence[str] | None) -> list[str]:
    """'vip, holiday' or ['vip', 'holiday'] -> ['vip', 'holiday']. Blank entries dropped."""
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (list, tuple)) and all(isinstance(p, str) for p in value):
        parts = list(value)
    else:
        raise InvalidInput(f"rules must be a string or a list of strings, got {value!r}")
    return [p.strip().lower() for p in parts if p.strip()]


def rules_from_names(names: str | Sequence[str]) -> tuple[DiscountRule, ...]:
    """Instantiate rules in the given order."""
    rules = []
    for name in parse_rule_names(names):
        rule_cls = RULES.get(name)
        if rule_cls is None:
            raise UnknownRule(f"unknown rule {name!r}; known: {', '.join(sorted(RULES))}")
        rules.append(rule_cls())
    return tuple(rules)
