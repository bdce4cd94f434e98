"""Flattening of rule sets into the ordered (qualified id, rule) registry."""

from __future__ import annotations

from collections.abc import Iterable

from ktlintpy.rules.rule import STANDARD_RULE_SET_ID, Rule, RuleSet


def qualified_rule_id(rule_set_id: str, rule_id: str) -> str:
    if rule_set_id == STANDARD_RULE_SET_ID:
        return rule_id
    return f"{rule_set_id}:{rule_id}"


def flatten_rule_sets(rule_sets: Iterable[RuleSet]) -> list[tuple[str, Rule]]:
    """Rule-set order first, then rule order within each set."""
    return [
        (qualified_rule_id(rule_set.id, rule.id), rule)
        for rule_set in rule_sets
        for rule in rule_set
    ]


def validate_rule_sets(rule_sets: Iterable[RuleSet]) -> None:
    for rule_set in rule_sets:
        _validate_id(rule_set.id, f"Rule set `{rule_set.id}`")
        for rule in rule_set:
            _validate_id(rule.id, f"Rule `{rule.id}` in rule set `{rule_set.id}`")


def _validate_id(value: str, label: str) -> None:
    if not value:
        raise ValueError(f"{label} has an empty id.")
    if any(ch.isspace() for ch in value):
        raise ValueError(
            f"{label} has invalid id; ids cannot contain whitespace or they could not be named in a directive."
        )
