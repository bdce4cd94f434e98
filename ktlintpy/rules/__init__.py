"""Rule contracts and registry."""

from ktlintpy.rules.registry import flatten_rule_sets, qualified_rule_id, validate_rule_sets
from ktlintpy.rules.rule import STANDARD_RULE_SET_ID, EmitFn, Rule, RuleSet

__all__ = [
    "STANDARD_RULE_SET_ID",
    "EmitFn",
    "Rule",
    "RuleSet",
    "flatten_rule_sets",
    "qualified_rule_id",
    "validate_rule_sets",
]
