import pytest

from ktlintpy.rules import RuleSet, flatten_rule_sets, qualified_rule_id, validate_rule_sets

from tests._rules import ForbiddenIdentifierRule, NoSemicolonsRule, NoTrailingSpacesRule


def test_standard_rules_use_bare_ids_others_are_namespaced() -> None:
    assert qualified_rule_id("standard", "no-semi") == "no-semi"
    assert qualified_rule_id("experimental", "no-semi") == "experimental:no-semi"


def test_flatten_preserves_rule_set_then_rule_order() -> None:
    semi = NoSemicolonsRule()
    spaces = NoTrailingSpacesRule()
    forbidden = ForbiddenIdentifierRule("x")

    registry = flatten_rule_sets(
        [
            RuleSet("custom", (forbidden, semi)),
            RuleSet("standard", (spaces,)),
        ]
    )

    assert registry == [
        ("custom:no-unused", forbidden),
        ("custom:no-semi", semi),
        ("no-trailing-spaces", spaces),
    ]


def test_rule_set_is_iterable_in_order() -> None:
    rules = (NoSemicolonsRule(), NoTrailingSpacesRule())
    rule_set = RuleSet("standard", rules)

    assert tuple(rule_set) == rules
    assert len(rule_set) == 2


@pytest.mark.parametrize(
    "rule_set",
    [
        RuleSet("", (NoSemicolonsRule(),)),
        RuleSet("standard", (NoSemicolonsRule(id="no semi"),)),
        RuleSet("standard", (NoSemicolonsRule(id=""),)),
    ],
)
def test_validate_rejects_ids_that_cannot_be_suppressed(rule_set: RuleSet) -> None:
    with pytest.raises(ValueError):
        validate_rule_sets([rule_set])
