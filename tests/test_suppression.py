import logging

import pytest

from ktlintpy.parser import parse
from ktlintpy.suppression import (
    NO_SUPPRESSION,
    SuppressionIndex,
    collect_suppression_hints,
    parse_directive,
)


def _index(source: str) -> SuppressionIndex:
    return SuppressionIndex.build(parse(source).root)


@pytest.mark.parametrize(
    ("comment", "expected"),
    [
        ("ktlint-disable", frozenset()),
        ("ktlint-disable a b", frozenset({"a", "b"})),
        ("ktlint-disable   a \t  b ", frozenset({"a", "b"})),
        ("ktlint-disabled a", None),
        ("please ktlint-disable a", None),
        ("ktlint-enable a", None),
    ],
)
def test_parse_directive_requires_exact_first_word(comment: str, expected: frozenset[str] | None) -> None:
    assert parse_directive(comment, "ktlint-disable") == expected


def test_line_directive_covers_its_own_line_up_to_the_comment() -> None:
    source = "val a = 1\nval x = 1 //ktlint-disable no-unused\nval x = 2\n"
    index = _index(source)
    line_start = source.index("val x = 1")
    comment_start = source.index("//")

    (hint,) = index.hints
    assert hint.range.as_tuple() == (line_start, comment_start)
    assert hint.disabled_rules == frozenset({"no-unused"})
    assert index.is_suppressed(line_start + 4, "no-unused")
    assert index.is_suppressed(comment_start, "no-unused")
    assert not index.is_suppressed(line_start + 4, "other-rule")
    assert not index.is_suppressed(line_start - 1, "no-unused")
    assert not index.is_suppressed(source.index("val x = 2") + 4, "no-unused")


def test_line_directive_on_first_line_starts_at_zero() -> None:
    index = _index("a b // ktlint-disable\nc\n")

    (hint,) = index.hints
    assert hint.range.start == 0
    assert hint.disabled_rules == frozenset()
    assert index.is_suppressed(2, "anything")


def test_block_directive_without_enable_runs_to_end_of_text() -> None:
    source = "a\n/* ktlint-disable x */\nb\n"
    index = _index(source)

    (hint,) = index.hints
    assert hint.range.as_tuple() == (source.index("/*"), len(source))
    assert index.is_suppressed(len(source), "x")
    assert not index.is_suppressed(0, "x")


def test_block_enable_matches_by_rule_set_equality() -> None:
    source = "/* ktlint-disable a b */ x /* ktlint-enable b a */ y"
    index = _index(source)
    enable_start = source.index("/* ktlint-enable")

    (hint,) = index.hints
    assert hint.range.as_tuple() == (0, enable_start)
    assert hint.disabled_rules == frozenset({"a", "b"})
    assert index.is_suppressed(source.index("x"), "a")
    assert not index.is_suppressed(source.index("y"), "b")


def test_block_enable_with_different_set_does_not_close() -> None:
    source = "/* ktlint-disable a b */ x /* ktlint-enable a */ y"
    index = _index(source)

    (hint,) = index.hints
    assert hint.range.as_tuple() == (0, len(source))
    assert index.is_suppressed(source.index("y"), "b")


def test_block_enable_closes_last_opened_matching_region() -> None:
    source = (
        "/* ktlint-disable a */ p "
        "/* ktlint-disable b */ q "
        "/* ktlint-disable a */ r "
        "/* ktlint-enable a */ s"
    )
    hints = collect_suppression_hints(parse(source).root)
    third_open = source.index("/* ktlint-disable a */ r")
    enable = source.index("/* ktlint-enable a */")

    assert hints[0].range.as_tuple() == (third_open, enable)
    assert sorted(hint.range.as_tuple() for hint in hints[1:]) == [
        (0, len(source)),
        (source.index("/* ktlint-disable b */"), len(source)),
    ]


def test_unmatched_enable_is_ignored() -> None:
    index = _index("a /* ktlint-enable x */ b")

    assert index.is_empty
    assert index == NO_SUPPRESSION
    assert not index.is_suppressed(0, "x")


def test_directives_inside_strings_are_ignored() -> None:
    index = _index('val s = "// ktlint-disable"\n')

    assert index.is_empty


def test_directive_in_nested_block_is_found() -> None:
    source = "fun f() {\n    foo() // ktlint-disable\n}\n"
    index = _index(source)

    (hint,) = index.hints
    assert hint.range.as_tuple() == (source.index("    foo"), source.index("//"))


def test_unmatched_enable_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="ktlintpy.suppression.hints"):
        _index("a /* ktlint-enable x */ b")

    assert "without a matching ktlint-disable" in caplog.text
