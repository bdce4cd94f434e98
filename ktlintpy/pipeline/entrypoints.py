"""Result-returning entrypoints over the callback-based lint/format runners."""

from __future__ import annotations

from collections.abc import Iterable

from ktlintpy.diagnostics import LintError
from ktlintpy.format import format_text
from ktlintpy.lint import lint
from ktlintpy.parser import SourceParser
from ktlintpy.pipeline.results import FormatRunResult, LintRunResult
from ktlintpy.rules import RuleSet


def run_lint(
    text: str,
    rule_sets: Iterable[RuleSet],
    *,
    parser: SourceParser | None = None,
) -> LintRunResult:
    """Run linting and collect the findings."""
    errors: list[LintError] = []
    lint(text, rule_sets, errors.append, parser=parser)
    return LintRunResult(errors=errors)


def run_format(
    text: str,
    rule_sets: Iterable[RuleSet],
    *,
    parser: SourceParser | None = None,
) -> FormatRunResult:
    """Run formatting and collect the findings alongside the corrected text."""
    errors: list[tuple[LintError, bool]] = []
    formatted_text = format_text(
        text,
        rule_sets,
        lambda error, corrected: errors.append((error, corrected)),
        parser=parser,
    )
    return FormatRunResult(
        formatted_text=formatted_text,
        errors=errors,
        changed=formatted_text != text,
    )
