"""Shared parse carrier, run results and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ktlintpy.pipeline.prepared import PreparedSource, prepare_source
from ktlintpy.pipeline.results import FormatRunResult, LintRunResult

if TYPE_CHECKING:
    from ktlintpy.parser import SourceParser
    from ktlintpy.rules import RuleSet


def run_lint(
    text: str,
    rule_sets: Iterable[RuleSet],
    *,
    parser: SourceParser | None = None,
) -> LintRunResult:
    from ktlintpy.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, rule_sets, parser=parser)


def run_format(
    text: str,
    rule_sets: Iterable[RuleSet],
    *,
    parser: SourceParser | None = None,
) -> FormatRunResult:
    from ktlintpy.pipeline.entrypoints import run_format as _run_format

    return _run_format(text, rule_sets, parser=parser)


__all__ = [
    "FormatRunResult",
    "LintRunResult",
    "PreparedSource",
    "prepare_source",
    "run_format",
    "run_lint",
]
