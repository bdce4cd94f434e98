"""Caller-owned engine handle bundling one parser with the lint/format operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ktlintpy.diagnostics import LintError
from ktlintpy.format import format_text
from ktlintpy.lint import lint
from ktlintpy.parser import GenericParser, ParserOptions, SourceParser
from ktlintpy.rules import RuleSet


class LintEngine:
    """Build once, share freely: calls only read the parser, so the engine is as
    reentrant as the parser it wraps (`GenericParser` is).
    """

    def __init__(self, parser: SourceParser | None = None, *, options: ParserOptions | None = None) -> None:
        if parser is not None and options is not None:
            raise ValueError("Pass either parser or options, not both")
        self.parser: SourceParser = parser if parser is not None else GenericParser(options)

    def lint(
        self,
        text: str,
        rule_sets: Iterable[RuleSet],
        on_error: Callable[[LintError], None],
    ) -> None:
        lint(text, rule_sets, on_error, parser=self.parser)

    def format(
        self,
        text: str,
        rule_sets: Iterable[RuleSet],
        on_error: Callable[[LintError, bool], None],
    ) -> str:
        return format_text(text, rule_sets, on_error, parser=self.parser)
