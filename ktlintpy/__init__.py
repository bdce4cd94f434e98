"""Language-agnostic lint/auto-fix engine with comment-driven rule suppression."""

from ktlintpy.cst import SyntaxElement, SyntaxNode, SyntaxToken
from ktlintpy.diagnostics import (
    KtLintError,
    LintError,
    ParseError,
    PositionOutOfRangeError,
    RuleExecutionError,
)
from ktlintpy.engine import LintEngine
from ktlintpy.format import format_text
from ktlintpy.lint import lint
from ktlintpy.parser import GenericParser, ParseMode, ParserOptions, SourceParser
from ktlintpy.pipeline import FormatRunResult, LintRunResult, run_format, run_lint
from ktlintpy.rules import STANDARD_RULE_SET_ID, EmitFn, Rule, RuleSet
from ktlintpy.syntax import SyntaxKind

__all__ = [
    "STANDARD_RULE_SET_ID",
    "EmitFn",
    "FormatRunResult",
    "GenericParser",
    "KtLintError",
    "LintEngine",
    "LintError",
    "LintRunResult",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "PositionOutOfRangeError",
    "Rule",
    "RuleExecutionError",
    "RuleSet",
    "SourceParser",
    "SyntaxElement",
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxToken",
    "format_text",
    "lint",
    "run_format",
    "run_lint",
]
