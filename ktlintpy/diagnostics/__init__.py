"""Diagnostics, findings and faults."""

from ktlintpy.diagnostics.codes import (
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    PARSER_MISMATCHED_BRACKET,
    PARSER_MISSING_CLOSING_BRACKET,
    PARSER_UNEXPECTED_CLOSING_BRACKET,
    DiagnosticSpec,
    Severity,
)
from ktlintpy.diagnostics.diagnostic import Diagnostic
from ktlintpy.diagnostics.errors import (
    KtLintError,
    ParseError,
    PositionOutOfRangeError,
    RuleExecutionError,
)
from ktlintpy.diagnostics.lint_error import LintError
from ktlintpy.diagnostics.report import collect_diagnostics, first_error, has_errors

__all__ = [
    "LEXER_UNTERMINATED_BLOCK_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_MISMATCHED_BRACKET",
    "PARSER_MISSING_CLOSING_BRACKET",
    "PARSER_UNEXPECTED_CLOSING_BRACKET",
    "Diagnostic",
    "DiagnosticSpec",
    "KtLintError",
    "LintError",
    "ParseError",
    "PositionOutOfRangeError",
    "RuleExecutionError",
    "Severity",
    "collect_diagnostics",
    "first_error",
    "has_errors",
]
