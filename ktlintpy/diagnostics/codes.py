"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_BLOCK_COMMENT",
    message="Unclosed comment.",
    severity="error",
    category="lexer",
)

PARSER_UNEXPECTED_CLOSING_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_CLOSING_BRACKET",
    message="Unexpected closing bracket",
    severity="error",
    category="parser",
)

PARSER_MISSING_CLOSING_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_CLOSING_BRACKET",
    message="Expecting a closing bracket",
    severity="error",
    category="parser",
)

PARSER_MISMATCHED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISMATCHED_BRACKET",
    message="Closing bracket does not match the opening one",
    severity="error",
    category="parser",
)
