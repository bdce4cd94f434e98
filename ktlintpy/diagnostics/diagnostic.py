"""Diagnostics core types."""

from dataclasses import dataclass

from ktlintpy.diagnostics.codes import DiagnosticSpec, Severity
from ktlintpy.text.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer/parser collaborators."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        range: TextRange,
        *,
        severity: Severity | None = None,
    ) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message,
            range=range,
            severity=severity if severity is not None else spec.severity,
            category=spec.category,
        )
