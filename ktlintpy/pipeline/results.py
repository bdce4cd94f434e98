"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from ktlintpy.diagnostics import LintError


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Findings of one lint call, in report order."""

    errors: list[LintError]


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Corrected text plus every finding paired with whether it was auto-corrected."""

    formatted_text: str
    errors: list[tuple[LintError, bool]]
    changed: bool

    @property
    def remaining_errors(self) -> list[LintError]:
        return [error for error, corrected in self.errors if not corrected]
