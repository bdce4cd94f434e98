"""Style violation record delivered to callers."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LintError:
    """A single finding; `line`/`column` are 1-based and refer to the caller's text."""

    line: int
    column: int
    rule_id: str
    message: str

    def __str__(self) -> str:
        return f"{self.line}:{self.column} {self.message} ({self.rule_id})"
