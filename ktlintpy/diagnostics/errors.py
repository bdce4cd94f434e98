"""Faults raised out of lint/format calls."""


class KtLintError(Exception):
    """Base class for faults that abort a lint or format call."""


class ParseError(KtLintError):
    """Input text is not syntactically valid; no rule has run."""

    def __init__(self, line: int, column: int, message: str) -> None:
        super().__init__(f"({line}:{column}) {message}")
        self.line = line
        self.column = column
        self.message = message


class RuleExecutionError(KtLintError):
    """A rule raised while visiting a node.

    `line`/`column` point at the visited node. They are `(0, 0)` when the fault
    happened while the tree was being rewritten, because the node may no longer
    sit where it was in the input.
    """

    def __init__(self, line: int, column: int, rule_id: str) -> None:
        super().__init__(f"({line}:{column}) rule `{rule_id}` failed")
        self.line = line
        self.column = column
        self.rule_id = rule_id


class PositionOutOfRangeError(KtLintError, IndexError):
    """An offset fell outside every known line; the index and the tree disagree."""

    def __init__(self, offset: int) -> None:
        super().__init__(f"Offset {offset} is outside of the indexed text")
        self.offset = offset
