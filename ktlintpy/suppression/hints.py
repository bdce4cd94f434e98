"""Comment-driven suppression of rules over offset ranges.

Directives:

- `// ktlint-disable [rule ...]` at the end of a line suppresses the listed
  rules (all rules when none are listed) from the start of that line up to
  the comment.
- `/* ktlint-disable [rule ...] */` opens a region that runs until a
  `/* ktlint-enable [rule ...] */` naming the same set of rules, or until the
  end of the file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ktlintpy.cst import SyntaxElement, SyntaxToken, walk_preorder
from ktlintpy.syntax import SyntaxKind
from ktlintpy.text import TextRange

logger = logging.getLogger(__name__)

DISABLE_DIRECTIVE = "ktlint-disable"
ENABLE_DIRECTIVE = "ktlint-enable"


@dataclass(frozen=True, slots=True)
class SuppressionHint:
    """`range` is a closed interval; an empty `disabled_rules` means every rule."""

    range: TextRange
    disabled_rules: frozenset[str] = frozenset()

    def suppresses(self, offset: int, rule_id: str) -> bool:
        return self.range.contains_inclusive(offset) and (
            not self.disabled_rules or rule_id in self.disabled_rules
        )


@dataclass(frozen=True, slots=True)
class SuppressionIndex:
    """Answers "is `rule_id` suppressed at `offset`?" for one snapshot of a tree."""

    hints: tuple[SuppressionHint, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.hints

    def is_suppressed(self, offset: int, rule_id: str) -> bool:
        if not self.hints:
            return False
        return any(hint.suppresses(offset, rule_id) for hint in self.hints)

    @staticmethod
    def build(root: SyntaxElement) -> SuppressionIndex:
        return SuppressionIndex(collect_suppression_hints(root))


NO_SUPPRESSION = SuppressionIndex()


def collect_suppression_hints(root: SyntaxElement) -> tuple[SuppressionHint, ...]:
    result: list[SuppressionHint] = []
    pending: list[SuppressionHint] = []

    def visit(element: SyntaxElement) -> None:
        if not element.is_comment:
            return
        text = element.text
        start = element.start_offset
        if element.kind == SyntaxKind.LINE_COMMENT:
            args = parse_directive(text.removeprefix("//").strip(), DISABLE_DIRECTIVE)
            if args is not None:
                result.append(SuppressionHint(TextRange(_line_start(element), start), args))
            return

        comment_text = text.removeprefix("/*").removesuffix("*/").strip()
        args = parse_directive(comment_text, DISABLE_DIRECTIVE)
        if args is not None:
            pending.append(SuppressionHint(TextRange.empty(start), args))
            return
        args = parse_directive(comment_text, ENABLE_DIRECTIVE)
        if args is None:
            return
        for index in range(len(pending) - 1, -1, -1):
            if pending[index].disabled_rules == args:
                opening = pending.pop(index)
                result.append(SuppressionHint(TextRange(opening.range.start, start), args))
                return
        logger.debug("Ignoring %s at offset %d without a matching %s", ENABLE_DIRECTIVE, start, DISABLE_DIRECTIVE)

    walk_preorder(root, visit)

    end = root.text_length
    result.extend(SuppressionHint(TextRange(hint.range.start, end), hint.disabled_rules) for hint in pending)
    return tuple(result)


def parse_directive(comment_text: str, directive: str) -> frozenset[str] | None:
    """Rule ids following `directive`, or None if the comment is not that directive.

    The directive must be the whole first word: `ktlint-disabled` does not count.
    """
    if not comment_text.startswith(directive):
        return None
    words = comment_text.split()
    if words[0] != directive:
        return None
    return frozenset(words[1:])


def _line_start(comment: SyntaxElement) -> int:
    line_break = comment.prev_leaf(_is_line_break_whitespace)
    if line_break is None:
        return 0
    return line_break.start_offset + line_break.text.rfind("\n") + 1


def _is_line_break_whitespace(token: SyntaxToken) -> bool:
    return token.is_whitespace and "\n" in token.text
