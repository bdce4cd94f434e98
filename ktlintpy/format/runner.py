"""Detect-then-fix traversal."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ktlintpy.cst import SyntaxElement, SyntaxNode, walk_preorder
from ktlintpy.diagnostics import LintError, RuleExecutionError
from ktlintpy.lint.runner import Registry, resolve_registry, run_detection
from ktlintpy.parser import SourceParser
from ktlintpy.pipeline.prepared import prepare_source
from ktlintpy.rules import RuleSet
from ktlintpy.suppression import SuppressionIndex
from ktlintpy.text import restore_line_separators

logger = logging.getLogger(__name__)


def format_text(
    text: str,
    rule_sets: Iterable[RuleSet],
    on_error: Callable[[LintError, bool], None],
    *,
    parser: SourceParser | None = None,
) -> str:
    """Report every violation and return `text` with auto-correctable ones fixed.

    `on_error(error, corrected)` is told whether each finding can be (and will
    be) corrected. When nothing is auto-correctable `text` is returned as is.
    """
    registry = resolve_registry(rule_sets)
    prepared = prepare_source(text, parser)
    suppression = SuppressionIndex.build(prepared.root)

    autocorrect = False

    def sink(error: LintError, can_be_autocorrected: bool) -> None:
        nonlocal autocorrect
        if can_be_autocorrected:
            autocorrect = True
        on_error(error, can_be_autocorrected)

    run_detection(prepared, registry, suppression, sink)
    if not autocorrect:
        return text

    logger.debug("Auto-correctable violations found, running fix pass")
    run_fixes(prepared.root, registry, suppression)
    return restore_line_separators(prepared.root.text, text)


def run_fixes(root: SyntaxNode, registry: Registry, suppression: SuppressionIndex) -> None:
    """Visit every element once with every unsuppressed rule in fix mode.

    Fixes can move or delete directive comments, so the suppression index is
    rebuilt from the current tree after every auto-correctable report. An
    index that started out empty stays empty.
    """
    current = suppression

    def emit(offset: int, message: str, can_be_autocorrected: bool) -> None:
        nonlocal current
        if can_be_autocorrected and not current.is_empty:
            current = SuppressionIndex.build(root)
            logger.debug("Rebuilt suppression index: %d hints", len(current.hints))

    def visit(node: SyntaxElement) -> None:
        for rule_id, rule in registry:
            if current.is_suppressed(node.start_offset, rule_id):
                continue
            try:
                rule.visit(node, True, emit)
            except Exception as exc:
                # The node may have moved or left the tree; its position is meaningless here.
                raise RuleExecutionError(0, 0, rule_id) from exc

    walk_preorder(root, visit)
