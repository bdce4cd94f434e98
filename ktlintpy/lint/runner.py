"""Lint-only traversal."""

from __future__ import annotations

import logging
from typing import TypeAlias
from collections.abc import Callable, Iterable

from ktlintpy.cst import SyntaxElement, walk_preorder
from ktlintpy.diagnostics import LintError, RuleExecutionError
from ktlintpy.parser import SourceParser
from ktlintpy.pipeline.prepared import PreparedSource, prepare_source
from ktlintpy.rules import Rule, RuleSet, flatten_rule_sets, validate_rule_sets
from ktlintpy.suppression import SuppressionIndex

logger = logging.getLogger(__name__)

Registry: TypeAlias = list[tuple[str, Rule]]
FindingSink: TypeAlias = Callable[[LintError, bool], None]


def lint(
    text: str,
    rule_sets: Iterable[RuleSet],
    on_error: Callable[[LintError], None],
    *,
    parser: SourceParser | None = None,
) -> None:
    """Report every violation in `text` through `on_error`.

    Raises `ParseError` if `text` cannot be parsed and `RuleExecutionError` if
    a rule fails; no further findings are delivered after either.
    """
    registry = resolve_registry(rule_sets)
    prepared = prepare_source(text, parser)
    suppression = SuppressionIndex.build(prepared.root)
    run_detection(prepared, registry, suppression, lambda error, _: on_error(error))


def resolve_registry(rule_sets: Iterable[RuleSet]) -> Registry:
    resolved = tuple(rule_sets)
    validate_rule_sets(resolved)
    return flatten_rule_sets(resolved)


def run_detection(
    prepared: PreparedSource,
    registry: Registry,
    suppression: SuppressionIndex,
    sink: FindingSink,
) -> None:
    """Visit every element once with every unsuppressed rule in non-fix mode."""
    positions = prepared.positions
    logger.debug("Detection pass: %d rules over %d characters", len(registry), len(prepared.normalized_text))

    def visit(node: SyntaxElement) -> None:
        start = node.start_offset
        for rule_id, rule in registry:
            if suppression.is_suppressed(start, rule_id):
                continue

            def emit(offset: int, message: str, can_be_autocorrected: bool, rule_id: str = rule_id) -> None:
                line, column = positions.resolve(offset)
                sink(LintError(line, column, rule_id, message), can_be_autocorrected)

            try:
                rule.visit(node, False, emit)
            except Exception as exc:
                line, column = positions.resolve(start)
                raise RuleExecutionError(line, column, rule_id) from exc

    walk_preorder(prepared.root, visit)
