"""Inline suppression directives."""

from ktlintpy.suppression.hints import (
    DISABLE_DIRECTIVE,
    ENABLE_DIRECTIVE,
    NO_SUPPRESSION,
    SuppressionHint,
    SuppressionIndex,
    collect_suppression_hints,
    parse_directive,
)

__all__ = [
    "DISABLE_DIRECTIVE",
    "ENABLE_DIRECTIVE",
    "NO_SUPPRESSION",
    "SuppressionHint",
    "SuppressionIndex",
    "collect_suppression_hints",
    "parse_directive",
]
