"""Parse-once carrier shared by the lint and format passes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ktlintpy.cst import SyntaxNode
from ktlintpy.diagnostics import ParseError, first_error
from ktlintpy.parser import GenericParser, SourceParser
from ktlintpy.text import PositionIndex, normalize_line_breaks

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PreparedSource:
    """Original text, its normalized copy, the tree built from that copy and the position index."""

    source_text: str
    normalized_text: str
    root: SyntaxNode
    positions: PositionIndex


def prepare_source(text: str, parser: SourceParser | None = None) -> PreparedSource:
    """Normalize line breaks and parse; raise `ParseError` on the first syntax error."""
    positions = PositionIndex.build(text)
    normalized = normalize_line_breaks(text)
    resolved_parser = parser if parser is not None else GenericParser()
    parsed = resolved_parser.parse(normalized)

    error = first_error(parsed.diagnostics)
    if error is not None:
        line, column = positions.resolve(error.range.start)
        logger.debug("Parse failed at %d:%d with %s", line, column, error.code)
        raise ParseError(line, column, error.message)

    return PreparedSource(
        source_text=text,
        normalized_text=normalized,
        root=parsed.root,
        positions=positions,
    )
