"""Text ranges, positions and line breaks."""

from ktlintpy.text.text import TextRange, slice_text_range
from ktlintpy.text.line_break import (
    determine_line_separator,
    normalize_line_breaks,
    restore_line_separators,
)
from ktlintpy.text.position import (
    LineBreakCorrection,
    PositionIndex,
    Segment,
    SegmentTree,
    line_break_offset,
)

__all__ = [
    "LineBreakCorrection",
    "PositionIndex",
    "Segment",
    "SegmentTree",
    "TextRange",
    "determine_line_separator",
    "line_break_offset",
    "normalize_line_breaks",
    "restore_line_separators",
    "slice_text_range",
]
