"""Offset to (line, column) resolution against the caller's original text.

The engine parses a copy of the input where every `\\r\\n` and lone `\\r` has
been replaced by `\\n`, so tree offsets live in that normalized coordinate
space. `PositionIndex` maps them back: first it adds the number of carriage
returns dropped before the offset, then it looks the corrected offset up in
the original text's line table.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from ktlintpy.diagnostics.errors import PositionOutOfRangeError

LineBreakCorrection: TypeAlias = Callable[[int], int]


@dataclass(frozen=True, slots=True)
class Segment:
    left: int
    right: int


class SegmentTree:
    """Sorted, non-overlapping segments `[b[i], b[i + 1] - 1]` with binary search lookup."""

    __slots__ = ("_segments",)

    def __init__(self, boundaries: Sequence[int]) -> None:
        if len(boundaries) < 2:
            raise ValueError("At least two data points are required")
        for previous, current in zip(boundaries, boundaries[1:]):
            if previous > current:
                raise ValueError("Data points are not sorted (ASC)")
        self._segments = tuple(
            Segment(left, right - 1) for left, right in zip(boundaries, boundaries[1:])
        )

    def __len__(self) -> int:
        return len(self._segments)

    def segment(self, index: int) -> Segment:
        return self._segments[index]

    def index_of(self, value: int) -> int:
        """Index of the segment containing `value`, or -1 if there is none."""
        low = 0
        high = len(self._segments) - 1
        while low <= high:
            middle = low + (high - low) // 2
            segment = self._segments[middle]
            if value < segment.left:
                high = middle - 1
            elif segment.right < value:
                low = middle + 1
            else:
                return middle
        return -1


def line_break_offset(text: str) -> LineBreakCorrection:
    """Build the normalized-offset -> removed-carriage-return-count correction for `text`.

    The k-th `\\r\\n` (0-based) at original position p lands at normalized
    position p - k, so any normalized offset strictly after that point has
    lost k + 1 characters.
    """
    boundaries = [0]
    removed = 0
    index = text.find("\r\n")
    while index != -1:
        boundaries.append(index - removed + 1)
        removed += 1
        index = text.find("\r\n", index + 2)
    if removed == 0:
        return _no_correction
    boundaries.append(len(text) + 1)
    tree = SegmentTree(boundaries)

    def correction(offset: int) -> int:
        index = tree.index_of(offset)
        if index == -1:
            raise PositionOutOfRangeError(offset)
        return index

    return correction


def _no_correction(offset: int) -> int:
    return 0


class PositionIndex:
    """Resolver from normalized-text offsets to 1-based (line, column) in the original text."""

    __slots__ = ("_lines", "_correction")

    def __init__(self, lines: SegmentTree, correction: LineBreakCorrection) -> None:
        self._lines = lines
        self._correction = correction

    @staticmethod
    def build(text: str) -> PositionIndex:
        line_starts = [0]
        index = text.find("\n")
        while index != -1:
            line_starts.append(index + 1)
            index = text.find("\n", index + 1)
        # The sentinel keeps the end-of-input offset inside the last line.
        line_starts.append(len(text) + 1)
        return PositionIndex(SegmentTree(line_starts), line_break_offset(text))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def resolve(self, offset: int) -> tuple[int, int]:
        """Resolve an offset produced by the parser over the normalized text."""
        return self.locate(offset + self._correction(offset))

    def locate(self, offset: int) -> tuple[int, int]:
        """Resolve an offset that is already expressed in original-text coordinates."""
        line = self._lines.index_of(offset)
        if line == -1:
            raise PositionOutOfRangeError(offset)
        return line + 1, offset - self._lines.segment(line).left + 1
