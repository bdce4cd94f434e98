from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Range of offsets in text, start <= end.

    Lexer tokens use it half-open ([start, end)); suppression hints treat it as
    a closed interval via `contains_inclusive`.
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: int, length: int) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset, offset + length)

    @staticmethod
    def empty(offset: int) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def contains_inclusive(self, offset: int) -> bool:
        """Check if the range contains the given offset, inclusive of end."""
        return self.start <= offset <= self.end

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start : range.end]
