"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling which structural problems abort a lint/format call."""

    mode: ParseMode = ParseMode.STRICT
    allow_extra_closing_bracket: bool = False
    allow_missing_closing_bracket: bool = False
    allow_unterminated_string: bool = False
    nested_block_comments: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                allow_extra_closing_bracket=True,
                allow_missing_closing_bracket=True,
                allow_unterminated_string=True,
            )

        return ParserOptions(mode=mode)
