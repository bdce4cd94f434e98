"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from ktlintpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens
    # -------------------------
    WHITESPACE = 10  # spaces, tabs and line breaks
    LINE_COMMENT = 11  # // ...
    BLOCK_COMMENT = 12  # /* ... */
    SKIPPED = 13  # bytes the lexer has no rule for

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21
    NUMBER = 22

    # -------------------------
    # Punctuation
    # -------------------------
    PUNCTUATION = 30  # any other single character: operators, separators

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]
    LPAREN = 64  # (
    RPAREN = 65  # )

    @property
    def is_opening_bracket(self) -> bool:
        return self in (TokenKind.LBRACE, TokenKind.LBRACKET, TokenKind.LPAREN)

    @property
    def is_closing_bracket(self) -> bool:
        return self in (TokenKind.RBRACE, TokenKind.RBRACKET, TokenKind.RPAREN)


CLOSING_BRACKET: Final[dict[TokenKind, TokenKind]] = {
    TokenKind.LBRACE: TokenKind.RBRACE,
    TokenKind.LBRACKET: TokenKind.RBRACKET,
    TokenKind.LPAREN: TokenKind.RPAREN,
}
"""Opening bracket kind -> the closing kind that balances it."""


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
