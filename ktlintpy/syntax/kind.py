"""Unified syntax kinds for parser and CST."""

from enum import IntEnum

from ktlintpy.lexer import TokenKind


class SyntaxKind(IntEnum):
    """Token and node vocabulary of the tree handed to rules."""

    # Trivia tokens
    WHITESPACE = 10
    LINE_COMMENT = 11
    BLOCK_COMMENT = 12
    SKIPPED = 13

    # Lexical tokens
    IDENTIFIER = 20
    STRING = 21
    NUMBER = 22
    PUNCTUATION = 30

    LBRACE = 60
    RBRACE = 61
    LBRACKET = 62
    RBRACKET = 63
    LPAREN = 64
    RPAREN = 65

    # Node kinds
    FILE = 1000
    BLOCK = 1001  # { ... }
    BRACKETED = 1002  # [ ... ]
    PARENTHESIZED = 1003  # ( ... )

    @property
    def is_comment(self) -> bool:
        return self in (SyntaxKind.LINE_COMMENT, SyntaxKind.BLOCK_COMMENT)

    @property
    def is_whitespace(self) -> bool:
        return self == SyntaxKind.WHITESPACE

    @property
    def is_token(self) -> bool:
        return self.value < SyntaxKind.FILE.value

    @property
    def is_node(self) -> bool:
        return self.value >= SyntaxKind.FILE.value

    @staticmethod
    def from_token_kind(kind: TokenKind) -> "SyntaxKind":
        if kind == TokenKind.EOF:
            raise ValueError(f"Unsupported TokenKind mapping: {kind!r}")
        return SyntaxKind(kind.value)

    @staticmethod
    def group_for(opening: TokenKind) -> "SyntaxKind":
        """Node kind wrapping a bracket pair that starts with `opening`."""
        match opening:
            case TokenKind.LBRACE:
                return SyntaxKind.BLOCK
            case TokenKind.LBRACKET:
                return SyntaxKind.BRACKETED
            case TokenKind.LPAREN:
                return SyntaxKind.PARENTHESIZED
            case _:
                raise ValueError(f"Not an opening bracket: {opening!r}")
