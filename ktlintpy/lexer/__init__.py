"""Lexer."""

from ktlintpy.lexer.lexer import Lexer, token_text
from ktlintpy.lexer.tokens import CLOSING_BRACKET, Token, TokenKind

__all__ = [
    "CLOSING_BRACKET",
    "Lexer",
    "Token",
    "TokenKind",
    "token_text",
]
