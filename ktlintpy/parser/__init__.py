"""Reference parser collaborator (lexer + bracket grouping + tree builder)."""

from ktlintpy.parser.options import ParseMode, ParserOptions
from ktlintpy.parser.parser import GenericParser, ParsedTree, SourceParser, parse

__all__ = [
    "GenericParser",
    "ParseMode",
    "ParsedTree",
    "ParserOptions",
    "SourceParser",
    "parse",
]
