"""Lexer."""

from ktlintpy.diagnostics import (
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
)
from ktlintpy.lexer.tokens import Token, TokenKind
from ktlintpy.text import TextRange, slice_text_range

_SINGLE_CHAR_KINDS = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


class Lexer:
    """Lossless lexer for C-family source that emits trivia and non-trivia tokens.

    Expects `\\n`-only line breaks; the engine normalizes input before parsing.
    """

    def __init__(self, source: str, *, nested_block_comments: bool = True) -> None:
        self._source = source
        self._position = 0
        self._current_start = 0
        self._nested_block_comments = nested_block_comments
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange(self._current_start, self._position)

    def next_token(self) -> Token:
        self._current_start = self._position

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._current_start))

        kind = self._lex_token()
        return Token(kind, self.current_range)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch.isspace():
            while not self.is_eof and self._current_char().isspace():
                self._advance(1)
            return TokenKind.WHITESPACE

        if ch == "/" and self._peek_char() == "/":
            return self._lex_line_comment()

        if ch == "/" and self._peek_char() == "*":
            return self._lex_block_comment()

        if ch == '"' and self._source.startswith('"""', self._position):
            return self._lex_raw_string()

        if ch == '"' or ch == "'":
            return self._lex_string(ch)

        if ch.isdigit():
            return self._lex_number()

        if ch.isalpha() or ch == "_":
            return self._lex_identifier()

        kind = _SINGLE_CHAR_KINDS.get(ch)
        self._advance(1)
        if kind is not None:
            return kind
        if ch.isprintable():
            return TokenKind.PUNCTUATION

        # Fallback: preserve control characters as SKIPPED.
        return TokenKind.SKIPPED

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        end = self._source.find("\n", self._position)
        self._position = len(self._source) if end == -1 else end
        return TokenKind.LINE_COMMENT

    def _lex_block_comment(self) -> TokenKind:
        self._advance(2)
        depth = 1
        while not self.is_eof:
            if self._source.startswith("*/", self._position):
                self._advance(2)
                depth -= 1
                if depth == 0:
                    return TokenKind.BLOCK_COMMENT
                continue
            if self._nested_block_comments and self._source.startswith("/*", self._position):
                self._advance(2)
                depth += 1
                continue
            self._advance(1)

        self._report(LEXER_UNTERMINATED_BLOCK_COMMENT)
        return TokenKind.BLOCK_COMMENT

    def _lex_raw_string(self) -> TokenKind:
        self._advance(3)
        end = self._source.find('"""', self._position)
        if end == -1:
            self._position = len(self._source)
            self._report(LEXER_UNTERMINATED_STRING)
            return TokenKind.STRING
        self._position = end + 3
        # Kotlin-style raw strings may end with extra quotes: """a""""
        while self._current_char() == '"':
            self._advance(1)
        return TokenKind.STRING

    def _lex_string(self, quote: str) -> TokenKind:
        # Consume opening quote
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == quote:
                self._advance(1)
                return TokenKind.STRING
            if ch == "\\":
                self._advance(2 if self._position + 1 < len(self._source) else 1)
                continue
            if ch == "\n":
                break
            self._advance(1)

        self._report(LEXER_UNTERMINATED_STRING)
        return TokenKind.STRING

    def _lex_number(self) -> TokenKind:
        # Loose on purpose: 0xFF, 1_000L, 1.5e10f all end up as one token.
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            if ch == "." and self._peek_char().isdigit():
                self._advance(1)
                continue
            break
        return TokenKind.NUMBER

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break
        return TokenKind.IDENTIFIER

    def _report(self, spec: DiagnosticSpec) -> None:
        self._diagnostics.append(Diagnostic.from_spec(spec, self.current_range))

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)
