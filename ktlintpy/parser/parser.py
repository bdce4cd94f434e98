"""Bracket-structured parser for C-family source text.

Grammar-free on purpose: it only groups balanced `{}`, `[]` and `()` pairs
into nodes, which is all the engine and most layout rules need.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ktlintpy.cst import SyntaxNode, TreeBuilder
from ktlintpy.diagnostics import (
    LEXER_UNTERMINATED_STRING,
    PARSER_MISMATCHED_BRACKET,
    PARSER_MISSING_CLOSING_BRACKET,
    PARSER_UNEXPECTED_CLOSING_BRACKET,
    Diagnostic,
    collect_diagnostics,
    has_errors,
)
from ktlintpy.lexer import CLOSING_BRACKET, Lexer, Token, TokenKind, token_text
from ktlintpy.parser.options import ParseMode, ParserOptions
from ktlintpy.syntax import SyntaxKind
from ktlintpy.text import TextRange


@dataclass(slots=True)
class ParsedTree:
    """Tree plus the diagnostics collected while building it."""

    root: SyntaxNode
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


class SourceParser(Protocol):
    """Turns `\\n`-normalized text into a tree; reports syntax errors as diagnostics."""

    def parse(self, text: str) -> ParsedTree: ...


class GenericParser:
    """Reentrant `SourceParser`: holds only its options, never per-call state."""

    def __init__(self, options: ParserOptions | None = None, *, mode: ParseMode | None = None) -> None:
        self.options = _resolve_options(options, mode)

    def parse(self, text: str) -> ParsedTree:
        return parse(text, self.options)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedTree:
    resolved_options = _resolve_options(options=options, mode=mode)

    lexer = Lexer(text, nested_block_comments=resolved_options.nested_block_comments)
    tokens = lexer.lex()
    lexer_diagnostics = [_apply_string_policy(d, resolved_options) for d in lexer.diagnostics]

    builder = TreeBuilder()
    builder.start_node(SyntaxKind.FILE)
    parser_diagnostics = _build(text, tokens, builder, resolved_options)
    builder.finish_node()

    diagnostics = collect_diagnostics(lexer_diagnostics, parser_diagnostics)
    diagnostics.sort(key=lambda d: (d.range.start, d.range.end, d.code))
    return ParsedTree(root=builder.finish(), diagnostics=diagnostics)


def _build(
    text: str,
    tokens: list[Token],
    builder: TreeBuilder,
    options: ParserOptions,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    open_brackets: list[Token] = []

    for token in tokens:
        kind = token.kind
        if kind == TokenKind.EOF:
            break

        if kind.is_opening_bracket:
            builder.start_node(SyntaxKind.group_for(kind))
            builder.token(SyntaxKind.from_token_kind(kind), token_text(text, token))
            open_brackets.append(token)
            continue

        if kind.is_closing_bracket:
            match_index = _find_open_bracket(open_brackets, kind)
            if match_index is None:
                spec = PARSER_UNEXPECTED_CLOSING_BRACKET if not open_brackets else PARSER_MISMATCHED_BRACKET
                severity = "warning" if options.allow_extra_closing_bracket else "error"
                diagnostics.append(Diagnostic.from_spec(spec, token.range, severity=severity))
                builder.token(SyntaxKind.from_token_kind(kind), token_text(text, token))
                continue

            # Brackets opened after the matching one were never closed.
            while len(open_brackets) - 1 > match_index:
                diagnostics.append(_missing_closing(open_brackets.pop(), options))
                builder.finish_node()
            open_brackets.pop()
            builder.token(SyntaxKind.from_token_kind(kind), token_text(text, token))
            builder.finish_node()
            continue

        builder.token(SyntaxKind.from_token_kind(kind), token_text(text, token))

    while open_brackets:
        diagnostics.append(_missing_closing(open_brackets.pop(), options))
        builder.finish_node()

    return diagnostics


def _find_open_bracket(open_brackets: list[Token], closing: TokenKind) -> int | None:
    for index in range(len(open_brackets) - 1, -1, -1):
        if CLOSING_BRACKET[open_brackets[index].kind] == closing:
            return index
    return None


def _missing_closing(opening: Token, options: ParserOptions) -> Diagnostic:
    severity = "warning" if options.allow_missing_closing_bracket else "error"
    return Diagnostic.from_spec(
        PARSER_MISSING_CLOSING_BRACKET,
        TextRange.empty(opening.range.start),
        severity=severity,
    )


def _apply_string_policy(diagnostic: Diagnostic, options: ParserOptions) -> Diagnostic:
    if diagnostic.code == LEXER_UNTERMINATED_STRING.code and options.allow_unterminated_string:
        return Diagnostic(
            code=diagnostic.code,
            message=diagnostic.message,
            range=diagnostic.range,
            severity="warning",
            category=diagnostic.category,
        )
    return diagnostic
