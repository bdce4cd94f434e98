"""Small rules shared by engine tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from ktlintpy.cst import SyntaxElement, SyntaxNode, SyntaxToken
from ktlintpy.rules import EmitFn
from ktlintpy.syntax import SyntaxKind


@dataclass(slots=True)
class NoTrailingSpacesRule:
    """Flags spaces/tabs before a line break; fixes by dropping them."""

    id: str = "no-trailing-spaces"

    def visit(self, node: SyntaxElement, autocorrect: bool, emit: EmitFn) -> None:
        if not isinstance(node, SyntaxToken) or not node.is_whitespace or "\n" not in node.text:
            return
        lines = node.text.split("\n")
        offset = node.start_offset
        for line in lines[:-1]:
            stripped = line.rstrip(" \t")
            if stripped != line:
                emit(offset + len(stripped), "Trailing space(s)", True)
            offset += len(line) + 1
        if autocorrect:
            fixed = "\n".join(line.rstrip(" \t") for line in lines[:-1]) + "\n" + lines[-1]
            if fixed != node.text:
                node.replace_text(fixed)


@dataclass(slots=True)
class NoSemicolonsRule:
    """Flags every `;` token; fixes by removing it."""

    id: str = "no-semi"

    def visit(self, node: SyntaxElement, autocorrect: bool, emit: EmitFn) -> None:
        if node.kind != SyntaxKind.PUNCTUATION or node.text != ";":
            return
        emit(node.start_offset, "Unnecessary semicolon", True)
        if autocorrect:
            node.detach()


@dataclass(slots=True)
class ForbiddenIdentifierRule:
    """Flags identifiers spelled `name`; cannot fix them."""

    name: str
    id: str = "no-unused"

    def visit(self, node: SyntaxElement, autocorrect: bool, emit: EmitFn) -> None:
        if node.kind == SyntaxKind.IDENTIFIER and node.text == self.name:
            emit(node.start_offset, f"Identifier `{self.name}` is not allowed", False)


@dataclass(slots=True)
class ExplodingRule:
    """Raises on identifiers spelled `boom`, optionally only while fixing."""

    id: str = "explode"
    only_when_fixing: bool = False

    def visit(self, node: SyntaxElement, autocorrect: bool, emit: EmitFn) -> None:
        if node.kind != SyntaxKind.IDENTIFIER or node.text != "boom":
            return
        if self.only_when_fixing and not autocorrect:
            emit(node.start_offset, "Boom ahead", True)
            return
        raise RuntimeError("rule bug")


@dataclass(slots=True)
class RecordingRule:
    """Records every visit as (kind, start offset, autocorrect)."""

    id: str = "record"
    visits: list[tuple[SyntaxKind, int, bool]] = field(default_factory=list)

    def visit(self, node: SyntaxElement, autocorrect: bool, emit: EmitFn) -> None:
        self.visits.append((node.kind, node.start_offset, autocorrect))


@dataclass(slots=True)
class DisableAllHeaderRule:
    """Wants files to open with a blanket `/* ktlint-disable */`; fixes by inserting one."""

    id: str = "disable-all-header"

    def visit(self, node: SyntaxElement, autocorrect: bool, emit: EmitFn) -> None:
        if not isinstance(node, SyntaxNode) or node.kind != SyntaxKind.FILE:
            return
        first = node.first_token()
        if first is not None and first.kind == SyntaxKind.BLOCK_COMMENT:
            return
        emit(0, "Missing disable-all header", True)
        if autocorrect:
            node.insert_child(0, SyntaxToken(SyntaxKind.BLOCK_COMMENT, "/* ktlint-disable */"))
