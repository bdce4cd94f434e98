"""Stack-based builder for the mutable syntax tree."""

from ktlintpy.cst.tree import SyntaxElement, SyntaxNode, SyntaxToken
from ktlintpy.syntax import SyntaxKind


class TreeBuilder:
    """Biome-style tree builder: start/finish nodes, push tokens in between."""

    def __init__(self) -> None:
        self._stack: list[tuple[SyntaxKind, list[SyntaxElement]]] = []
        self._roots: list[SyntaxElement] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    def start_node(self, kind: SyntaxKind) -> None:
        self._stack.append((kind, []))

    def token(self, kind: SyntaxKind, text: str) -> None:
        self._push_element(SyntaxToken(kind, text))

    def finish_node(self) -> None:
        if not self._stack:
            raise RuntimeError("finish_node called with empty builder stack")

        kind, children = self._stack.pop()
        self._push_element(SyntaxNode(kind, tuple(children)))

    def finish(self) -> SyntaxNode:
        if self._stack:
            raise RuntimeError("Cannot finish tree: unclosed nodes remain on stack")

        if len(self._roots) == 1 and isinstance(self._roots[0], SyntaxNode):
            root = self._roots[0]
            if root.kind == SyntaxKind.FILE:
                return root

        return SyntaxNode(SyntaxKind.FILE, tuple(self._roots))

    def _push_element(self, element: SyntaxElement) -> None:
        if self._stack:
            self._stack[-1][1].append(element)
            return
        self._roots.append(element)
