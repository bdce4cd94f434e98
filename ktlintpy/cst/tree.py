"""Mutable syntax tree handed to rules.

Offsets are not stored: a node caches its text length and the relative
offsets of its children, and every mutation clears those caches on the
mutated node and its ancestors. `start_offset` therefore always reflects the
current shape of the tree, which fix-mode rules rely on.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from ktlintpy.syntax import SyntaxKind
from ktlintpy.text import TextRange


class SyntaxElement:
    """Shared navigation for nodes and tokens.

    Never instantiated directly; `SyntaxToken` and `SyntaxNode` supply `text`,
    `text_length`, `first_token` and `last_token`.
    """

    __slots__ = ("kind", "parent", "index_in_parent")

    def __init__(self, kind: SyntaxKind) -> None:
        self.kind = kind
        self.parent: SyntaxNode | None = None
        self.index_in_parent = 0

    @property
    def is_comment(self) -> bool:
        return self.kind.is_comment

    @property
    def is_whitespace(self) -> bool:
        return self.kind.is_whitespace

    @property
    def children(self) -> tuple[SyntaxElement, ...]:
        return ()

    @property
    def text(self) -> str:
        raise NotImplementedError

    @property
    def text_length(self) -> int:
        raise NotImplementedError

    @property
    def start_offset(self) -> int:
        offset = 0
        element = self
        while element.parent is not None:
            offset += element.parent._child_offsets()[element.index_in_parent]
            element = element.parent
        return offset

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.text_length

    @property
    def text_range(self) -> TextRange:
        return TextRange.at(self.start_offset, self.text_length)

    def root(self) -> SyntaxElement:
        element = self
        while element.parent is not None:
            element = element.parent
        return element

    def ancestors(self) -> Iterator[SyntaxNode]:
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent

    def next_sibling(self) -> SyntaxElement | None:
        if self.parent is None:
            return None
        index = self.index_in_parent + 1
        siblings = self.parent._children
        if index >= len(siblings):
            return None
        return siblings[index]

    def prev_sibling(self) -> SyntaxElement | None:
        if self.parent is None or self.index_in_parent == 0:
            return None
        return self.parent._children[self.index_in_parent - 1]

    def first_token(self) -> SyntaxToken | None:
        raise NotImplementedError

    def last_token(self) -> SyntaxToken | None:
        raise NotImplementedError

    def prev_leaf(self, predicate: Callable[[SyntaxToken], bool] | None = None) -> SyntaxToken | None:
        """Closest token before this element in document order, optionally matching `predicate`."""
        element: SyntaxElement | None = self
        while element is not None:
            sibling = element.prev_sibling()
            while sibling is not None:
                leaf = sibling.last_token()
                if leaf is not None:
                    if predicate is None or predicate(leaf):
                        return leaf
                    element = leaf
                    break
                sibling = sibling.prev_sibling()
            else:
                element = element.parent
        return None

    def next_leaf(self, predicate: Callable[[SyntaxToken], bool] | None = None) -> SyntaxToken | None:
        """Closest token after this element in document order, optionally matching `predicate`."""
        element: SyntaxElement | None = self
        while element is not None:
            sibling = element.next_sibling()
            while sibling is not None:
                leaf = sibling.first_token()
                if leaf is not None:
                    if predicate is None or predicate(leaf):
                        return leaf
                    element = leaf
                    break
                sibling = sibling.next_sibling()
            else:
                element = element.parent
        return None

    def detach(self) -> None:
        """Remove this element from its parent; it becomes the root of its own tree."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def replace_with(self, replacement: SyntaxElement) -> None:
        if self.parent is None:
            raise ValueError("Cannot replace a root element")
        self.parent.replace_child(self, replacement)

    def _invalidate(self) -> None:
        for ancestor in self.ancestors():
            ancestor._length = None
            ancestor._offsets = None


class SyntaxToken(SyntaxElement):
    """Leaf of the tree; owns its text."""

    __slots__ = ("_text",)

    def __init__(self, kind: SyntaxKind, text: str) -> None:
        if not kind.is_token:
            raise ValueError(f"{kind!r} is not a token kind")
        super().__init__(kind)
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    @property
    def text_length(self) -> int:
        return len(self._text)

    def first_token(self) -> SyntaxToken | None:
        return self

    def last_token(self) -> SyntaxToken | None:
        return self

    def replace_text(self, text: str) -> None:
        """Rewrite this token's text in place."""
        self._text = text
        self._invalidate()

    def __repr__(self) -> str:
        return f"SyntaxToken({self.kind.name}, {self._text!r})"


class SyntaxNode(SyntaxElement):
    """Inner node; its text is the concatenation of its tokens."""

    __slots__ = ("_children", "_length", "_offsets")

    def __init__(self, kind: SyntaxKind, children: tuple[SyntaxElement, ...] = ()) -> None:
        if not kind.is_node:
            raise ValueError(f"{kind!r} is not a node kind")
        super().__init__(kind)
        self._children: list[SyntaxElement] = []
        self._length: int | None = None
        self._offsets: list[int] | None = None
        for child in children:
            self.append_child(child)

    @property
    def children(self) -> tuple[SyntaxElement, ...]:
        return tuple(self._children)

    @property
    def text(self) -> str:
        return "".join(token.text for token in self.descendants_tokens())

    @property
    def text_length(self) -> int:
        if self._length is None:
            self._length = sum(child.text_length for child in self._children)
        return self._length

    def child_nodes(self) -> tuple[SyntaxNode, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxNode))

    def descendants_tokens(self) -> tuple[SyntaxToken, ...]:
        tokens: list[SyntaxToken] = []
        stack: list[SyntaxElement] = list(reversed(self._children))
        while stack:
            element = stack.pop()
            if isinstance(element, SyntaxToken):
                tokens.append(element)
            else:
                stack.extend(reversed(element.children))
        return tuple(tokens)

    def first_token(self) -> SyntaxToken | None:
        for child in self._children:
            token = child.first_token()
            if token is not None:
                return token
        return None

    def last_token(self) -> SyntaxToken | None:
        for child in reversed(self._children):
            token = child.last_token()
            if token is not None:
                return token
        return None

    def insert_child(self, index: int, child: SyntaxElement) -> None:
        if child.parent is not None:
            raise ValueError("Child is already attached; detach it first")
        if any(ancestor is child for ancestor in (self, *self.ancestors())):
            raise ValueError("Cannot insert an element into its own subtree")
        self._children.insert(index, child)
        child.parent = self
        self._renumber(index)
        self._invalidate_self()

    def append_child(self, child: SyntaxElement) -> None:
        self.insert_child(len(self._children), child)

    def remove_child(self, child: SyntaxElement) -> None:
        if child.parent is not self:
            raise ValueError("Element is not a child of this node")
        index = child.index_in_parent
        del self._children[index]
        child.parent = None
        child.index_in_parent = 0
        self._renumber(index)
        self._invalidate_self()

    def replace_child(self, old: SyntaxElement, new: SyntaxElement) -> None:
        if old.parent is not self:
            raise ValueError("Element is not a child of this node")
        index = old.index_in_parent
        self.remove_child(old)
        self.insert_child(index, new)

    def _child_offsets(self) -> list[int]:
        if self._offsets is None:
            offsets: list[int] = []
            current = 0
            for child in self._children:
                offsets.append(current)
                current += child.text_length
            self._offsets = offsets
            self._length = current
        return self._offsets

    def _renumber(self, start: int) -> None:
        for index in range(start, len(self._children)):
            self._children[index].index_in_parent = index

    def _invalidate_self(self) -> None:
        self._length = None
        self._offsets = None
        self._invalidate()

    def __repr__(self) -> str:
        return f"SyntaxNode({self.kind.name}, {len(self._children)} children)"


def walk_preorder(root: SyntaxElement, visit: Callable[[SyntaxElement], None]) -> None:
    """Visit `root` and its descendants depth-first, parents before children.

    A node's children are read after `visit` has returned for that node, so a
    callback that rewrites the children of the node it is given sees its
    changes honoured by the walk.
    """
    stack: list[SyntaxElement] = [root]
    while stack:
        element = stack.pop()
        visit(element)
        stack.extend(reversed(element.children))


__all__ = [
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "walk_preorder",
]
