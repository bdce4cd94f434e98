"""Mutable CST structures."""

from ktlintpy.cst.builder import TreeBuilder
from ktlintpy.cst.tree import SyntaxElement, SyntaxNode, SyntaxToken, walk_preorder

__all__ = [
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "TreeBuilder",
    "walk_preorder",
]
