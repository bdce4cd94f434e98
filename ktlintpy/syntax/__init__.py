"""Syntax kinds."""

from ktlintpy.syntax.kind import SyntaxKind

__all__ = ["SyntaxKind"]
