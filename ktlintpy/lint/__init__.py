"""Lint traversal."""

from ktlintpy.lint.runner import lint, resolve_registry, run_detection

__all__ = ["lint", "resolve_registry", "run_detection"]
