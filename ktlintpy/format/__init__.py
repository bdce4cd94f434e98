"""Format traversal."""

from ktlintpy.format.runner import format_text, run_fixes

__all__ = ["format_text", "run_fixes"]
