"""Line break normalization and restoration of the input's line separator."""

import os


def normalize_line_breaks(text: str) -> str:
    """Replace every `\\r\\n` and lone `\\r` with `\\n`."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def determine_line_separator(text: str) -> str:
    """Pick the separator to write back, judged by the last line break of `text`."""
    index = text.rfind("\n")
    if index == -1:
        return "\r" if "\r" in text else os.linesep
    if index != 0 and text[index - 1] == "\r":
        return "\r\n"
    return "\n"


def restore_line_separators(rendered: str, original: str) -> str:
    """Re-render `\\n`-only text using the separator of `original`."""
    separator = determine_line_separator(original)
    if separator == "\n":
        return rendered
    return rendered.replace("\n", separator)
