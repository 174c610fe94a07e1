"""Compiled regex patterns for markdown pipe-table detection.

Used by detection.py to split page text into lines and classify each line
as a table row, a header separator, or ordinary content.
"""

import re

# ─── Line Patterns ───────────────────────────────────────────────────────────

# Any pipe-delimited row: "| a | b |", leading/trailing whitespace allowed
TABLE_ROW_RE = re.compile(r"^\s*\|(.+)\|\s*$")

# Header separator such as "| --- | :---: |" or "|---|---|"
TABLE_SEPARATOR_RE = re.compile(r"^\s*\|[\s:-]+\|[\s|:-]*$")


# ─── Text Splitting ──────────────────────────────────────────────────────────

# One line together with its own "\n" terminator; the final line may lack one.
# Keeping the terminator lets byte widths be summed without guessing.
LINE_RE = re.compile(r"[^\n]*\n|[^\n]+\Z")
