"""Table fragment detection over one page's rendered markdown.

Scans the text line by line for maximal runs of pipe-delimited rows and
describes each run as a TableFragment: where it sits (byte offsets, whether
only blank lines surround it), whether it carries a header + separator,
and its parsed cells.

Parsing is permissive.  Nothing here raises on odd input; a run without a
usable separator is simply reported as incomplete.
"""

import logging
from itertools import accumulate

from docmark.tables.patterns import LINE_RE, TABLE_ROW_RE, TABLE_SEPARATOR_RE
from docmark.tables.schema import TableFragment

logger = logging.getLogger(__name__)


# ─── Row Parsing ─────────────────────────────────────────────────────────────


def _is_separator(line: str) -> bool:
    return bool(TABLE_SEPARATOR_RE.match(line))


def _parse_row(line: str) -> list[str]:
    """Split a ``| a | b |`` row into trimmed cells; return [] for non-rows."""
    trimmed = line.strip()
    if len(trimmed) < 2 or not trimmed.startswith("|") or not trimmed.endswith("|"):
        return []
    return [cell.strip() for cell in trimmed[1:-1].split("|")]


def _parse_structure(rows: list[str], has_header: bool) -> tuple[list[str] | None, list[list[str]], int]:
    """Return (headers, data_rows, column_count) for one run of table lines.

    The first row is the header when *has_header* is set and it is not itself
    a separator.  Separator rows
    are dropped wherever they appear; any other row is data, including rows
    that sit between the header and a late separator.
    """
    headers: list[str] | None = None
    data_rows: list[list[str]] = []
    column_count = 0

    for i, line in enumerate(rows):
        if _is_separator(line):
            continue
        cells = _parse_row(line)
        if not cells:
            continue
        column_count = max(column_count, len(cells))
        if has_header and i == 0:
            headers = cells
        else:
            data_rows.append(cells)

    return headers, data_rows, column_count


# ─── Offsets ─────────────────────────────────────────────────────────────────


def _is_char_boundary(encoded: bytes, pos: int) -> bool:
    """True if *pos* does not fall inside a multi-byte UTF-8 sequence."""
    if pos < 0 or pos > len(encoded):
        return False
    # Continuation bytes look like 0b10xxxxxx
    return pos == len(encoded) or (encoded[pos] & 0xC0) != 0x80


def _is_blank(line: str) -> bool:
    return not line.strip()


# ─── Detection ───────────────────────────────────────────────────────────────


def _build_fragment(lines: list[str], start: int, end: int, offsets: list[int], encoded: bytes) -> TableFragment:
    """Describe the run ``lines[start:end]``; *offsets[k]* is the byte offset where line k begins."""
    run = lines[start:end]
    start_pos = offsets[start]
    end_pos = offsets[end]
    assert _is_char_boundary(encoded, start_pos), f"start_pos {start_pos} is not a char boundary"
    assert _is_char_boundary(encoded, end_pos), f"end_pos {end_pos} is not a char boundary"

    # Any separator after the first row marks a header; a leading separator leaves headers unset
    has_header = any(_is_separator(line) for line in run[1:])
    headers, data_rows, column_count = _parse_structure(run, has_header)

    return TableFragment(
        content="\n".join(run),
        start_pos=start_pos,
        end_pos=end_pos,
        has_header=has_header,
        is_complete=has_header,
        at_content_start=all(_is_blank(line) for line in lines[:start]),
        at_content_end=all(_is_blank(line) for line in lines[end:]),
        column_count=column_count,
        headers=headers,
        data_rows=data_rows,
    )


def detect_table_fragments(text: str) -> list[TableFragment]:
    """Return one TableFragment per maximal run of pipe-table rows in *text*, in order."""
    raw_lines = LINE_RE.findall(text)
    if not raw_lines:
        return []

    # Match against the bare line; measure with the terminator included
    lines = [raw.rstrip("\r\n") for raw in raw_lines]
    offsets = list(accumulate((len(raw.encode("utf-8")) for raw in raw_lines), initial=0))
    encoded = text.encode("utf-8")

    fragments: list[TableFragment] = []
    n = len(lines)
    i = 0
    while i < n:
        if not TABLE_ROW_RE.match(lines[i]):
            i += 1
            continue

        # Extend the run while rows keep matching
        end = i
        while end < n and TABLE_ROW_RE.match(lines[end]):
            end += 1

        fragments.append(_build_fragment(lines, i, end, offsets, encoded))
        i = end

    logger.debug("Detected %d table fragments in %d lines", len(fragments), n)
    return fragments
