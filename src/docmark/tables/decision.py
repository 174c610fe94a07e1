"""Decide whether two table fragments on adjacent pages are one split table.

The checks run in a fixed order: position on the page first, then column
compatibility, then header semantics.  When unsure the answer is "no": two
halves left apart are easy for a reader to spot, while two unrelated
tables fused together silently corrupt the data.
"""

import logging

from docmark.tables.schema import TableFragment

logger = logging.getLogger(__name__)


def columns_compatible(first: TableFragment, second: TableFragment) -> bool:
    """Return True unless both fragments have a known, different column count."""
    if first.column_count == 0 or second.column_count == 0:
        return True
    return first.column_count == second.column_count


def is_repeated_header(first: TableFragment, second: TableFragment) -> bool:
    """Return True if *second* opens by repeating *first*'s exact header row."""
    return second.headers is not None and second.headers == first.headers


def can_merge_tables(first: TableFragment, second: TableFragment) -> bool:
    """Return True if *second* (top of page N+1) continues *first* (bottom of page N)."""
    # Tables embedded mid-page never merge across a page break
    if not first.at_content_end:
        return False
    if not second.at_content_start:
        return False

    if not columns_compatible(first, second):
        logger.debug("Column mismatch: %d vs %d", first.column_count, second.column_count)
        return False

    # A headerless leading table reads as a continuation
    if not second.has_header:
        return True

    # Same header repeated on the next page is still the same table; any other header is a new one
    return is_repeated_header(first, second)
