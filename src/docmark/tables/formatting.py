"""Combine two table fragments and render the result back to markdown."""

from docmark.model.blocks import render_pipe_table
from docmark.tables.schema import MergedTable, TableFragment


def merge_table_fragments(first: TableFragment, second: TableFragment) -> MergedTable:
    """Append *second*'s data rows to *first*'s and re-render the whole table.

    A header repeated at the top of *second* is already held in its
    ``headers`` rather than its ``data_rows``, so it is not duplicated.
    The result has no page position; the caller splices ``content`` into
    whichever page text it belongs to.
    """
    data_rows = [list(row) for row in first.data_rows] + [list(row) for row in second.data_rows]
    headers = first.headers if first.headers is not None else second.headers
    column_count = max(first.column_count, second.column_count)

    return MergedTable(
        headers=list(headers) if headers is not None else None,
        data_rows=data_rows,
        column_count=column_count,
        content=render_pipe_table(headers, data_rows, column_count),
    )
