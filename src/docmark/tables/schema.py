"""Pydantic models for the table-merge pass.

These are throwaway analysis results derived from rendered page text.  They
are never stored in a Document; only the rewritten markdown flows back.
"""

from pydantic import BaseModel, Field


class TableFragment(BaseModel):
    """One contiguous run of pipe-delimited lines found in a page's text.

    ``start_pos`` / ``end_pos`` are UTF-8 byte offsets into the page text
    that was scanned.  The range covers every line of the run including
    its newline, except when the run ends the text without a trailing
    newline.
    """

    content: str
    start_pos: int
    end_pos: int
    has_header: bool
    is_complete: bool
    at_content_start: bool
    at_content_end: bool
    column_count: int
    headers: list[str] | None = None
    data_rows: list[list[str]] = Field(default_factory=list)


class MergedTable(BaseModel):
    """Two fragments combined into one table, not yet placed in any page."""

    headers: list[str] | None = None
    data_rows: list[list[str]] = Field(default_factory=list)
    column_count: int
    content: str

    @property
    def has_header(self) -> bool:
        return self.headers is not None


class MergedPageContent(BaseModel):
    """A page's text after the merge sweep, plus what happened to it."""

    page_number: int
    content: str
    merged_from_next: bool = False
    merged_into_previous: bool = False
