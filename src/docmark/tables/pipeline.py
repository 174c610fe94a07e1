"""Cross-page table merging over a document's ordered page texts.

Walks adjacent page pairs left to right.  When the last table on page i
continues into the first table on page i+1, the merged table replaces the
one on page i, the continuation is cut from page i+1, and the same index is
checked again so a table spanning three or more pages keeps absorbing
forward.  Fragments are re-detected on every visit because page i's text
may have just been rewritten.  A page emptied by such a merge is looked
past, so page i keeps absorbing from the page after it.

Pages before i are never revisited, so a merge never reaches backwards:
a headerless run at the bottom of page i is not joined to a header that
only shows up on page i+1.

Usage:
    python -m docmark.tables.pipeline pages.json [-o merged.json]
"""

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from docmark.config import LOG_FORMAT, LOG_LEVEL
from docmark.model import Document, MarkdownBlock, Page
from docmark.tables.decision import can_merge_tables
from docmark.tables.detection import detect_table_fragments
from docmark.tables.formatting import merge_table_fragments
from docmark.tables.schema import MergedPageContent

logger = logging.getLogger(__name__)


# ─── Byte-Range Splicing ─────────────────────────────────────────────────────


def _splice(text: str, start: int, end: int, replacement: str = "") -> str:
    """Replace the UTF-8 byte range ``[start, end)`` of *text* with *replacement*."""
    encoded = text.encode("utf-8")
    return (encoded[:start] + replacement.encode("utf-8") + encoded[end:]).decode("utf-8")


# ─── Page Sweep ──────────────────────────────────────────────────────────────


def _merge_pair(current: MergedPageContent, following: MergedPageContent) -> bool:
    """Try to merge the last table of *current* with the first of *following*.

    Rewrites both pages in place and returns True on a merge.
    """
    current_fragments = detect_table_fragments(current.content)
    next_fragments = detect_table_fragments(following.content)
    if not current_fragments or not next_fragments:
        return False

    last_table = current_fragments[-1]
    first_table = next_fragments[0]
    if not can_merge_tables(last_table, first_table):
        return False

    merged = merge_table_fragments(last_table, first_table)
    current.content = _splice(current.content, last_table.start_pos, last_table.end_pos, merged.content)
    following.content = _splice(following.content, first_table.start_pos, first_table.end_pos)
    current.merged_from_next = True
    following.merged_into_previous = True

    logger.debug(
        "Merged table from page %d into page %d (%d + %d rows)",
        following.page_number,
        current.page_number,
        len(last_table.data_rows),
        len(first_table.data_rows),
    )
    return True


def _partner_index(results: list[MergedPageContent], i: int) -> int:
    """Return the index of the page whose leading table may continue page i's last table.

    Normally i+1.  A page left blank because its whole content was merged
    backwards is now part of page i's table, so the search looks past it.
    """
    j = i + 1
    while j < len(results) - 1 and results[j].merged_into_previous and not results[j].content.strip():
        j += 1
    return j


def merge_tables_across_pages(pages: Iterable[tuple[int, str]]) -> list[MergedPageContent]:
    """Merge markdown tables split across page boundaries.

    Takes ``(page_number, markdown)`` pairs in reading order and returns one
    MergedPageContent per input page, in the same order.  A table spanning
    several pages ends up whole on the page where it starts.
    """
    results = [MergedPageContent(page_number=number, content=text) for number, text in pages]

    merges = 0
    i = 0
    while i < len(results) - 1:
        # Every merge cuts a fragment off a later page, so retrying i always terminates
        if _merge_pair(results[i], results[_partner_index(results, i)]):
            merges += 1
            continue
        i += 1

    logger.info("Table merge sweep over %d pages: %d merges", len(results), merges)
    return results


def merge_document_tables(document: Document) -> Document:
    """Return a new Document with cross-page tables merged.

    Pages touched by a merge carry their rewritten text as a single raw
    markdown block; untouched pages keep their original blocks.
    """
    merged_pages = merge_tables_across_pages(document.page_texts())

    pages: list[Page] = []
    for page, merged in zip(document.pages, merged_pages):
        if merged.merged_from_next or merged.merged_into_previous:
            pages.append(
                Page(
                    page_number=page.page_number,
                    content=[MarkdownBlock(markdown=merged.content)],
                    rendered_image=page.rendered_image,
                )
            )
        else:
            pages.append(page.model_copy(deep=True))

    return Document(title=document.title, pages=pages, metadata=dict(document.metadata))


# ─── Command Line ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Merge tables in a JSON list of ``{"page_number", "content"}`` records."""
    parser = argparse.ArgumentParser(description="Merge markdown tables split across page boundaries.")
    parser.add_argument("input", type=Path, help="JSON file: list of {page_number, content} records")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write merged JSON here instead of stdout")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    with open(args.input, "r", encoding="utf-8") as fopen:
        records = json.load(fopen)
    pages = [(int(record["page_number"]), record["content"]) for record in records]

    merged = merge_tables_across_pages(pages)
    payload = json.dumps([page.model_dump() for page in merged], indent=2, ensure_ascii=False)

    if args.output is None:
        print(payload)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as fopen:
            fopen.write(payload)
        logger.info("Wrote %d merged pages to %s", len(merged), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
