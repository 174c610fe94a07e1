"""Document content model and cross-page table merging for markdown conversion."""

from docmark.model import ContentBlock, Document, ExtractedImage, Page
from docmark.tables.detection import detect_table_fragments
from docmark.tables.pipeline import merge_document_tables, merge_tables_across_pages
from docmark.tables.schema import MergedPageContent, TableFragment

__all__ = [
    "ContentBlock",
    "Document",
    "ExtractedImage",
    "MergedPageContent",
    "Page",
    "TableFragment",
    "detect_table_fragments",
    "merge_document_tables",
    "merge_tables_across_pages",
]
