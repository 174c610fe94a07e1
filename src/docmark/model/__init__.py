"""Document content model shared by converters, serializers, and the table-merge pass.

Submodules:
  images    -- ExtractedImage metadata + payload
  blocks    -- ContentBlock variants and the pipe-table renderer
  document  -- Page and Document containers
"""

from docmark.model.blocks import (
    CodeBlock,
    ContentBlock,
    HeadingBlock,
    ImageBlock,
    ListBlock,
    MarkdownBlock,
    QuoteBlock,
    TableBlock,
    TextBlock,
    render_pipe_table,
)
from docmark.model.document import Document, Page
from docmark.model.images import ExtractedImage

__all__ = [
    "CodeBlock",
    "ContentBlock",
    "Document",
    "ExtractedImage",
    "HeadingBlock",
    "ImageBlock",
    "ListBlock",
    "MarkdownBlock",
    "Page",
    "QuoteBlock",
    "TableBlock",
    "TextBlock",
    "render_pipe_table",
]
