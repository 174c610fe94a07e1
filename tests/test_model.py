"""Unit tests for the document content model.

Covers per-block markdown rendering, pydantic validation of block fields,
Page and Document rendering, image helpers, and serialization of a mixed
document through the ``kind`` discriminator.
"""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from docmark.model import (
    CodeBlock,
    Document,
    ExtractedImage,
    HeadingBlock,
    ImageBlock,
    ListBlock,
    MarkdownBlock,
    Page,
    QuoteBlock,
    TableBlock,
    TextBlock,
    render_pipe_table,
)

# ===========================================================================
# ExtractedImage tests
# ===========================================================================


class TestExtractedImage:

    def test_display_text_prefers_description(self):
        img = ExtractedImage(id="img1", alt_text="alt", description="desc")
        assert img.display_text == "desc"

    def test_display_text_falls_back_to_alt(self):
        img = ExtractedImage(id="img1", alt_text="alt")
        assert img.display_text == "alt"

    def test_display_text_none(self):
        assert ExtractedImage(id="img1").display_text is None

    def test_to_base64(self):
        img = ExtractedImage(id="img1", data=b"abc", mime_type="image/png")
        assert img.to_base64() == "YWJj"

    def test_placeholder(self):
        assert ExtractedImage(id="img1").as_markdown_placeholder() == "![Image: img1](image:img1)"

    def test_data_not_serialized(self):
        img = ExtractedImage(id="img1", data=b"\x89PNG", mime_type="image/png")
        dumped = img.model_dump()
        assert "data" not in dumped
        assert dumped["mime_type"] == "image/png"


# ===========================================================================
# ContentBlock rendering tests
# ===========================================================================


class TestBlockRendering:

    def test_text(self):
        assert TextBlock(text="Hello").to_markdown() == "Hello\n"

    def test_heading(self):
        assert HeadingBlock(level=2, text="Scope").to_markdown() == "## Scope\n"

    def test_heading_level_too_low(self):
        with pytest.raises(ValidationError):
            HeadingBlock(level=0, text="x")

    def test_heading_level_too_high(self):
        with pytest.raises(ValidationError):
            HeadingBlock(level=7, text="x")

    def test_image_without_description(self):
        block = ImageBlock(image=ExtractedImage(id="img1"))
        assert block.to_markdown() == "![img1](img1)\n"

    def test_image_with_description(self):
        block = ImageBlock(image=ExtractedImage(id="img1", description="A bar chart"))
        assert block.to_markdown() == "![img1](img1)\n\n*A bar chart*\n"

    def test_table(self):
        block = TableBlock(headers=["A", "B"], rows=[["1", "2"], ["3", "4"]])
        assert block.to_markdown() == "| A | B |\n| --- | --- |\n| 1 | 2 |\n| 3 | 4 |\n"

    def test_table_short_row_padded(self):
        block = TableBlock(headers=["A", "B"], rows=[["1"]])
        assert block.to_markdown() == "| A | B |\n| --- | --- |\n| 1 |  |\n"

    def test_table_long_row_widens_header(self):
        block = TableBlock(headers=["A"], rows=[["1", "2"]])
        assert block.column_count == 2
        assert block.to_markdown() == "| A |  |\n| --- | --- |\n| 1 | 2 |\n"

    def test_table_without_headers(self):
        block = TableBlock(rows=[["1", "2"]])
        assert block.to_markdown() == "| 1 | 2 |\n"

    def test_empty_table(self):
        assert TableBlock().to_markdown() == ""

    def test_unordered_list(self):
        assert ListBlock(items=["a", "b"]).to_markdown() == "- a\n- b\n"

    def test_ordered_list(self):
        assert ListBlock(ordered=True, items=["a", "b"]).to_markdown() == "1. a\n2. b\n"

    def test_code_with_language(self):
        assert CodeBlock(language="python", body="x = 1").to_markdown() == "```python\nx = 1\n```\n"

    def test_code_without_language(self):
        assert CodeBlock(body="x").to_markdown() == "```\nx\n```\n"

    def test_quote_multiline(self):
        assert QuoteBlock(text="line one\nline two").to_markdown() == "> line one\n> line two\n"

    def test_quote_splits_on_newline_only(self):
        assert QuoteBlock(text="a b\x0cc").to_markdown() == "> a b\x0cc\n"

    def test_quote_crlf_and_trailing_newline(self):
        assert QuoteBlock(text="one\r\ntwo\n").to_markdown() == "> one\n> two\n"

    def test_quote_empty(self):
        assert QuoteBlock(text="").to_markdown() == "\n"

    def test_raw_markdown_verbatim(self):
        raw = "**bold** and _italic_"
        assert MarkdownBlock(markdown=raw).to_markdown() == raw


class TestRenderPipeTable:

    def test_nothing_to_size(self):
        assert render_pipe_table(None, []) == ""

    def test_width_from_first_row(self):
        assert render_pipe_table(None, [["a", "b"]]) == "| a | b |\n"

    def test_explicit_column_count_pads(self):
        assert render_pipe_table(["H"], [["a"]], column_count=3) == "| H |  |  |\n| --- | --- | --- |\n| a |  |  |\n"


# ===========================================================================
# Page tests
# ===========================================================================


class TestPage:

    def test_blocks_separated_by_blank_line(self):
        page = Page(page_number=1, content=[HeadingBlock(level=1, text="Title"), TextBlock(text="Body")])
        assert page.to_markdown() == "# Title\n\nBody\n"

    def test_empty_page(self):
        assert Page(page_number=1).to_markdown() == ""

    def test_negative_page_number_rejected(self):
        with pytest.raises(ValidationError):
            Page(page_number=-1)

    def test_page_number_u32_range(self):
        assert Page(page_number=2**32 - 1).page_number == 2**32 - 1
        with pytest.raises(ValidationError):
            Page(page_number=2**32)

    def test_add_content(self):
        page = Page(page_number=3)
        page.add_content(TextBlock(text="x"))
        assert len(page.content) == 1

    def test_images(self):
        img = ExtractedImage(id="img1")
        page = Page(page_number=1, content=[TextBlock(text="x"), ImageBlock(image=img)])
        assert [i.id for i in page.images()] == ["img1"]

    def test_with_rendered_image_returns_copy(self):
        page = Page(page_number=1)
        rendered = page.with_rendered_image(ExtractedImage(id="page-1", mime_type="image/png"))
        assert rendered.rendered_image is not None
        assert page.rendered_image is None

    def test_to_text_only(self):
        page = Page(
            page_number=2,
            content=[
                ImageBlock(image=ExtractedImage(id="img1", description="chart")),
                ImageBlock(image=ExtractedImage(id="img2")),
                TextBlock(text="kept"),
            ],
        )
        text_only = page.to_text_only()
        assert text_only.page_number == 2
        assert text_only.to_markdown() == "[Image: chart]\n\n[Image: img2]\n\nkept\n"
        assert text_only.images() == []


# ===========================================================================
# Document tests
# ===========================================================================


class TestDocument:

    def test_single_page_with_title(self):
        doc = Document(title="Report", pages=[Page(page_number=1, content=[TextBlock(text="Hi")])])
        assert doc.to_markdown() == "# Report\n\nHi\n"

    def test_multi_page_dividers(self):
        doc = Document(
            pages=[
                Page(page_number=1, content=[TextBlock(text="A")]),
                Page(page_number=2, content=[TextBlock(text="B")]),
            ]
        )
        assert doc.to_markdown() == "\n---\n## Page 1\n\nA\n\n---\n## Page 2\n\nB\n"

    def test_from_page_and_add_page(self):
        doc = Document.from_page(Page(page_number=1))
        doc.add_page(Page(page_number=7))
        assert [p.page_number for p in doc.pages] == [1, 7]
        assert doc.metadata == {}

    def test_page_texts(self):
        doc = Document(
            pages=[
                Page(page_number=4, content=[TextBlock(text="A")]),
                Page(page_number=9, content=[TextBlock(text="B")]),
            ]
        )
        assert doc.page_texts() == [(4, "A\n"), (9, "B\n")]

    def test_images_across_pages(self):
        doc = Document(
            pages=[
                Page(page_number=1, content=[ImageBlock(image=ExtractedImage(id="a"))]),
                Page(page_number=2, content=[ImageBlock(image=ExtractedImage(id="b"))]),
            ]
        )
        assert [i.id for i in doc.images()] == ["a", "b"]

    def test_to_text_only_keeps_title_and_metadata(self):
        doc = Document(
            title="T",
            metadata={"author": "someone"},
            pages=[Page(page_number=1, content=[ImageBlock(image=ExtractedImage(id="a"))])],
        )
        text_only = doc.to_text_only()
        assert text_only.title == "T"
        assert text_only.metadata == {"author": "someone"}
        assert text_only.images() == []

    def test_json_keeps_block_types(self):
        doc = Document(
            title="Mixed",
            metadata={"source": "test.pdf"},
            pages=[
                Page(
                    page_number=1,
                    content=[
                        HeadingBlock(level=1, text="H"),
                        TableBlock(headers=["A"], rows=[["1"]]),
                        ListBlock(ordered=True, items=["x"]),
                        CodeBlock(language="sh", body="ls"),
                        QuoteBlock(text="q"),
                        MarkdownBlock(markdown="*m*"),
                        ImageBlock(image=ExtractedImage(id="img1", description="d")),
                    ],
                )
            ],
        )
        restored = Document.model_validate_json(doc.model_dump_json())
        assert [type(b) for b in restored.pages[0].content] == [type(b) for b in doc.pages[0].content]
        assert restored.to_markdown() == doc.to_markdown()
