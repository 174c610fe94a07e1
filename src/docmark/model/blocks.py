"""Typed content blocks and their markdown rendering rules.

Every format converter emits pages as an ordered list of these blocks.  The
union is discriminated on ``kind`` so a serialized Document round-trips
through ``model_validate_json`` back into the right block classes.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from docmark.model.images import ExtractedImage

# ─── Pipe Table Rendering ────────────────────────────────────────────────────


def _pipe_row(cells: list[str], width: int) -> str:
    """Render one pipe-delimited row, padding with empty cells up to *width*."""
    padded = list(cells) + [""] * (width - len(cells))
    return "| " + " | ".join(padded) + " |\n"


def render_pipe_table(headers: list[str] | None, rows: list[list[str]], column_count: int = 0) -> str:
    """Render headers and rows as a markdown pipe table.

    The header and its ``---`` separator are emitted only when *headers* is
    set.  Every emitted row is padded to the column count.  When
    *column_count* is zero it falls back to the header width, then to the
    first row's width; with nothing to size against the result is empty.
    """
    width = column_count
    if width <= 0:
        if headers:
            width = len(headers)
        elif rows:
            width = len(rows[0])
        else:
            return ""

    lines: list[str] = []
    if headers is not None:
        lines.append(_pipe_row(headers, width))
        lines.append(_pipe_row(["---"] * width, width))
    for row in rows:
        lines.append(_pipe_row(row, width))
    return "".join(lines)


# ─── Block Variants ──────────────────────────────────────────────────────────


class TextBlock(BaseModel):
    """Plain paragraph text."""

    kind: Literal["text"] = "text"
    text: str

    def to_markdown(self) -> str:
        return f"{self.text}\n"


class HeadingBlock(BaseModel):
    """A heading; level follows markdown's 1-6 range."""

    kind: Literal["heading"] = "heading"
    level: int = Field(ge=1, le=6)
    text: str

    def to_markdown(self) -> str:
        return f"{'#' * self.level} {self.text}\n"


class ImageBlock(BaseModel):
    """A reference to an extracted image, with its description when one exists."""

    kind: Literal["image"] = "image"
    image: ExtractedImage

    def to_markdown(self) -> str:
        img = self.image
        text = img.display_text
        if text is not None:
            return f"![{img.id}]({img.id})\n\n*{text}*\n"
        return f"![{img.id}]({img.id})\n"


class TableBlock(BaseModel):
    """A table.  Rows may be shorter than the header; they are padded at render time."""

    kind: Literal["table"] = "table"
    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    @property
    def column_count(self) -> int:
        return max([len(self.headers)] + [len(row) for row in self.rows])

    def to_markdown(self) -> str:
        return render_pipe_table(self.headers or None, self.rows, self.column_count)


class ListBlock(BaseModel):
    kind: Literal["list"] = "list"
    ordered: bool = False
    items: list[str] = Field(default_factory=list)

    def to_markdown(self) -> str:
        if self.ordered:
            return "".join(f"{i}. {item}\n" for i, item in enumerate(self.items, start=1))
        return "".join(f"- {item}\n" for item in self.items)


class CodeBlock(BaseModel):
    kind: Literal["code"] = "code"
    language: str | None = None
    body: str

    def to_markdown(self) -> str:
        return f"```{self.language or ''}\n{self.body}\n```\n"


class QuoteBlock(BaseModel):
    kind: Literal["quote"] = "quote"
    text: str

    def to_markdown(self) -> str:
        # Split on "\n" only (optionally "\r\n"); a trailing newline adds no empty line
        lines = [line.removesuffix("\r") for line in self.text.split("\n")]
        if lines[-1] == "":
            lines.pop()
        return "\n".join(f"> {line}" for line in lines) + "\n"


class MarkdownBlock(BaseModel):
    """Markdown that a converter has already formatted; emitted verbatim."""

    kind: Literal["markdown"] = "markdown"
    markdown: str

    def to_markdown(self) -> str:
        return self.markdown


ContentBlock = Annotated[
    Union[TextBlock, HeadingBlock, ImageBlock, TableBlock, ListBlock, CodeBlock, QuoteBlock, MarkdownBlock],
    Field(discriminator="kind"),
]
