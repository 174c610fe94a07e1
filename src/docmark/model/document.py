"""Page and Document containers for converted content.

A Document owns its pages and a Page owns its blocks.  Converters build
them once; later passes (table merging, image handling) return new values
rather than editing a Document another caller may still hold.
"""

from pydantic import BaseModel, Field

from docmark.model.blocks import ContentBlock, ImageBlock, TextBlock
from docmark.model.images import ExtractedImage


class Page(BaseModel):
    """One logical page (PDF page, slide, sheet) of a converted document."""

    page_number: int = Field(ge=0, le=2**32 - 1)
    content: list[ContentBlock] = Field(default_factory=list)
    # Full-page render for scanned PDFs, slides, and complex layouts
    rendered_image: ExtractedImage | None = None

    def add_content(self, block: ContentBlock) -> None:
        self.content.append(block)

    def with_rendered_image(self, image: ExtractedImage) -> "Page":
        return self.model_copy(update={"rendered_image": image})

    def images(self) -> list[ExtractedImage]:
        """Return the images referenced by this page's blocks (not the rendered page image)."""
        return [block.image for block in self.content if isinstance(block, ImageBlock)]

    def to_markdown(self) -> str:
        """Render every block; blocks end in a newline, so joining leaves a blank line between them."""
        return "\n".join(block.to_markdown() for block in self.content)

    def to_text_only(self) -> "Page":
        """Return a copy with each image replaced by a bracketed text stand-in."""
        blocks: list[ContentBlock] = []
        for block in self.content:
            if isinstance(block, ImageBlock):
                label = block.image.display_text
                if label is None:
                    label = block.image.id
                blocks.append(TextBlock(text=f"[Image: {label}]"))
            else:
                blocks.append(block)
        return Page(page_number=self.page_number, content=blocks)


class Document(BaseModel):
    """A converted document: optional title, ordered pages, string metadata."""

    title: str | None = None
    pages: list[Page] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_page(cls, page: Page) -> "Document":
        return cls(pages=[page])

    def add_page(self, page: Page) -> None:
        self.pages.append(page)

    def images(self) -> list[ExtractedImage]:
        return [image for page in self.pages for image in page.images()]

    def page_texts(self) -> list[tuple[int, str]]:
        """Return the (page_number, markdown) pairs that the table-merge pass consumes."""
        return [(page.page_number, page.to_markdown()) for page in self.pages]

    def to_markdown(self) -> str:
        parts: list[str] = []
        if self.title is not None:
            parts.append(f"# {self.title}\n\n")

        # Page dividers only make sense when there is more than one page
        multi_page = len(self.pages) > 1
        for page in self.pages:
            if multi_page:
                parts.append(f"\n---\n## Page {page.page_number}\n\n")
            parts.append(page.to_markdown())
        return "".join(parts)

    def to_text_only(self) -> "Document":
        return Document(
            title=self.title,
            pages=[page.to_text_only() for page in self.pages],
            metadata=dict(self.metadata),
        )
