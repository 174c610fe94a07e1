"""Pydantic model for images extracted from a source document."""

import base64

from pydantic import BaseModel, Field


class ExtractedImage(BaseModel):
    """An image pulled out of a document by a format converter.

    The raw bytes stay in memory only; they are excluded from serialization
    so a dumped Document carries the image metadata but not the payload.
    """

    id: str
    data: bytes = Field(default=b"", exclude=True, repr=False)
    mime_type: str = "application/octet-stream"
    alt_text: str | None = None
    description: str | None = None
    width: int | None = None
    height: int | None = None
    page_number: int | None = None  # 1-indexed

    @property
    def display_text(self) -> str | None:
        """Return the description, falling back to the alt text."""
        return self.description if self.description is not None else self.alt_text

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def as_markdown_placeholder(self) -> str:
        """Markdown reference that a later pass can swap for a description."""
        return f"![Image: {self.id}](image:{self.id})"
