"""Shared schemas for prose."""

from prose.schemas.document import (
    Block,
    Bold,
    CodeBlock,
    Document,
    Heading,
    Image,
    Inline,
    InlineCode,
    Italic,
    Link,
    ListContent,
    OrderedList,
    OrderedListItem,
    Paragraph,
    Text,
    UnorderedList,
)
from prose.schemas.result import RenderResult

__all__ = [
    "Block",
    "Bold",
    "CodeBlock",
    "Document",
    "Heading",
    "Image",
    "Inline",
    "InlineCode",
    "Italic",
    "Link",
    "ListContent",
    "OrderedList",
    "OrderedListItem",
    "Paragraph",
    "RenderResult",
    "Text",
    "UnorderedList",
]
