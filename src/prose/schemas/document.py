"""Document tree models shared by the parsers and the HTML renderer."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# Inline spans


class Text(_Node):
    """Literal text, escaped on render."""

    type: Literal["text"] = "text"
    value: str


class Bold(_Node):
    type: Literal["bold"] = "bold"
    content: list[Inline] = Field(default_factory=list)


class Italic(_Node):
    type: Literal["italic"] = "italic"
    content: list[Inline] = Field(default_factory=list)


class InlineCode(_Node):
    """Code span. ``raw_text`` is a terminal leaf and is never reparsed."""

    type: Literal["inline_code"] = "inline_code"
    raw_text: str


class Link(_Node):
    type: Literal["link"] = "link"
    label: list[Inline] = Field(default_factory=list)
    target: str


class Image(_Node):
    type: Literal["image"] = "image"
    alt_text: str
    target: str


# Blocks


class Heading(_Node):
    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    content: list[Inline] = Field(default_factory=list)


class Paragraph(_Node):
    type: Literal["paragraph"] = "paragraph"
    content: list[Inline] = Field(default_factory=list)


class CodeBlock(_Node):
    """Fenced code. ``language`` is the first word of the fence info string."""

    type: Literal["code_block"] = "code_block"
    raw_text: str
    language: str | None = None


class OrderedListItem(_Node):
    """An ordered item; ``index`` is the number written in the source marker."""

    type: Literal["ordered_list_item"] = "ordered_list_item"
    index: int | None = None
    content: list[ListContent] = Field(default_factory=list)


class OrderedList(_Node):
    type: Literal["ordered_list"] = "ordered_list"
    items: list[OrderedListItem] = Field(default_factory=list)

    @property
    def start(self) -> int:
        """Number of the first rendered item. Only the first marker is trusted."""
        if self.items and self.items[0].index is not None:
            return self.items[0].index
        return 1


class UnorderedList(_Node):
    type: Literal["unordered_list"] = "unordered_list"
    items: list[list[ListContent]] = Field(default_factory=list)


Inline = Annotated[
    Union[Text, Bold, Italic, InlineCode, Link, Image],
    Field(discriminator="type"),
]

Block = Annotated[
    Union[Heading, Paragraph, CodeBlock, OrderedList, UnorderedList],
    Field(discriminator="type"),
]

# List items hold their own text spans followed by any nested lists.
ListContent = Annotated[
    Union[
        Text,
        Bold,
        Italic,
        InlineCode,
        Link,
        Image,
        Heading,
        Paragraph,
        CodeBlock,
        OrderedList,
        UnorderedList,
    ],
    Field(discriminator="type"),
]


class Document(_Node):
    """A parsed markdown document: blocks in source order."""

    type: Literal["document"] = "document"
    blocks: list[Block] = Field(default_factory=list)


for _model in (Bold, Italic, Link, Heading, Paragraph, OrderedListItem, OrderedList, UnorderedList, Document):
    _model.model_rebuild()
