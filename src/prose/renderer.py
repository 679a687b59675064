"""Render a parsed Document into an HTML fragment."""

from __future__ import annotations

import html
from typing import Iterable

from prose.schemas import (
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
    Paragraph,
    Text,
    UnorderedList,
)

_BLOCK_TYPES = (Heading, Paragraph, CodeBlock, OrderedList, UnorderedList)


def render(document: Document) -> str:
    """Render every block in source order, one top-level block per line."""
    return "\n".join(_render_block(block) for block in document.blocks)


def _render_block(block: Block) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{_render_inlines(block.content)}</h{block.level}>"

    if isinstance(block, Paragraph):
        return f"<p>{_render_inlines(block.content)}</p>"

    if isinstance(block, CodeBlock):
        css_class = f' class="lang-{_escape_attr(block.language)}"' if block.language else ""
        return f"<pre><code{css_class}>{_escape_text(block.raw_text)}</code></pre>"

    if isinstance(block, OrderedList):
        start = f' start="{block.start}"' if block.start != 1 else ""
        items = "".join(f"<li>{_render_list_content(item.content)}</li>" for item in block.items)
        return f"<ol{start}>{items}</ol>"

    if isinstance(block, UnorderedList):
        items = "".join(f"<li>{_render_list_content(item)}</li>" for item in block.items)
        return f"<ul>{items}</ul>"

    raise TypeError(f"Cannot render block of type {type(block).__name__}")


def _render_list_content(nodes: Iterable[ListContent]) -> str:
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, _BLOCK_TYPES):
            parts.append(_render_block(node))
        else:
            parts.append(_render_inline(node))
    return "".join(parts)


def _render_inlines(nodes: Iterable[Inline]) -> str:
    return "".join(_render_inline(node) for node in nodes)


def _render_inline(node: Inline) -> str:
    if isinstance(node, Text):
        return _escape_text(node.value)

    if isinstance(node, Bold):
        return f"<strong>{_render_inlines(node.content)}</strong>"

    if isinstance(node, Italic):
        return f"<em>{_render_inlines(node.content)}</em>"

    if isinstance(node, InlineCode):
        return f"<code>{_escape_text(node.raw_text)}</code>"

    if isinstance(node, Link):
        return f'<a href="{_escape_attr(node.target)}">{_render_inlines(node.label)}</a>'

    if isinstance(node, Image):
        return f'<img src="{_escape_attr(node.target)}" alt="{_escape_attr(node.alt_text)}" />'

    raise TypeError(f"Cannot render inline of type {type(node).__name__}")


def _escape_text(text: str) -> str:
    return html.escape(text, quote=False)


def _escape_attr(value: str) -> str:
    return html.escape(value, quote=True)
