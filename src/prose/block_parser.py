"""Split markdown source into block nodes (headings, lists, code, paragraphs)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from prose.config import PROSE_MAX_NESTING_DEPTH, TAB_WIDTH
from prose.exceptions import NestingTooDeepError
from prose.inline_parser import parse_inline
from prose.schemas import (
    Block,
    CodeBlock,
    Document,
    Heading,
    Inline,
    ListContent,
    OrderedList,
    OrderedListItem,
    Paragraph,
    UnorderedList,
)

_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_CLOSING_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})[ \t]*$")
_HEADING_RE = re.compile(r"^ {0,3}(?P<marker>#{1,6})[ \t]+(?P<text>.*?)[ \t]*$")
_LIST_ITEM_RE = re.compile(
    r"^(?P<indent>[ \t]*)(?:(?P<bullet>[-*+])|(?P<number>\d{1,9})[.)])[ \t]+(?P<text>.*)$"
)


@dataclass
class _OpenFence:
    marker: str
    language: str | None
    lines: list[str] = field(default_factory=list)


@dataclass
class _ItemBuilder:
    index: int | None
    lines: list[str]
    children: list[_ListBuilder] = field(default_factory=list)


@dataclass
class _ListBuilder:
    ordered: bool
    items: list[_ItemBuilder] = field(default_factory=list)


@dataclass
class _OpenList:
    indent: int
    builder: _ListBuilder


def parse_blocks(source: str, *, max_depth: int = PROSE_MAX_NESTING_DEPTH) -> Document:
    """Parse markdown source into a Document.

    Each line is classified in a fixed priority order: open code fence,
    fence opener, heading, list marker, blank line, then paragraph or list
    continuation text. Unrecognized markers degrade to paragraph text.

    Args:
        source: Full markdown document.
        max_depth: Deepest allowed list or inline nesting.

    Returns:
        Document whose blocks follow source order.

    Raises:
        NestingTooDeepError: If lists or inline spans nest deeper than
            ``max_depth``.
    """
    return _BlockParser(max_depth=max_depth).parse(source)


class _BlockParser:
    def __init__(self, *, max_depth: int) -> None:
        self.max_depth = max_depth
        self.blocks: list[Block] = []
        self.paragraph_lines: list[str] = []
        # Open lists, outermost first.
        self.list_stack: list[_OpenList] = []
        self.fence: _OpenFence | None = None

    def parse(self, source: str) -> Document:
        for line in _split_lines(source):
            self._feed(line)
        if self.fence is not None:
            # Unterminated fence runs to the end of the document.
            self._close_fence()
        self._close_paragraph()
        self._close_lists()
        return Document(blocks=self.blocks)

    def _feed(self, line: str) -> None:
        if self.fence is not None:
            if _closes_fence(line, self.fence):
                self._close_fence()
            else:
                self.fence.lines.append(line)
            return

        fence = _FENCE_RE.match(line)
        if fence and not (fence.group("fence")[0] == "`" and "`" in fence.group("info")):
            self._close_paragraph()
            self._close_lists()
            info = fence.group("info").split()
            self.fence = _OpenFence(marker=fence.group("fence"), language=info[0] if info else None)
            return

        heading = _HEADING_RE.match(line)
        if heading:
            self._close_paragraph()
            self._close_lists()
            self.blocks.append(
                Heading(
                    level=len(heading.group("marker")),
                    content=self._inline(heading.group("text")),
                )
            )
            return

        item = _LIST_ITEM_RE.match(line)
        if item:
            self._close_paragraph()
            self._add_list_item(item)
            return

        if not line.strip():
            self._close_paragraph()
            self._close_lists()
            return

        if self.list_stack:
            if _indent_width(line) > 0:
                self.list_stack[-1].builder.items[-1].lines.append(line.strip())
                return
            self._close_lists()
        self.paragraph_lines.append(line.strip())

    def _add_list_item(self, match: re.Match[str]) -> None:
        indent = _indent_width(match.group("indent"))
        number = match.group("number")
        ordered = number is not None
        item = _ItemBuilder(
            index=int(number) if ordered else None,
            lines=[match.group("text").strip()],
        )

        if not self.list_stack:
            self.list_stack.append(_OpenList(indent, _ListBuilder(ordered=ordered)))
            self.list_stack[-1].builder.items.append(item)
            return

        # Dedent may close several nested lists at once.
        while len(self.list_stack) > 1 and indent < self.list_stack[-1].indent:
            self.list_stack.pop()

        top = self.list_stack[-1]
        if indent > top.indent:
            if len(self.list_stack) >= self.max_depth:
                raise NestingTooDeepError(
                    f"Lists nest deeper than the maximum of {self.max_depth}"
                )
            nested = _ListBuilder(ordered=ordered)
            top.builder.items[-1].children.append(nested)
            self.list_stack.append(_OpenList(indent, nested))
        elif top.builder.ordered != ordered:
            # Same indentation, different marker kind: start a sibling list.
            sibling = _ListBuilder(ordered=ordered)
            if len(self.list_stack) == 1:
                self._close_lists()
                self.list_stack.append(_OpenList(indent, sibling))
            else:
                self.list_stack[-2].builder.items[-1].children.append(sibling)
                self.list_stack[-1] = _OpenList(top.indent, sibling)

        self.list_stack[-1].builder.items.append(item)

    def _close_paragraph(self) -> None:
        if not self.paragraph_lines:
            return
        text = "\n".join(self.paragraph_lines)
        self.paragraph_lines = []
        self.blocks.append(Paragraph(content=self._inline(text)))

    def _close_fence(self) -> None:
        fence = self.fence
        self.fence = None
        self.blocks.append(CodeBlock(raw_text="\n".join(fence.lines), language=fence.language))

    def _close_lists(self) -> None:
        if not self.list_stack:
            return
        root = self.list_stack[0].builder
        self.list_stack = []
        self.blocks.append(self._finish_list(root))

    def _finish_list(self, builder: _ListBuilder) -> OrderedList | UnorderedList:
        if builder.ordered:
            return OrderedList(
                items=[
                    OrderedListItem(index=item.index, content=self._finish_item(item))
                    for item in builder.items
                ]
            )
        return UnorderedList(items=[self._finish_item(item) for item in builder.items])

    def _finish_item(self, item: _ItemBuilder) -> list[ListContent]:
        content: list[ListContent] = list(
            self._inline("\n".join(line for line in item.lines if line))
        )
        content.extend(self._finish_list(child) for child in item.children)
        return content

    def _inline(self, text: str) -> list[Inline]:
        return parse_inline(text, max_depth=self.max_depth)


def _split_lines(source: str) -> list[str]:
    return source.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def _indent_width(text: str) -> int:
    """Columns of leading whitespace, with tabs expanded."""
    stripped = text.lstrip(" \t")
    return len(text[: len(text) - len(stripped)].expandtabs(TAB_WIDTH))


def _closes_fence(line: str, fence: _OpenFence) -> bool:
    match = _CLOSING_FENCE_RE.match(line)
    if not match:
        return False
    closing = match.group("fence")
    return closing[0] == fence.marker[0] and len(closing) >= len(fence.marker)
