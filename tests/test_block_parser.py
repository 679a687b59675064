"""Tests for block structure parsing."""

from __future__ import annotations

import pytest

from prose.block_parser import parse_blocks
from prose.exceptions import NestingTooDeepError
from prose.schemas import (
    Bold,
    CodeBlock,
    Heading,
    OrderedList,
    OrderedListItem,
    Paragraph,
    Text,
    UnorderedList,
)


class TestHeadings:
    """Tests for ATX heading lines."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_levels_one_to_six(self, level: int) -> None:
        document = parse_blocks("#" * level + " title")
        assert document.blocks == [Heading(level=level, content=[Text(value="title")])]

    def test_seven_markers_degrade_to_paragraph(self) -> None:
        """Seven markers keep their literal text inside a paragraph."""
        document = parse_blocks("####### x")
        assert document.blocks == [Paragraph(content=[Text(value="####### x")])]

    def test_marker_without_space_is_paragraph(self) -> None:
        document = parse_blocks("#hashtag")
        assert document.blocks == [Paragraph(content=[Text(value="#hashtag")])]

    def test_heading_content_is_inline_parsed(self) -> None:
        document = parse_blocks("## a **b**  ")
        assert document.blocks == [
            Heading(level=2, content=[Text(value="a "), Bold(content=[Text(value="b")])])
        ]

    def test_heading_consumes_one_line(self) -> None:
        document = parse_blocks("# a\nb")
        assert document.blocks == [
            Heading(level=1, content=[Text(value="a")]),
            Paragraph(content=[Text(value="b")]),
        ]


class TestParagraphs:
    """Tests for paragraph accumulation."""

    def test_empty_source(self) -> None:
        assert parse_blocks("").blocks == []

    def test_lines_accumulate_until_blank_line(self) -> None:
        document = parse_blocks("line one\nline two\n\nnext")
        assert document.blocks == [
            Paragraph(content=[Text(value="line one\nline two")]),
            Paragraph(content=[Text(value="next")]),
        ]

    def test_windows_line_endings(self) -> None:
        document = parse_blocks("# a\r\nb\r\n")
        assert document.blocks == [
            Heading(level=1, content=[Text(value="a")]),
            Paragraph(content=[Text(value="b")]),
        ]

    def test_lone_bullet_is_paragraph(self) -> None:
        """A bullet needs trailing whitespace to start a list."""
        assert parse_blocks("-").blocks == [Paragraph(content=[Text(value="-")])]


class TestCodeBlocks:
    """Tests for fenced code blocks."""

    def test_fence_content_is_verbatim(self) -> None:
        document = parse_blocks("```python\nprint('# not heading')\n- not list\n```")
        assert document.blocks == [
            CodeBlock(raw_text="print('# not heading')\n- not list", language="python")
        ]

    def test_unterminated_fence_runs_to_end(self) -> None:
        document = parse_blocks("```\ncode\n# still code")
        assert document.blocks == [CodeBlock(raw_text="code\n# still code")]

    def test_closing_fence_must_use_same_character(self) -> None:
        document = parse_blocks("~~~\n```\n~~~")
        assert document.blocks == [CodeBlock(raw_text="```")]

    def test_closing_fence_must_be_long_enough(self) -> None:
        document = parse_blocks("````\n```\n````")
        assert document.blocks == [CodeBlock(raw_text="```")]

    def test_fence_closes_open_paragraph(self) -> None:
        document = parse_blocks("text\n```\ncode\n```\nmore")
        assert document.blocks == [
            Paragraph(content=[Text(value="text")]),
            CodeBlock(raw_text="code"),
            Paragraph(content=[Text(value="more")]),
        ]


class TestLists:
    """Tests for ordered, unordered and nested lists."""

    def test_unordered_items_accumulate(self) -> None:
        document = parse_blocks("- a\n- b")
        assert document.blocks == [
            UnorderedList(items=[[Text(value="a")], [Text(value="b")]])
        ]

    def test_ordered_items_keep_their_index(self) -> None:
        document = parse_blocks("3. a\n4. b")
        assert document.blocks == [
            OrderedList(
                items=[
                    OrderedListItem(index=3, content=[Text(value="a")]),
                    OrderedListItem(index=4, content=[Text(value="b")]),
                ]
            )
        ]
        assert document.blocks[0].start == 3

    def test_indented_bullet_nests_inside_item(self) -> None:
        document = parse_blocks("- a\n  - b\n- c")
        assert document.blocks == [
            UnorderedList(
                items=[
                    [Text(value="a"), UnorderedList(items=[[Text(value="b")]])],
                    [Text(value="c")],
                ]
            )
        ]

    def test_dedent_closes_several_levels(self) -> None:
        document = parse_blocks("- a\n  - b\n    - c\n- d")
        inner = UnorderedList(items=[[Text(value="c")]])
        middle = UnorderedList(items=[[Text(value="b"), inner]])
        assert document.blocks == [
            UnorderedList(items=[[Text(value="a"), middle], [Text(value="d")]])
        ]

    def test_tab_indentation_nests(self) -> None:
        document = parse_blocks("- a\n\t- b")
        assert document.blocks == [
            UnorderedList(items=[[Text(value="a"), UnorderedList(items=[[Text(value="b")]])]])
        ]

    def test_marker_kind_change_starts_new_list(self) -> None:
        document = parse_blocks("- a\n1. b")
        assert document.blocks == [
            UnorderedList(items=[[Text(value="a")]]),
            OrderedList(items=[OrderedListItem(index=1, content=[Text(value="b")])]),
        ]

    def test_nested_kind_change_starts_sibling_list(self) -> None:
        document = parse_blocks("- a\n  - b\n  1. c")
        assert document.blocks == [
            UnorderedList(
                items=[
                    [
                        Text(value="a"),
                        UnorderedList(items=[[Text(value="b")]]),
                        OrderedList(items=[OrderedListItem(index=1, content=[Text(value="c")])]),
                    ]
                ]
            )
        ]

    def test_blank_line_ends_list(self) -> None:
        document = parse_blocks("- a\n\n- b")
        assert document.blocks == [
            UnorderedList(items=[[Text(value="a")]]),
            UnorderedList(items=[[Text(value="b")]]),
        ]

    def test_indented_line_continues_item(self) -> None:
        document = parse_blocks("- a\n  more")
        assert document.blocks == [UnorderedList(items=[[Text(value="a\nmore")]])]

    def test_unindented_line_ends_list(self) -> None:
        document = parse_blocks("- a\nafter")
        assert document.blocks == [
            UnorderedList(items=[[Text(value="a")]]),
            Paragraph(content=[Text(value="after")]),
        ]

    def test_empty_item(self) -> None:
        assert parse_blocks("- ").blocks == [UnorderedList(items=[[]])]

    def test_raises_when_lists_nest_too_deep(self) -> None:
        source = "\n".join("  " * level + "- item" for level in range(5))
        with pytest.raises(NestingTooDeepError):
            parse_blocks(source, max_depth=3)

    def test_markers_inside_fence_are_not_lists(self) -> None:
        document = parse_blocks("- a\n```\n- b\n```")
        assert document.blocks == [
            UnorderedList(items=[[Text(value="a")]]),
            CodeBlock(raw_text="- b"),
        ]
