"""Parse inline spans (emphasis, code, links, images) inside block text."""

from __future__ import annotations

import re
import string

from prose.config import PROSE_MAX_NESTING_DEPTH
from prose.exceptions import NestingTooDeepError
from prose.schemas import Bold, Image, Inline, InlineCode, Italic, Link, Text

# Characters that may start a span. Everything else is copied as literal text.
_SPECIAL_RE = re.compile(r"[\\`!\[*_\n]")
_ESCAPE_RE = re.compile(r"\\([" + re.escape(string.punctuation) + r"])")
_ESCAPABLE = frozenset(string.punctuation)
_BRACKET_PAIRS = {"]": "[", ")": "("}
_MAX_CODE_RUN = 2


def parse_inline(text: str, *, max_depth: int = PROSE_MAX_NESTING_DEPTH) -> list[Inline]:
    """Parse a block's text into a sequence of inline nodes.

    Never fails on markup: a delimiter without a closer on the same line is
    kept as literal text. Candidates are tried in priority order at each
    position: backslash escape, code span, image, link, bold, italic.

    Args:
        text: Text of a heading, paragraph or list item. Lines are separated
            by ``\\n``; no span crosses a line break.
        max_depth: Deepest allowed span nesting.

    Returns:
        Inline nodes in source order. Adjacent literal text is merged.

    Raises:
        NestingTooDeepError: If spans in the result nest deeper than
            ``max_depth``. Openers that never close do not count.
    """
    parser = _InlineParser(text, max_depth=max_depth)
    nodes, _ = parser.parse_nodes(0, len(text), closer=None, depth=0)
    if _span_depth(nodes) > max_depth:
        raise NestingTooDeepError(
            f"Inline spans nest deeper than the maximum of {max_depth}"
        )
    return nodes


class _InlineParser:
    """Cursor-based recursive descent over one block's text.

    Content one level past ``max_depth`` is still scanned for its closer but
    cannot open further spans, so recursion stays bounded and the finished
    tree decides whether the ceiling was breached.
    """

    def __init__(self, text: str, *, max_depth: int) -> None:
        self.text = text
        self.max_depth = max_depth
        self._brackets = _match_brackets(text)
        # (start, closer, bound, past ceiling) keys already known not to close.
        self._failed: set[tuple[int, str | None, int, bool]] = set()

    def parse_nodes(
        self, pos: int, end: int, *, closer: str | None, depth: int
    ) -> tuple[list[Inline], int] | None:
        """Parse spans from ``pos`` up to ``closer`` or ``end``.

        With a closer, returns the nodes and the position just past the
        closing run, or None if the line ends first. Without one the parse
        runs to ``end`` and always succeeds.
        """
        key = (pos, closer, end, depth > self.max_depth)
        if key in self._failed:
            return None

        text = self.text
        start = pos
        nodes: list[Inline] = []
        buffer: list[str] = []

        while pos < end:
            match = _SPECIAL_RE.search(text, pos, end)
            if match is None:
                buffer.append(text[pos:end])
                pos = end
                break
            if match.start() > pos:
                buffer.append(text[pos : match.start()])
                pos = match.start()

            char = text[pos]

            if char == "\n":
                if closer is not None:
                    break
                buffer.append(char)
                pos += 1
                continue

            if char == "\\":
                if pos + 1 < end and text[pos + 1] in _ESCAPABLE:
                    buffer.append(text[pos + 1])
                    pos += 2
                else:
                    buffer.append(char)
                    pos += 1
                continue

            if char == "`":
                run = self._run_length(pos, end)
                code = self._code_span(pos, run, end)
                if code is None:
                    buffer.append(text[pos : pos + run])
                    pos += run
                    continue
                node, pos = code
                _flush(buffer, nodes)
                nodes.append(node)
                continue

            if char == "!" or char == "[":
                image = char == "!"
                if image and not text.startswith("[", pos + 1):
                    buffer.append(char)
                    pos += 1
                    continue
                link = self._link(pos, end, depth, image=image)
                if link is None:
                    buffer.append(char)
                    pos += 1
                    continue
                node, pos = link
                _flush(buffer, nodes)
                nodes.append(node)
                continue

            # Emphasis marker: close the current span, open a nested one, or
            # fall back to a literal character.
            run = self._run_length(pos, end)
            if (
                closer is not None
                and char == closer[0]
                and pos > start
                and self._can_close(pos, run, end)
            ):
                if len(closer) == 2 and run >= 2:
                    _flush(buffer, nodes)
                    return nodes, pos + 2
                if len(closer) == 1:
                    if run == 2:
                        nested = self._emphasis(pos, end, depth, allow_italic=False)
                        if nested is not None:
                            node, pos = nested
                            _flush(buffer, nodes)
                            nodes.append(node)
                            continue
                    _flush(buffer, nodes)
                    return nodes, pos + 1

            emphasis = self._emphasis(pos, end, depth)
            if emphasis is None:
                buffer.append(char)
                pos += 1
                continue
            node, pos = emphasis
            _flush(buffer, nodes)
            nodes.append(node)

        if closer is not None:
            self._failed.add(key)
            return None
        _flush(buffer, nodes)
        return nodes, pos

    def _run_length(self, pos: int, end: int) -> int:
        char = self.text[pos]
        cursor = pos
        while cursor < end and self.text[cursor] == char:
            cursor += 1
        return cursor - pos

    def _can_open(self, pos: int, run: int, end: int) -> bool:
        after = self.text[pos + run] if pos + run < end else " "
        if after.isspace():
            return False
        if self.text[pos] == "_" and pos > 0 and self.text[pos - 1].isalnum():
            return False
        return True

    def _can_close(self, pos: int, run: int, end: int) -> bool:
        before = self.text[pos - 1] if pos > 0 else " "
        if before.isspace():
            return False
        if self.text[pos] == "_":
            after = self.text[pos + run] if pos + run < end else " "
            if after.isalnum():
                return False
        return True

    def _emphasis(
        self, pos: int, end: int, depth: int, *, allow_italic: bool = True
    ) -> tuple[Inline, int] | None:
        if depth > self.max_depth:
            return None
        char = self.text[pos]
        run = self._run_length(pos, end)
        if not self._can_open(pos, run, end):
            return None
        if run >= 2:
            parsed = self.parse_nodes(pos + 2, end, closer=char * 2, depth=depth + 1)
            if parsed is not None:
                content, after = parsed
                return Bold(content=content), after
        if not allow_italic:
            return None
        parsed = self.parse_nodes(pos + 1, end, closer=char, depth=depth + 1)
        if parsed is not None:
            content, after = parsed
            return Italic(content=content), after
        return None

    def _code_span(self, pos: int, run: int, end: int) -> tuple[Inline, int] | None:
        if run > _MAX_CODE_RUN:
            return None
        text = self.text
        delimiter = "`" * run
        search = pos + run
        while True:
            found = text.find(delimiter, search, end)
            if found == -1:
                return None
            if "\n" in text[search:found]:
                return None
            closing_run = self._run_length(found, end)
            if closing_run == run:
                break
            search = found + closing_run

        content = text[pos + run : found]
        if len(content) >= 2 and content[0] == " " and content[-1] == " " and content.strip(" "):
            content = content[1:-1]
        return InlineCode(raw_text=content), found + run

    def _matching_bracket(self, pos: int, end: int) -> int | None:
        """Index of the bracket closing the one at ``pos``, if before ``end``."""
        closing = self._brackets.get(pos)
        if closing is None or closing >= end:
            return None
        return closing

    def _link(self, pos: int, end: int, depth: int, *, image: bool) -> tuple[Inline, int] | None:
        text = self.text
        bracket = pos + 1 if image else pos
        label_end = self._matching_bracket(bracket, end)
        if label_end is None or label_end + 1 >= end or text[label_end + 1] != "(":
            return None
        target_end = self._matching_bracket(label_end + 1, end)
        if target_end is None:
            return None
        target = text[label_end + 2 : target_end].strip()
        if any(char.isspace() for char in target):
            return None

        if image:
            alt_text = _ESCAPE_RE.sub(r"\1", text[bracket + 1 : label_end])
            return Image(alt_text=alt_text, target=target), target_end + 1

        if depth > self.max_depth:
            return None
        label, _ = self.parse_nodes(bracket + 1, label_end, closer=None, depth=depth + 1)
        return Link(label=label, target=target), target_end + 1


def _match_brackets(text: str) -> dict[int, int]:
    """Pair every ``[``/``(`` with its balanced closer on the same line.

    Backslash-escaped characters are skipped. Unclosed openers are left out.
    """
    matches: dict[int, int] = {}
    stacks: dict[str, list[int]] = {"[": [], "(": []}
    cursor = 0
    while cursor < len(text):
        char = text[cursor]
        if char == "\\":
            cursor += 2
            continue
        if char == "\n":
            for stack in stacks.values():
                stack.clear()
        elif char in stacks:
            stacks[char].append(cursor)
        elif char in _BRACKET_PAIRS:
            stack = stacks[_BRACKET_PAIRS[char]]
            if stack:
                matches[stack.pop()] = cursor
        cursor += 1
    return matches


def _span_depth(nodes: list[Inline]) -> int:
    deepest = 0
    for node in nodes:
        if isinstance(node, (Bold, Italic)):
            deepest = max(deepest, 1 + _span_depth(node.content))
        elif isinstance(node, Link):
            deepest = max(deepest, 1 + _span_depth(node.label))
    return deepest


def _flush(buffer: list[str], nodes: list[Inline]) -> None:
    if buffer:
        nodes.append(Text(value="".join(buffer)))
        buffer.clear()
