"""prose: render markdown into HTML as the author types."""

from prose.block_parser import parse_blocks
from prose.exceptions import (
    DocumentTooLargeError,
    NestingTooDeepError,
    ProseError,
    ResourceLimitError,
)
from prose.inline_parser import parse_inline
from prose.pipeline import (
    RenderOptions,
    export_raw,
    parse_and_render,
    parse_document,
    render_timed,
)
from prose.renderer import render
from prose.sample import DEFAULT_DOCUMENT
from prose.schemas import Document, RenderResult

__all__ = [
    "DEFAULT_DOCUMENT",
    "Document",
    "DocumentTooLargeError",
    "NestingTooDeepError",
    "ProseError",
    "RenderOptions",
    "RenderResult",
    "ResourceLimitError",
    "export_raw",
    "parse_and_render",
    "parse_blocks",
    "parse_document",
    "parse_inline",
    "render",
    "render_timed",
]
