"""Markdown -> HTML pipeline used by the editor shell."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from prose.block_parser import parse_blocks
from prose.config import PROSE_MAX_NESTING_DEPTH, PROSE_MAX_SOURCE_CHARS
from prose.exceptions import DocumentTooLargeError, ResourceLimitError
from prose.renderer import render
from prose.schemas import Document, RenderResult

logger = logging.getLogger(__name__)


@dataclass
class RenderOptions:
    """Limits applied to a single render call.

    Attributes:
        max_source_chars: Longest source accepted before the call fails.
        max_nesting_depth: Deepest list or inline span nesting accepted.
    """

    max_source_chars: int = PROSE_MAX_SOURCE_CHARS
    max_nesting_depth: int = PROSE_MAX_NESTING_DEPTH


def parse_document(source: str, *, options: RenderOptions | None = None) -> Document:
    """Parse markdown source into a Document, enforcing resource limits.

    Raises:
        DocumentTooLargeError: If the source exceeds ``max_source_chars``.
        NestingTooDeepError: If nesting exceeds ``max_nesting_depth``.
    """
    opts = options or RenderOptions()
    try:
        if len(source) > opts.max_source_chars:
            raise DocumentTooLargeError(
                f"Document has {len(source)} characters; the limit is {opts.max_source_chars}"
            )
        return parse_blocks(source, max_depth=opts.max_nesting_depth)
    except ResourceLimitError as exc:
        logger.warning("Markdown render rejected: %s", exc)
        raise


def parse_and_render(source: str, *, options: RenderOptions | None = None) -> str:
    """Convert a full markdown document into an HTML fragment.

    Args:
        source: The complete current document text.
        options: Resource limits. Uses the configured defaults if None.

    Returns:
        HTML fragment suitable for direct display.

    Raises:
        ResourceLimitError: If the document is too large or too deeply
            nested. No partial output is produced.
    """
    return render_timed(source, options=options).html


def render_timed(source: str, *, options: RenderOptions | None = None) -> RenderResult:
    """Render a document and report how long parsing and rendering took."""
    started = time.perf_counter()
    document = parse_document(source, options=options)
    html = render(document)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.debug(
        "Rendered %d chars into %d blocks in %.3f ms",
        len(source),
        len(document.blocks),
        elapsed_ms,
    )
    return RenderResult(
        html=html,
        elapsed_ms=elapsed_ms,
        source_chars=len(source),
        block_count=len(document.blocks),
    )


def export_raw(source: str) -> str:
    """Return the markdown source unchanged, for saving as a ``.md`` file."""
    return source
