"""Render output model."""

from __future__ import annotations

from pydantic import BaseModel


class RenderResult(BaseModel):
    """Rendered HTML along with timing details for the editor's benchmark display."""

    html: str
    elapsed_ms: float
    source_chars: int
    block_count: int
