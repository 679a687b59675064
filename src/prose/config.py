"""Local configuration for prose."""

from __future__ import annotations

import os


DEFAULT_MAX_SOURCE_CHARS = 1_000_000
DEFAULT_MAX_NESTING_DEPTH = 32

# Columns a tab counts for when measuring list indentation.
TAB_WIDTH = 4

PROSE_MAX_SOURCE_CHARS = int(os.getenv("PROSE_MAX_SOURCE_CHARS", str(DEFAULT_MAX_SOURCE_CHARS)))
PROSE_MAX_NESTING_DEPTH = int(os.getenv("PROSE_MAX_NESTING_DEPTH", str(DEFAULT_MAX_NESTING_DEPTH)))
