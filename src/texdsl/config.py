"""Local configuration for texdsl."""

from __future__ import annotations

import os


DEFAULT_OUTPUT_ENCODING = "utf-8"
DEFAULT_MARGIN_PREFIX = "|"

# Indentation added per nesting level in rendered output.
INDENT_UNIT = "  "

TEXDSL_OUTPUT_ENCODING = os.getenv("TEXDSL_OUTPUT_ENCODING", DEFAULT_OUTPUT_ENCODING)

# Blank markers fall back to the default.
_margin_prefix = os.getenv("TEXDSL_MARGIN_PREFIX", DEFAULT_MARGIN_PREFIX)
TEXDSL_MARGIN_PREFIX = _margin_prefix if _margin_prefix.strip() else DEFAULT_MARGIN_PREFIX
