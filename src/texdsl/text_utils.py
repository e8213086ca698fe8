"""Line handling for free-text leaves."""

from __future__ import annotations

import re

from texdsl.config import DEFAULT_MARGIN_PREFIX
from texdsl.exceptions import InvalidMarginPrefixError

_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")


def split_lines(text: str) -> list[str]:
    """Split text on any line break, keeping a trailing empty line."""
    return _LINE_BREAK_RE.split(text)


def trim_margin(text: str, margin_prefix: str = DEFAULT_MARGIN_PREFIX) -> str:
    """Strip a leading margin marker from every line of a text block.

    Lets multi-line literals be aligned with the surrounding code::

        '''
            |first line
            |  indented line
        '''

    Rules:
    1. The first and last lines are dropped when blank.
    2. A line whose first non-whitespace characters are ``margin_prefix``
       loses that whitespace and the prefix.
    3. Any other line is kept verbatim.

    Args:
        text: Raw text block.
        margin_prefix: Marker that ends the margin on each line.

    Returns:
        The trimmed lines joined with ``\\n``.

    Raises:
        InvalidMarginPrefixError: If ``margin_prefix`` is blank.
    """
    if not margin_prefix.strip():
        raise InvalidMarginPrefixError("Margin prefix must be non-blank")

    lines = split_lines(text)
    last_index = len(lines) - 1

    trimmed: list[str] = []
    for index, line in enumerate(lines):
        if index in (0, last_index) and not line.strip():
            continue
        content = line.lstrip()
        if content.startswith(margin_prefix):
            trimmed.append(content[len(margin_prefix) :])
        else:
            trimmed.append(line)

    return "\n".join(trimmed)
