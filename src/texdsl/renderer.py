"""Serialize a document tree to LaTeX markup."""

from __future__ import annotations

import codecs
import io
import logging
from pathlib import Path
from typing import Protocol

from texdsl.config import INDENT_UNIT, TEXDSL_MARGIN_PREFIX, TEXDSL_OUTPUT_ENCODING
from texdsl.schemas import (
    Document,
    DocumentClass,
    Environment,
    Item,
    Node,
    Text,
    UsePackage,
)
from texdsl.text_utils import split_lines, trim_margin

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """Byte destination the renderer writes to, e.g. a binary file."""

    def write(self, data: bytes, /) -> object: ...


def render(
    node: Node,
    sink: Sink,
    indent: str = "",
    *,
    encoding: str = TEXDSL_OUTPUT_ENCODING,
) -> None:
    """Write ``node`` and its subtree to ``sink``.

    The subtree is encoded as one stream, so encodings with a byte-order
    mark emit it once, before the first line.

    Args:
        node: Root of the subtree to render.
        sink: Destination accepting encoded bytes. Write errors propagate.
        indent: Prefix for the lines of ``node``; children get one more
            ``INDENT_UNIT``.
        encoding: Text encoding for the emitted bytes.

    Raises:
        TypeError: If the tree contains a node type the renderer does not know.
        LookupError: If ``encoding`` is unknown.
    """
    encoder = codecs.getincrementalencoder(encoding)()
    _render_node(node, sink, indent, encoder)
    tail = encoder.encode("", final=True)
    if tail:
        sink.write(tail)


def render_to_string(node: Node, *, encoding: str = TEXDSL_OUTPUT_ENCODING) -> str:
    """Render ``node`` into memory and return the markup."""
    buffer = io.BytesIO()
    render(node, buffer, encoding=encoding)
    return buffer.getvalue().decode(encoding)


def write_document(
    document: Document,
    path: Path,
    *,
    encoding: str = TEXDSL_OUTPUT_ENCODING,
) -> None:
    """Render ``document`` into the file at ``path``, replacing its contents.

    Raises:
        OSError: If the file cannot be opened or written.
    """
    logger.debug("Writing document to %s", path)
    with path.open("wb") as handle:
        render(document, handle, encoding=encoding)


def _render_node(
    node: Node, sink: Sink, indent: str, encoder: codecs.IncrementalEncoder
) -> None:
    if isinstance(node, Document):
        # Preamble stays at the root level, outside the document scope.
        for declaration in node.header:
            _render_node(declaration, sink, indent, encoder)
        _render_environment(node, sink, indent, encoder)
    elif isinstance(node, Environment):
        _render_environment(node, sink, indent, encoder)
    elif isinstance(node, Text):
        _write(sink, _format_text(node.text, indent), encoder)
    elif isinstance(node, Item):
        _write(sink, _format_item(node), encoder)
    elif isinstance(node, DocumentClass):
        _write(sink, f"\\documentclass{{{node.type}}}\n", encoder)
    elif isinstance(node, UsePackage):
        _write(sink, f"\\usepackage{{{', '.join(node.packages)}}}\n", encoder)
    else:
        raise TypeError(f"Cannot render node of type {type(node).__name__}")


def _render_environment(
    environment: Environment,
    sink: Sink,
    indent: str,
    encoder: codecs.IncrementalEncoder,
) -> None:
    begin = (
        f"{indent}\\begin{{{environment.name}}}"
        f"{_format_options(environment.options)}"
        f"{_format_arguments(environment.arguments)}\n"
    )
    _write(sink, begin, encoder)
    for child in environment.children:
        _render_node(child, sink, indent + INDENT_UNIT, encoder)
    _write(sink, f"{indent}\\end{{{environment.name}}}\n", encoder)


def _format_options(options: dict[str, str]) -> str:
    if not options:
        return ""
    return "[" + "][".join(f"{key}={value}" for key, value in options.items()) + "]"


def _format_arguments(arguments: list[str]) -> str:
    if not arguments:
        return ""
    return "{" + "}{".join(arguments) + "}"


def _format_text(text: str, indent: str) -> str:
    lines = split_lines(trim_margin(text, TEXDSL_MARGIN_PREFIX))
    return indent + ("\n" + indent).join(lines) + "\n"


def _format_item(item: Item) -> str:
    if item.label:
        return f"\\item[{item.label}]"
    return "\\item"


def _write(sink: Sink, text: str, encoder: codecs.IncrementalEncoder) -> None:
    sink.write(encoder.encode(text))
