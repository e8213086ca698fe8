"""texdsl: build LaTeX documents as node trees and render them."""

from texdsl.builder import document
from texdsl.exceptions import InvalidMarginPrefixError, TexDslError
from texdsl.renderer import Sink, render, render_to_string, write_document
from texdsl.schemas import (
    Align,
    CommonEnvironment,
    Custom,
    Document,
    DocumentClass,
    Enumerate,
    Environment,
    Frame,
    Item,
    Itemize,
    ListEnvironment,
    Math,
    Node,
    Text,
    UsePackage,
)
from texdsl.text_utils import split_lines, trim_margin

__all__ = [
    "Align",
    "CommonEnvironment",
    "Custom",
    "Document",
    "DocumentClass",
    "Enumerate",
    "Environment",
    "Frame",
    "InvalidMarginPrefixError",
    "Item",
    "Itemize",
    "ListEnvironment",
    "Math",
    "Node",
    "Sink",
    "TexDslError",
    "Text",
    "UsePackage",
    "document",
    "render",
    "render_to_string",
    "split_lines",
    "trim_margin",
    "write_document",
]
