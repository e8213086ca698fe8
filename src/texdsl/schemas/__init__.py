"""Document tree models for texdsl."""

from texdsl.schemas.document import Document, HeaderDeclaration
from texdsl.schemas.environments import (
    Align,
    CommonEnvironment,
    Custom,
    Enumerate,
    Environment,
    Frame,
    Itemize,
    ListEnvironment,
    Math,
)
from texdsl.schemas.nodes import DocumentClass, Item, Node, Text, UsePackage

__all__ = [
    "Align",
    "CommonEnvironment",
    "Custom",
    "Document",
    "DocumentClass",
    "Enumerate",
    "Environment",
    "Frame",
    "HeaderDeclaration",
    "Item",
    "Itemize",
    "ListEnvironment",
    "Math",
    "Node",
    "Text",
    "UsePackage",
]
