"""Leaf node models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Node(BaseModel):
    """Anything that can be placed in a document tree."""


class Text(Node):
    """Free text, written verbatim after margin trimming."""

    text: str


class Item(Node):
    """A list entry marker; an empty label renders as a bare ``\\item``."""

    label: str | None = None


class DocumentClass(Node):
    """``\\documentclass`` header declaration."""

    type: str


class UsePackage(Node):
    """``\\usepackage`` header declaration for one or more packages."""

    packages: list[str] = Field(default_factory=list)
