"""Test setup for texdsl."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from texdsl import Document, document  # noqa: E402


@pytest.fixture
def beamer_document() -> Document:
    """A small beamer presentation with a header and one frame."""

    def body(doc: Document) -> None:
        doc.documentclass("beamer")
        doc.usepackage("inputenc", "babel")
        doc.frame("Intro", lambda frame: frame.add_text("Hello"))

    return document(body)
