"""Entry point for building document trees."""

from __future__ import annotations

from typing import Any, Callable

from texdsl.schemas import Document


def document(init: Callable[[Document], Any] | None = None) -> Document:
    """Create a document root and let ``init`` populate it.

    Example::

        def body(doc: Document) -> None:
            doc.documentclass("beamer")
            doc.usepackage("inputenc", "babel")
            doc.frame("Intro", lambda frame: frame.add_text("Hello"))

        tex = render_to_string(document(body))
    """
    root = Document()
    if init is not None:
        init(root)
    return root
