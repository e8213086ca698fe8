"""Document root model."""

from __future__ import annotations

from typing import Union

from pydantic import Field

from texdsl.schemas.environments import CommonEnvironment
from texdsl.schemas.nodes import DocumentClass, UsePackage

HeaderDeclaration = Union[DocumentClass, UsePackage]


class Document(CommonEnvironment):
    """The ``document`` environment plus the preamble written before it."""

    name: str = "document"
    header: list[HeaderDeclaration] = Field(default_factory=list)

    def documentclass(self, type: str) -> None:
        self.header.append(DocumentClass(type=type))

    def usepackage(self, *packages: str) -> None:
        self.header.append(UsePackage(packages=list(packages)))
