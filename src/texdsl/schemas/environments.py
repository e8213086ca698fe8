"""Environment models and the scope factories used to nest them."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, TypeVar

from pydantic import Field, SerializeAsAny

from texdsl.schemas.nodes import Item, Node, Text

EnvironmentT = TypeVar("EnvironmentT", bound="Environment")


class Environment(Node):
    """A named ``\\begin``/``\\end`` scope.

    Attributes:
        name: Environment name, e.g. "itemize".
        children: Nested nodes in rendering order.
        arguments: Braced arguments, rendered as ``{a}{b}``.
        options: Bracketed options, rendered as ``[k1=v1][k2=v2]``.
    """

    name: str
    children: list[SerializeAsAny[Node]] = Field(default_factory=list)
    arguments: list[str] = Field(default_factory=list)
    options: dict[str, str] = Field(default_factory=dict)

    def add_text(self, text: str) -> Text:
        """Append a free-text leaf. Markup characters are not escaped."""
        leaf = Text(text=text)
        self.children.append(leaf)
        return leaf

    def add_argument(self, value: str) -> None:
        self.arguments.append(value)

    def set_option(self, key: str, value: str) -> None:
        """Set a bracketed option, replacing any previous value for ``key``."""
        self.options[key] = value

    def _init_element(
        self,
        element: EnvironmentT,
        init: Callable[[EnvironmentT], Any] | None,
    ) -> EnvironmentT:
        """Populate a new child scope, then attach it to this one.

        The callback only receives the child, so it cannot reach this
        environment's children while the child is being built.
        """
        if init is not None:
            init(element)
        self.children.append(element)
        return element


class CommonEnvironment(Environment):
    """Environment that can contain the structural environments."""

    def frame(self, title: str, init: Callable[[Frame], Any] | None = None) -> Frame:
        return self._init_element(Frame(title), init)

    def itemize(self, init: Callable[[Itemize], Any] | None = None) -> Itemize:
        return self._init_element(Itemize(), init)

    def enumerate(self, init: Callable[[Enumerate], Any] | None = None) -> Enumerate:
        return self._init_element(Enumerate(), init)

    def math(self, init: Callable[[Math], Any] | None = None) -> Math:
        return self._init_element(Math(), init)

    def align(self, init: Callable[[Align], Any] | None = None) -> Align:
        return self._init_element(Align(), init)

    def custom(
        self,
        name: str,
        init: Callable[[Custom], Any] | None = None,
        *,
        arguments: Iterable[str] = (),
        options: Mapping[str, str] | None = None,
    ) -> Custom:
        """Add an environment with a caller-chosen name.

        Args:
            name: Environment name.
            init: Callback that populates the new environment.
            arguments: Braced arguments, in order.
            options: Bracketed options.

        Returns:
            The populated environment, already attached to this one.
        """
        element = Custom(name=name, arguments=list(arguments), options=dict(options or {}))
        return self._init_element(element, init)


class ListEnvironment(CommonEnvironment):
    """Environment whose entries are introduced with ``\\item``."""

    def item(self, label: str = "") -> Item:
        entry = Item(label=label)
        self.children.append(entry)
        return entry


class Itemize(ListEnvironment):
    name: str = "itemize"


class Enumerate(ListEnvironment):
    name: str = "enumerate"


class Math(CommonEnvironment):
    name: str = "math"


class Align(CommonEnvironment):
    name: str = "align"


class Frame(CommonEnvironment):
    """Beamer frame; the title is its only braced argument.

    Any ``arguments`` passed alongside the title are discarded.
    """

    name: str = "frame"

    def __init__(self, title: str, **data: Any) -> None:
        data["arguments"] = [title]
        super().__init__(**data)


class Custom(CommonEnvironment):
    """Environment with caller-supplied name, arguments and options."""
