"""Components that render the pages served by the web server."""

from __future__ import annotations

import enum
import html
import itertools
from typing import ClassVar, Iterable, Iterator, List


class WebComponentType(enum.Enum):
    """HTML element kinds a component can render as."""

    INPUT = 0
    BUTTON = 1
    TEXTAREA = 2
    SELECT = 3
    OPTION = 4
    DIV = 5
    SPAN = 6
    H1 = 7
    H2 = 8
    H3 = 9
    H4 = 10
    H5 = 11
    H6 = 12
    P = 13
    A = 14
    IMG = 15
    UL = 16
    OL = 17
    LI = 18
    TABLE = 19
    TR = 20
    TD = 21
    TH = 22
    FORM = 23
    LABEL = 24
    IFRAME = 25
    SCRIPT = 26
    STYLE = 27
    LINK = 28
    META = 29
    HEAD = 30
    BODY = 31
    HTML = 32


_VOID_ELEMENTS = frozenset(
    {WebComponentType.INPUT, WebComponentType.IMG, WebComponentType.LINK, WebComponentType.META}
)


class WebComponent:
    """An HTML element with optional attributes and child components.

    Every component gets a unique, increasing id on creation. Void elements
    such as ``input`` or ``img`` cannot have children.
    """

    _ids: ClassVar[Iterator[int]] = itertools.count()

    def __init__(
        self,
        component_type: WebComponentType = WebComponentType.DIV,
        children: Iterable[WebComponent] = (),
        *,
        html_class: str = "",
        html_id: str = "",
        html_style: str = "",
    ) -> None:
        self.id = next(WebComponent._ids)
        self.type = component_type
        self.html_class = html_class
        self.html_id = html_id
        self.html_style = html_style
        self._children: List[WebComponent] = []
        for child in children:
            self.add_child(child)

    @property
    def can_have_children(self) -> bool:
        return self.type not in _VOID_ELEMENTS

    @property
    def children(self) -> List[WebComponent]:
        """Copy of the child components, in order."""
        return list(self._children)

    def add_child(self, child: WebComponent) -> None:
        if not self.can_have_children:
            raise ValueError(f"{self.type.name} components cannot have children")
        self._children.append(child)

    def remove_child(self, child: WebComponent) -> None:
        """Remove every occurrence of ``child``; absent children are ignored."""
        self._children = [existing for existing in self._children if existing is not child]

    def _render_children(self) -> str:
        return "".join(child.render() for child in self._children)

    def _attributes(self) -> str:
        pairs = (("id", self.html_id), ("class", self.html_class), ("style", self.html_style))
        return "".join(
            f' {name}="{html.escape(value, quote=True)}"' for name, value in pairs if value
        )

    def render(self) -> str:
        """HTML text of the component and its children."""
        tag = self.type.name.lower()
        opening = f"<{tag}{self._attributes()}>"
        if not self.can_have_children:
            return opening
        return f"{opening}{self._render_children()}</{tag}>"

    def component_name(self) -> str:
        return "WebComponent"

    def component_type(self) -> str:
        return self.type.name

    def component_html(self) -> str:
        return self.render()


class FullBody(WebComponent):
    """Whole HTML page wrapping its children in the document body."""

    def __init__(self, children: Iterable[WebComponent] = ()) -> None:
        super().__init__(WebComponentType.HTML, children)

    def render(self) -> str:
        return (
            "<!DOCTYPE html><html><head><title>Finder</title></head><body>"
            + self._render_children()
            + "</body></html>"
        )

    def component_name(self) -> str:
        return "ComponentFullBody"

    def component_type(self) -> str:
        return "HTML"

    def component_html(self) -> str:
        return self.render()