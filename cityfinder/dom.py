# cityfinder/dom.py
"""
Minimal document tree used as the render target.

Only what the client needs: elements with attributes, text nodes, ordered
children, event listeners and HTML serialization.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Union

from markupsafe import Markup, escape

VOID_TAGS = {"br", "hr", "img", "input", "link", "meta"}


@dataclass
class Event:
    type: str
    target: "Element"


Listener = Callable[[Event], Any]


class Text:
    def __init__(self, data: str):
        self.data = data
        self.parent: Optional[Element] = None

    @property
    def text_content(self) -> str:
        return self.data

    def to_html(self) -> str:
        return str(escape(self.data))

    def __repr__(self) -> str:
        return f"Text({self.data!r})"


Node = Union["Element", Text]


class Element:
    def __init__(
        self,
        tag: str,
        *,
        id: str | None = None,
        class_name: str = "",
        attrs: dict[str, str] | None = None,
        text: str = "",
    ):
        self.tag = tag.lower()
        self.id = id
        self.class_name = class_name
        self.attrs: dict[str, str] = dict(attrs or {})
        self.value = ""
        self.parent: Optional[Element] = None
        self.children: list[Node] = []
        self._listeners: dict[str, list[Listener]] = {}
        if text:
            self.append_child(Text(text))

    # ---- tree ----
    @property
    def first_child(self) -> Optional[Node]:
        return self.children[0] if self.children else None

    def append_child(self, node: Node) -> Node:
        if node is self:
            raise ValueError("cannot append an element to itself")
        if node.parent is not None:
            node.parent.remove_child(node)
        node.parent = self
        self.children.append(node)
        return node

    def remove_child(self, node: Node) -> Node:
        try:
            self.children.remove(node)
        except ValueError:
            raise ValueError(f"{node!r} is not a child of {self!r}") from None
        node.parent = None
        return node

    def iter(self) -> Iterator[Element]:
        """Depth-first walk over this element and its descendant elements."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find_all(self, tag: str) -> list[Element]:
        tag = tag.lower()
        return [el for el in self.iter() if el.tag == tag and el is not self]

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    @text_content.setter
    def text_content(self, value: str) -> None:
        while self.first_child is not None:
            self.remove_child(self.first_child)
        if value:
            self.append_child(Text(value))

    # ---- events ----
    def add_event_listener(self, type: str, listener: Listener) -> None:
        self._listeners.setdefault(type, []).append(listener)

    def dispatch_event(self, type: str) -> Event:
        event = Event(type=type, target=self)
        for listener in list(self._listeners.get(type, [])):
            listener(event)
        return event

    # ---- serialization ----
    def _attr_items(self) -> list[tuple[str, str]]:
        items: list[tuple[str, str]] = []
        if self.id:
            items.append(("id", self.id))
        if self.class_name:
            items.append(("class", self.class_name))
        items.extend(self.attrs.items())
        if self.tag == "input" and self.value:
            items.append(("value", self.value))
        return items

    def inner_html(self) -> Markup:
        return Markup("".join(child.to_html() for child in self.children))

    def to_html(self) -> Markup:
        attrs = "".join(f' {name}="{escape(value)}"' for name, value in self._attr_items())
        if self.tag in VOID_TAGS:
            return Markup(f"<{self.tag}{attrs}>")
        return Markup(f"<{self.tag}{attrs}>{self.inner_html()}</{self.tag}>")

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        return f"<Element {self.tag}{ident}>"


class Document:
    """
    Document with a body holding one container per region id.

    The readiness signal is one-shot: listeners run once on ``mark_ready``;
    a listener added afterwards runs immediately.
    """

    def __init__(self, *region_ids: str):
        self.body = Element("body")
        for region_id in region_ids:
            self.body.append_child(Element("div", id=region_id))
        self.ready = False
        self._ready_listeners: list[Callable[[], Any]] = []

    def create_element(self, tag: str, **kwargs: Any) -> Element:
        return Element(tag, **kwargs)

    def get_element_by_id(self, id: str) -> Optional[Element]:
        for el in self.body.iter():
            if el.id == id:
                return el
        return None

    def add_ready_listener(self, listener: Callable[[], Any]) -> None:
        if self.ready:
            listener()
            return
        self._ready_listeners.append(listener)

    def mark_ready(self) -> None:
        if self.ready:
            return
        self.ready = True
        listeners, self._ready_listeners = self._ready_listeners, []
        for listener in listeners:
            listener()
