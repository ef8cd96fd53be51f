# cityfinder/view.py
from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import Any, Callable, Union

from .dom import Document, Element, Event, Node
from .errors import ConfigurationError
from .host import HEADER_ID, VIEW_ID
from .weather.openweather import City, SearchResult

Content = Union[str, Node, Sequence[Node]]

HOME_MESSAGE = "Please, type your city into the input and press find button."
NOT_FOUND_MESSAGE = "Not found, 404"
LOADING_MESSAGE = "Loading..."
EMPTY_MESSAGE = "No such city..."


def _noop(*_: Any) -> None:
    return None


class Region(enum.Enum):
    HEADER = "header"
    MAIN = "main"


class RenderSurface:
    """
    Owns the two page containers; every ``replace`` is a total rewrite of one.

    A string replaces the container's children with a single text node; a
    node or a sequence of nodes replaces them with those nodes, in order.
    """

    def __init__(self, document: Document, header_id: str = HEADER_ID, main_id: str = VIEW_ID):
        targets: dict[Region, Element] = {}
        for region, element_id in ((Region.HEADER, header_id), (Region.MAIN, main_id)):
            el = document.get_element_by_id(element_id)
            if el is None:
                raise ConfigurationError(f"Render container #{element_id} not found in document")
            targets[region] = el
        if targets[Region.HEADER] is targets[Region.MAIN]:
            raise ConfigurationError("Header and main regions must be distinct containers")
        self._targets = targets

    def target(self, region: Region) -> Element:
        return self._targets[region]

    def replace(self, region: Region, content: Content) -> None:
        root = self._targets[region]
        if isinstance(content, str):
            root.text_content = content
            return
        nodes = list(content) if isinstance(content, Sequence) else [content]
        # remove all children
        while root.first_child is not None:
            root.remove_child(root.first_child)
        for node in nodes:
            root.append_child(node)


class View:
    def __init__(self, surface: RenderSurface, document: Document):
        self.surface = surface
        self.document = document

    def render_header(
        self,
        *,
        on_text_input_change: Callable[[Event], Any] = _noop,
        on_button_click: Callable[[Event], Any] = _noop,
        input_value: str = "",
    ) -> None:
        text_input = self.document.create_element("input", attrs={"type": "text", "name": "q"})
        text_input.value = input_value
        text_input.add_event_listener("input", on_text_input_change)

        button = self.document.create_element("button", text="Find")
        button.add_event_listener("click", on_button_click)
        self.surface.replace(Region.HEADER, [text_input, button])

    def render_search_results(self, result: SearchResult, on_item_click: Callable[[City], Any]) -> None:
        if result.count == 0:
            self.render_empty()
            return
        content = self.document.create_element("ul", class_name="cityList")
        for item in result.items:
            el = self.document.create_element("li", text=item.name)
            el.add_event_listener("click", lambda _evt, item=item: on_item_click(item))
            content.append_child(el)
        self.surface.replace(Region.MAIN, content)

    def render_home(self) -> None:
        self.surface.replace(Region.MAIN, HOME_MESSAGE)

    def render_not_found(self) -> None:
        self.surface.replace(Region.MAIN, NOT_FOUND_MESSAGE)

    def render_loading(self) -> None:
        self.surface.replace(Region.MAIN, LOADING_MESSAGE)

    def render_error(self, message: str) -> None:
        self.surface.replace(Region.MAIN, f"Error: {message}")

    def render_empty(self) -> None:
        self.surface.replace(Region.MAIN, EMPTY_MESSAGE)
