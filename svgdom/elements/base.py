"""Element tree nodes and their markup read/write."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from svgdom.config import XLINK_NS
from svgdom.elements.store import AttributeStore, T
from svgdom.types.style import Style
from svgdom.types.transform import TransformList

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element as MarkupNode

    from svgdom.markup import MarkupDocument

logger = logging.getLogger(__name__)

XLINK_PREFIX = "xlink:"


class SvgElement:
    """A node in the element tree: one attribute store plus owned children."""

    name: str = ""

    def __init__(self, id: str | None = None) -> None:
        self.attributes = AttributeStore()
        self.children: list[SvgElement] = []
        self.parent: SvgElement | None = None
        self.text: str | None = None
        self.tail: str | None = None
        if id is not None:
            self.id = id

    @property
    def id(self) -> str | None:
        value = self.attributes.get("id")
        return None if value is None else str(value)

    @id.setter
    def id(self, value: str | None) -> None:
        self.attributes["id"] = value

    def __getitem__(self, name: str) -> Any:
        return self.attributes.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.attributes[name] = value

    def __delitem__(self, name: str) -> None:
        del self.attributes[name]

    def __contains__(self, name: object) -> bool:
        return name in self.attributes

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} id={self.id!r} children={len(self.children)}>"

    # ── Tree structure ────────────────────────────────────────────────────

    def add_child(self, child: SvgElement) -> SvgElement:
        if child.parent is not None:
            raise ValueError(f"{child!r} already has a parent")
        node: SvgElement | None = self
        while node is not None:
            if node is child:
                raise ValueError(f"Adding {child!r} would create a cycle")
            node = node.parent
        child.parent = self
        self.children.append(child)
        return child

    def add_children(self, *children: SvgElement) -> None:
        for child in children:
            self.add_child(child)

    def remove_child(self, child: SvgElement) -> None:
        self.children.remove(child)
        child.parent = None

    def get_typed(self, name: str, kind: type[T] | None = None) -> T:
        return self.attributes.get_typed(name, kind)

    # ── Markup I/O ────────────────────────────────────────────────────────

    def read_markup(self, document: MarkupDocument, node: MarkupNode) -> None:
        """Load this element's attributes, text and trailing text from a markup node."""
        for name, value in document.attributes(node):
            if name == "style":
                self.attributes[name] = Style.from_text(value)
            elif name == "transform":
                self.attributes[name] = TransformList.from_text(value)
            else:
                self.attributes[name] = value
        self.text = document.text(node)
        self.tail = document.tail(node)

    def write_markup(self, document: MarkupDocument, parent: MarkupNode | None = None) -> MarkupNode:
        """Emit this element and its children; becomes the root when ``parent`` is None."""
        node = document.create_element(self.name)
        for name, value in self.attributes.snapshot():
            if value is None:
                continue
            if name == "style":
                text = value.to_text() if isinstance(value, Style) else str(value)
                document.set_attribute(node, "style", text)
            elif name == "transform":
                document.set_attribute(node, "transform", str(value))
            elif name.startswith(XLINK_PREFIX):
                document.set_attribute(node, name[len(XLINK_PREFIX):], str(value), namespace=XLINK_NS)
            else:
                document.set_attribute(node, name, str(value))
        if self.text:
            document.set_text(node, self.text)
        if self.tail:
            document.set_tail(node, self.tail)

        for child in self.children:
            child.write_markup(document, node)

        if parent is None:
            document.set_root(node)
        else:
            document.append_child(parent, node)
        logger.debug("Wrote <%s> with %d attributes", self.name, len(self.attributes))
        return node


class StyledTransformedElement(SvgElement):
    """An element with typed ``style`` and ``transform`` accessors.

    Reading either property on an element without that attribute creates an
    empty value and stores it, so callers can mutate it in place.
    """

    @property
    def style(self) -> Style:
        return self.get_typed("style", Style)

    @style.setter
    def style(self, value: Style | str) -> None:
        self.attributes["style"] = value

    @property
    def transform(self) -> TransformList:
        return self.get_typed("transform", TransformList)

    @transform.setter
    def transform(self, value: TransformList | str) -> None:
        self.attributes["transform"] = value


class GenericElement(StyledTransformedElement):
    """Element for any tag without a registered class; keeps the tag it was read with."""

    def __init__(self, name: str, id: str | None = None) -> None:
        super().__init__(id)
        self.name = name
