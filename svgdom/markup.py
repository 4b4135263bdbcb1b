"""Markup document over xml.etree.ElementTree, plus element-tree read/write helpers.

Attribute names cross this boundary in prefixed form: ElementTree's
``{http://www.w3.org/1999/xlink}href`` is presented to elements as
``xlink:href``. Names in other foreign namespaces stay in ``{uri}local`` form.
"""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator

from svgdom.config import SVG_NS, XLINK_NS, XML_NS
from svgdom.elements.base import SvgElement
from svgdom.elements.registry import ElementRegistry, get_registry

logger = logging.getLogger(__name__)

# Namespaces whose attributes are presented with a fixed prefix
_PREFIXES = {XLINK_NS: "xlink", XML_NS: "xml"}


def split_tag(tag: str) -> tuple[str | None, str]:
    """Split a ``{uri}local`` name into ``(uri, local)``."""
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return uri, local
    return None, tag


class MarkupDocument:
    """Creates and holds markup nodes for one document in a single namespace."""

    def __init__(self, namespace_uri: str = SVG_NS, root: ET.Element | None = None) -> None:
        self.namespace_uri = namespace_uri
        self.root = root

    @classmethod
    def from_string(cls, text: str) -> MarkupDocument:
        root = ET.fromstring(text)
        uri, _ = split_tag(root.tag)
        return cls(uri or "", root)

    @classmethod
    def from_file(cls, path: str | Path) -> MarkupDocument:
        return cls.from_string(Path(path).read_text(encoding="utf-8"))

    def create_element(self, name: str) -> ET.Element:
        if name.startswith("{") or not self.namespace_uri:
            return ET.Element(name)
        return ET.Element(f"{{{self.namespace_uri}}}{name}")

    def set_attribute(self, node: ET.Element, name: str, value: str, namespace: str | None = None) -> None:
        node.set(f"{{{namespace}}}{name}" if namespace else name, value)

    def set_text(self, node: ET.Element, text: str) -> None:
        node.text = text

    def append_child(self, parent: ET.Element, node: ET.Element) -> None:
        parent.append(node)

    def set_root(self, node: ET.Element) -> None:
        self.root = node

    def attributes(self, node: ET.Element) -> Iterator[tuple[str, str]]:
        for key, value in node.attrib.items():
            uri, local = split_tag(key)
            prefix = _PREFIXES.get(uri) if uri else None
            yield (f"{prefix}:{local}" if prefix else key), value

    def text(self, node: ET.Element) -> str | None:
        """Text content of ``node``; whitespace-only text counts as none."""
        if node.text and node.text.strip():
            return node.text
        return None

    def tail(self, node: ET.Element) -> str | None:
        """Text following ``node`` inside its parent; whitespace-only counts as none."""
        if node.tail and node.tail.strip():
            return node.tail
        return None

    def set_tail(self, node: ET.Element, tail: str) -> None:
        node.tail = tail

    def element_name(self, node: ET.Element) -> str:
        """Tag as an element name: local in the document namespace, ``{uri}local`` otherwise."""
        uri, local = split_tag(node.tag)
        if uri is None or uri == self.namespace_uri:
            return local
        return node.tag

    def to_string(self, indent: bool = False) -> str:
        if self.root is None:
            return ""
        root = self.root
        if indent:
            root = copy.deepcopy(root)
            ET.indent(root)
        # The prefix table is process-global and other libraries rebind it.
        if self.namespace_uri:
            ET.register_namespace("", self.namespace_uri)
        ET.register_namespace("xlink", XLINK_NS)
        return ET.tostring(root, encoding="unicode")


def read_tree(
    document: MarkupDocument,
    node: ET.Element | None = None,
    registry: ElementRegistry | None = None,
) -> SvgElement:
    """Build an element tree from ``node`` (the document root by default)."""
    if node is None:
        node = document.root
        if node is None:
            raise ValueError("Document has no root element")
    registry = registry or get_registry()

    el = registry.create(document.element_name(node))
    el.read_markup(document, node)
    for child in node:
        if not isinstance(child.tag, str):
            # comments and processing instructions
            continue
        el.add_child(read_tree(document, child, registry))
    return el


def write_tree(root: SvgElement, namespace_uri: str = SVG_NS) -> MarkupDocument:
    """Emit an element tree into a new document."""
    document = MarkupDocument(namespace_uri)
    root.write_markup(document)
    logger.debug("Wrote tree rooted at <%s>", root.name)
    return document
