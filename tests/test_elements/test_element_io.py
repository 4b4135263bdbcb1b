"""Tests for reading and writing elements as markup."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svgdom.config import SVG_NS, XLINK_NS
from svgdom.elements import GenericElement, GroupElement, PathElement, SvgSvgElement, UseElement
from svgdom.errors import MalformedStyleError
from svgdom.markup import MarkupDocument, read_tree, write_tree
from svgdom.types.path import Path, PathSegmentType
from svgdom.types.style import Style
from svgdom.types.transform import TransformList
from tests.conftest import BAD_STYLE_SVG, FOREIGN_SVG, ICON_SVG, MIXED_TEXT_SVG


def _q(local: str) -> str:
    return f"{{{SVG_NS}}}{local}"


def _write(el) -> ET.Element:
    doc = MarkupDocument()
    return el.write_markup(doc)


# ---------------------------------------------------------------------------
# Write
# ---------------------------------------------------------------------------

class TestWrite:
    def test_xlink_attribute_goes_to_xlink_namespace(self):
        node = _write(UseElement(href="a.svg"))
        assert node.get(f"{{{XLINK_NS}}}href") == "a.svg"
        assert "xlink:href" not in node.attrib
        assert "href" not in node.attrib

    def test_style_instance_written_as_canonical_text(self):
        g = GroupElement()
        g.style = Style.from_text("fill: red; stroke: blue")
        assert _write(g).get("style") == "fill:red;stroke:blue;"

    def test_raw_style_written_verbatim(self):
        g = GroupElement()
        g["style"] = "fill: red"
        assert _write(g).get("style") == "fill: red"

    def test_transform_written_as_text(self):
        g = GroupElement()
        g.transform.append(TransformList.from_text("scale(2)")[0])
        assert _write(g).get("transform") == "scale(2)"

    def test_path_data_written_in_canonical_form(self):
        node = _write(PathElement(d=Path.from_text("M 0,0 L 10,10 L 20,20")))
        assert node.get("d") == "M 0 0 10 10 20 20 "

    def test_none_values_are_skipped(self):
        g = GroupElement(id="g1")
        g["opacity"] = None
        node = _write(g)
        assert "opacity" not in node.attrib
        assert node.get("id") == "g1"

    def test_attributes_in_insertion_order(self):
        g = GroupElement()
        g["y"] = "2"
        g["x"] = 1
        g["id"] = "g"
        assert list(_write(g).attrib) == ["y", "x", "id"]
        assert _write(g).get("x") == "1"

    def test_element_in_document_namespace(self):
        assert _write(GroupElement()).tag == _q("g")

    def test_children_in_order_and_root_set(self):
        root = SvgSvgElement()
        root.add_children(PathElement(id="a"), GroupElement(id="b"))
        doc = MarkupDocument()
        node = root.write_markup(doc)
        assert doc.root is node
        assert [child.get("id") for child in node] == ["a", "b"]

    def test_with_parent_appends_instead_of_setting_root(self):
        doc = MarkupDocument()
        parent = doc.create_element("svg")
        node = GroupElement().write_markup(doc, parent)
        assert list(parent) == [node]
        assert doc.root is None

    def test_serialized_text_uses_xlink_prefix(self):
        root = SvgSvgElement()
        root.add_child(UseElement(href="#arrow"))
        text = write_tree(root).to_string()
        assert 'xmlns="http://www.w3.org/2000/svg"' in text
        assert 'xlink:href="#arrow"' in text

    def test_default_namespace_survives_other_prefix_registrations(self):
        import svgpathtools  # noqa: F401  rebinds the SVG namespace to an "svg" prefix

        ET.register_namespace("svg", SVG_NS)
        root = SvgSvgElement()
        root.add_child(UseElement(href="#a"))
        text = write_tree(root).to_string()
        assert text.startswith("<svg ")
        assert "svg:" not in text
        assert '<use xlink:href="#a" />' in text


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------

class TestRead:
    def test_builds_registered_classes(self):
        root = read_tree(MarkupDocument.from_string(ICON_SVG))
        assert isinstance(root, SvgSvgElement)
        defs, g = root.children
        assert isinstance(defs, GenericElement)
        assert defs.name == "defs"
        assert isinstance(defs.children[0], PathElement)
        assert isinstance(g, GroupElement)
        assert isinstance(g.children[0], UseElement)

    def test_style_and_transform_coerced_eagerly(self):
        root = read_tree(MarkupDocument.from_string(ICON_SVG))
        arrow = root.children[0].children[0]
        g = root.children[1]
        assert isinstance(arrow.attributes["style"], Style)
        assert arrow.style["stroke-width"] == "2"
        assert isinstance(g.attributes["transform"], TransformList)
        assert [t.name for t in g.transform] == ["translate", "rotate"]

    def test_other_attributes_stay_raw_until_typed_read(self):
        arrow = read_tree(MarkupDocument.from_string(ICON_SVG)).children[0].children[0]
        assert arrow.attributes["d"] == "M 4 12 L 20 12 M 14 6 L 20 12 L 14 18"
        assert arrow.d[2].type is PathSegmentType.MOVE_TO
        assert isinstance(arrow.attributes["d"], Path)

    def test_xlink_attribute_read_with_prefix(self):
        use = read_tree(MarkupDocument.from_string(ICON_SVG)).children[1].children[0]
        assert use.href == "#arrow"
        assert list(use.attributes) == ["xlink:href", "x", "y"]

    def test_text_content_kept(self):
        text_el = read_tree(MarkupDocument.from_string(ICON_SVG)).children[1].children[1]
        assert text_el.name == "text"
        assert text_el.text == "Go"

    def test_trailing_text_kept(self):
        doc = MarkupDocument.from_string(MIXED_TEXT_SVG)
        text_el = read_tree(doc).children[0]
        assert text_el.text == "Hi "
        assert text_el.children[0].tail == "!"
        assert "<tspan>x</tspan>!</text>" in write_tree(read_tree(doc)).to_string()

    def test_foreign_namespace_kept(self):
        doc = MarkupDocument.from_string(FOREIGN_SVG)
        root = read_tree(doc)
        grid, circle = root.children
        assert grid.name == "{http://www.inkscape.org/namespaces/inkscape}grid"
        assert circle["{http://www.inkscape.org/namespaces/inkscape}label"] == "dot"

    def test_malformed_style_propagates(self):
        with pytest.raises(MalformedStyleError):
            read_tree(MarkupDocument.from_string(BAD_STYLE_SVG))


def test_round_trip_preserves_attributes():
    first = read_tree(MarkupDocument.from_string(ICON_SVG))
    second = read_tree(MarkupDocument.from_string(write_tree(first).to_string(indent=True)))

    def flatten(el):
        yield el.name, {k: str(v) for k, v in el.attributes.items()}, el.text
        for child in el.children:
            yield from flatten(child)

    assert list(flatten(second)) == list(flatten(first))


# ---------------------------------------------------------------------------
# Element model
# ---------------------------------------------------------------------------

class TestElement:
    def test_transform_materialized_on_fresh_element(self):
        g = GroupElement()
        tl = g.transform
        assert isinstance(tl, TransformList)
        assert len(tl) == 0
        assert g.attributes["transform"] is tl

    def test_style_mutation_persists(self):
        g = GroupElement()
        g.style["fill"] = "red"
        assert _write(g).get("style") == "fill:red;"

    def test_child_with_parent_rejected(self):
        a, b = GroupElement(), GroupElement()
        child = PathElement()
        a.add_child(child)
        with pytest.raises(ValueError, match="already has a parent"):
            b.add_child(child)

    def test_cycle_rejected(self):
        outer = GroupElement()
        inner = outer.add_child(GroupElement())
        with pytest.raises(ValueError, match="cycle"):
            inner.add_child(outer)

    def test_remove_child(self):
        g = GroupElement()
        child = g.add_child(PathElement())
        g.remove_child(child)
        assert child.parent is None
        assert g.children == []

    def test_item_access_proxies_store(self):
        el = PathElement(id="p")
        el["fill"] = "red"
        assert "fill" in el
        assert el["missing"] is None
        del el["fill"]
        assert "fill" not in el
        assert el.id == "p"
