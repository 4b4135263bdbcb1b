"""Element tree: attribute store, element classes and their registry."""

from svgdom.elements.base import GenericElement, StyledTransformedElement, SvgElement
from svgdom.elements.registry import ElementRegistry, element, get_registry
from svgdom.elements.shapes import GroupElement, PathElement, SvgSvgElement, UseElement
from svgdom.elements.store import TYPED_ATTRIBUTES, AttributeStore

__all__ = [
    "AttributeStore",
    "TYPED_ATTRIBUTES",
    "SvgElement",
    "StyledTransformedElement",
    "GenericElement",
    "SvgSvgElement",
    "GroupElement",
    "PathElement",
    "UseElement",
    "ElementRegistry",
    "element",
    "get_registry",
]
