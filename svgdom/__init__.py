"""svgdom: SVG element tree with path-data and attribute codecs."""

from svgdom.elements import (
    AttributeStore,
    GenericElement,
    GroupElement,
    PathElement,
    StyledTransformedElement,
    SvgElement,
    SvgSvgElement,
    UseElement,
    element,
    get_registry,
)
from svgdom.errors import MalformedPathError, MalformedStyleError, MalformedTransformError, SvgError
from svgdom.markup import MarkupDocument, read_tree, write_tree
from svgdom.types import Path, PathSegment, PathSegmentType, Style, Transform, TransformList, parse_path, serialize_path

__all__ = [
    "AttributeStore",
    "SvgElement",
    "StyledTransformedElement",
    "GenericElement",
    "SvgSvgElement",
    "GroupElement",
    "PathElement",
    "UseElement",
    "element",
    "get_registry",
    "SvgError",
    "MalformedPathError",
    "MalformedStyleError",
    "MalformedTransformError",
    "MarkupDocument",
    "read_tree",
    "write_tree",
    "Path",
    "PathSegment",
    "PathSegmentType",
    "Style",
    "Transform",
    "TransformList",
    "parse_path",
    "serialize_path",
]
