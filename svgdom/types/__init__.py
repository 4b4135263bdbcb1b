"""Typed attribute values: path data, inline style and transform lists."""

from svgdom.types.path import Path, PathSegment, PathSegmentType, format_number, parse_path, serialize_path
from svgdom.types.style import Style
from svgdom.types.transform import Transform, TransformList

__all__ = [
    "Path",
    "PathSegment",
    "PathSegmentType",
    "format_number",
    "parse_path",
    "serialize_path",
    "Style",
    "Transform",
    "TransformList",
]
