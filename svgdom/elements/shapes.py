"""Registered element classes."""

from __future__ import annotations

from svgdom.elements.base import StyledTransformedElement
from svgdom.elements.registry import element
from svgdom.types.path import Path


@element("svg")
class SvgSvgElement(StyledTransformedElement):
    name = "svg"


@element("g")
class GroupElement(StyledTransformedElement):
    name = "g"


@element("path")
class PathElement(StyledTransformedElement):
    name = "path"

    def __init__(self, d: Path | str | None = None, id: str | None = None) -> None:
        super().__init__(id)
        if d is not None:
            self.d = d

    @property
    def d(self) -> Path:
        """Path data, parsed on first access. Raises MalformedPathError."""
        return self.get_typed("d", Path)

    @d.setter
    def d(self, value: Path | str) -> None:
        self.attributes["d"] = value


@element("use")
class UseElement(StyledTransformedElement):
    name = "use"

    def __init__(self, href: str | None = None, id: str | None = None) -> None:
        super().__init__(id)
        if href is not None:
            self.href = href

    @property
    def href(self) -> str | None:
        value = self.attributes.get("xlink:href")
        return None if value is None else str(value)

    @href.setter
    def href(self, value: str | None) -> None:
        self.attributes["xlink:href"] = value
