"""Element registry: every element class registers its markup tag via decorator.

Usage:
    @element("path")
    class PathElement(StyledTransformedElement):
        name = "path"

Tags with no registered class are read into a GenericElement that keeps the tag.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgdom.elements.base import SvgElement

logger = logging.getLogger(__name__)


class ElementRegistry:
    """Maps markup tag names to element classes."""

    def __init__(self) -> None:
        self._classes: dict[str, type[SvgElement]] = {}

    def register(self, name: str, cls: type[SvgElement]) -> None:
        if name in self._classes:
            raise ValueError(f"Duplicate element name: {name}")
        self._classes[name] = cls
        logger.debug("Registered element <%s> (%s)", name, cls.__name__)

    def get(self, name: str) -> type[SvgElement] | None:
        return self._classes.get(name)

    def create(self, name: str) -> SvgElement:
        cls = self._classes.get(name)
        if cls is None:
            from svgdom.elements.base import GenericElement

            return GenericElement(name)
        return cls()

    def names(self) -> list[str]:
        return sorted(self._classes)

    @property
    def count(self) -> int:
        return len(self._classes)


# Module-level singleton
_registry = ElementRegistry()


def get_registry() -> ElementRegistry:
    return _registry


def element(name: str) -> Callable[[type[SvgElement]], type[SvgElement]]:
    """Class decorator registering an element class under its markup tag."""

    def decorator(cls: type[SvgElement]) -> type[SvgElement]:
        _registry.register(name, cls)
        return cls

    return decorator
