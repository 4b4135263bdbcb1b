"""Per-element attribute store with lazy typed coercion.

Values are either raw attribute text or an already coerced typed value
(``Style``, ``TransformList``, ``Path``). Typed reads coerce raw text on
first access and cache the result in place.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, Iterator, Protocol, TypeVar, Union

from svgdom.types.path import Path
from svgdom.types.style import Style
from svgdom.types.transform import TransformList

logger = logging.getLogger(__name__)

AttributeValue = Union[str, Style, TransformList, Path, None]

T = TypeVar("T", bound="TypedValue")


class TypedValue(Protocol):
    @classmethod
    def from_text(cls: type[T], text: str) -> T: ...

    def to_text(self) -> str: ...


# Attribute names with a registered typed representation
TYPED_ATTRIBUTES: dict[str, type] = {
    "style": Style,
    "transform": TransformList,
    "d": Path,
}


class AttributeStore(MutableMapping):
    """Insertion-ordered mapping of attribute name to raw or typed value."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._values[name] = value

    def __delitem__(self, name: str) -> None:
        del self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AttributeStore({self._values!r})"

    def get_typed(self, name: str, kind: type[T] | None = None) -> T:
        """Return ``name`` as a ``kind`` instance, coercing and caching as needed.

        With no stored value a default ``kind()`` is materialized and stored.
        ``kind`` defaults to the registered type for ``name``; unregistered
        names without an explicit kind raise KeyError.
        """
        if kind is None:
            kind = TYPED_ATTRIBUTES[name]
        value = self._values.get(name)
        if isinstance(value, kind):
            return value
        if value is None:
            logger.debug("Materializing default %s for %r", kind.__name__, name)
            typed = kind()
        else:
            typed = kind.from_text(str(value))
        self._values[name] = typed
        return typed

    def snapshot(self) -> list[tuple[str, Any]]:
        return list(self._values.items())
