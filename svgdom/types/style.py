"""Inline CSS style value (the ``style`` attribute)."""

from __future__ import annotations

from typing import Iterator

from svgdom.errors import MalformedStyleError


class Style:
    """Ordered CSS declarations, e.g. ``fill:red;stroke:blue;``."""

    def __init__(self, declarations: dict[str, str] | None = None) -> None:
        self._declarations: dict[str, str] = dict(declarations or {})

    @classmethod
    def from_text(cls, text: str) -> Style:
        declarations: dict[str, str] = {}
        for chunk in text.split(";"):
            if not chunk.strip():
                continue
            prop, sep, value = chunk.partition(":")
            prop = prop.strip()
            if not sep or not prop:
                raise MalformedStyleError("Invalid style declaration", text)
            declarations[prop] = value.strip()
        return cls(declarations)

    def to_text(self) -> str:
        return "".join(f"{prop}:{value};" for prop, value in self._declarations.items())

    def get(self, prop: str, default: str | None = None) -> str | None:
        return self._declarations.get(prop, default)

    def set(self, prop: str, value: object) -> None:
        self._declarations[prop] = str(value)

    def __getitem__(self, prop: str) -> str:
        return self._declarations[prop]

    def __setitem__(self, prop: str, value: object) -> None:
        self.set(prop, value)

    def __delitem__(self, prop: str) -> None:
        del self._declarations[prop]

    def __contains__(self, prop: object) -> bool:
        return prop in self._declarations

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return self._declarations == other._declarations

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Style({self.to_text()!r})"
