"""Transform list value (the ``transform`` attribute)."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict

from svgdom.errors import MalformedTransformError
from svgdom.types.path import format_number, parse_number

# Accepted argument counts per transform function
TRANSFORM_ARITY: dict[str, tuple[int, ...]] = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
}

_ITEM_RE = re.compile(r"[\s,]*([A-Za-z]+)\s*\(([^()]*)\)[\s,]*")
_ARG_SEP_RE = re.compile(r"[\s,]+")


class Transform(BaseModel):
    """A single transform function, e.g. ``rotate(45 10 10)``."""

    model_config = ConfigDict(frozen=True)

    name: str
    args: tuple[float, ...]

    def to_text(self) -> str:
        return f"{self.name}({' '.join(format_number(a) for a in self.args)})"

    def __str__(self) -> str:
        return self.to_text()


def _parse_item(name: str, body: str, source: str) -> Transform:
    counts = TRANSFORM_ARITY.get(name)
    if counts is None:
        raise MalformedTransformError(f"Unknown transform {name!r}", source)
    raw = [a for a in _ARG_SEP_RE.split(body.strip()) if a]
    if len(raw) not in counts:
        raise MalformedTransformError(f"{name} takes {' or '.join(map(str, counts))} arguments", source)
    args: list[float] = []
    for token in raw:
        value = parse_number(token)
        if value is None:
            raise MalformedTransformError(f"Invalid transform argument {token!r}", source)
        args.append(value)
    return Transform(name=name, args=tuple(args))


class TransformList:
    """Ordered list of transform functions, applied left to right."""

    def __init__(self, transforms: Iterable[Transform] = ()) -> None:
        self._transforms: list[Transform] = list(transforms)

    @classmethod
    def from_text(cls, text: str) -> TransformList:
        if not text.strip():
            return cls()
        transforms: list[Transform] = []
        pos = 0
        while pos < len(text):
            match = _ITEM_RE.match(text, pos)
            if match is None:
                raise MalformedTransformError("Invalid transform list", text)
            transforms.append(_parse_item(match.group(1), match.group(2), text))
            pos = match.end()
        return cls(transforms)

    def to_text(self) -> str:
        return " ".join(t.to_text() for t in self._transforms)

    def append(self, transform: Transform) -> None:
        self._transforms.append(transform)

    def __len__(self) -> int:
        return len(self._transforms)

    def __getitem__(self, index: int) -> Transform:
        return self._transforms[index]

    def __iter__(self) -> Iterator[Transform]:
        return iter(self._transforms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformList):
            return NotImplemented
        return self._transforms == other._transforms

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"TransformList({self.to_text()!r})"
