"""Path data codec.

Reads the SVG path mini-language (``d`` attribute) into an ordered list of
segments and writes it back in compacted form: a command letter is shared by
consecutive segments of the same kind, and coordinates that follow a moveto
continue as implicit linetos.

The tokenizer splits on single separators (space, tab, CR, LF, comma) only,
so numbers packed against each other or against a sign (``M10-20``) are not
split apart and are reported as malformed operands.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, model_validator

from svgdom.errors import MalformedPathError

logger = logging.getLogger(__name__)

_SEPARATORS_RE = re.compile(r"[ \t\r\n,]")
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class PathSegmentType(str, enum.Enum):
    MOVE_TO = "M"
    CLOSE_PATH = "Z"
    LINE_TO = "L"
    HLINE_TO = "H"
    VLINE_TO = "V"
    CURVE_TO = "C"
    SMOOTH_CURVE_TO = "S"
    QUADRATIC_BEZIER_TO = "Q"
    SMOOTH_QUADRATIC_BEZIER_TO = "T"
    ARC_TO = "A"

    @property
    def arity(self) -> int:
        return _ARITY[self]

    def letter(self, absolute: bool) -> str:
        return self.value if absolute else self.value.lower()

    @classmethod
    def from_letter(cls, letter: str, source: str = "") -> tuple[PathSegmentType, bool]:
        """Map a command letter to ``(type, absolute)``."""
        try:
            return cls(letter.upper()), letter.isupper()
        except ValueError:
            raise MalformedPathError(f"Unknown path command {letter!r}", source or letter) from None


_ARITY: dict[PathSegmentType, int] = {
    PathSegmentType.MOVE_TO: 2,
    PathSegmentType.LINE_TO: 2,
    PathSegmentType.HLINE_TO: 1,
    PathSegmentType.VLINE_TO: 1,
    PathSegmentType.CURVE_TO: 6,
    PathSegmentType.SMOOTH_CURVE_TO: 4,
    PathSegmentType.QUADRATIC_BEZIER_TO: 4,
    PathSegmentType.SMOOTH_QUADRATIC_BEZIER_TO: 2,
    PathSegmentType.ARC_TO: 7,
    PathSegmentType.CLOSE_PATH: 0,
}


class PathSegment(BaseModel):
    """One drawing command with its fixed number of operands."""

    model_config = ConfigDict(frozen=True)

    type: PathSegmentType
    absolute: bool = True
    operands: tuple[float, ...] = ()

    @model_validator(mode="after")
    def check_operands(self) -> PathSegment:
        if len(self.operands) != self.type.arity:
            raise ValueError(
                f"{self.type.name} takes {self.type.arity} operands, got {len(self.operands)}"
            )
        if not all(math.isfinite(v) for v in self.operands):
            raise ValueError("Path operands must be finite")
        return self

    @property
    def letter(self) -> str:
        return self.type.letter(self.absolute)


class Path:
    """Ordered sequence of segments; order is drawing order."""

    def __init__(self, segments: Iterable[PathSegment] = ()) -> None:
        self._segments: list[PathSegment] = list(segments)

    @classmethod
    def from_text(cls, text: str) -> Path:
        return parse_path(text)

    def to_text(self) -> str:
        return serialize_path(self)

    def copy(self) -> Path:
        return parse_path(serialize_path(self))

    def append(self, segment: PathSegment) -> None:
        self._segments.append(segment)

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> PathSegment:
        return self._segments[index]

    def __setitem__(self, index: int, segment: PathSegment) -> None:
        self._segments[index] = segment

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._segments == other._segments

    def __str__(self) -> str:
        return serialize_path(self)

    def __repr__(self) -> str:
        return f"Path({serialize_path(self)!r})"


def format_number(value: float) -> str:
    """Shortest round-trippable decimal, without a trailing ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def parse_number(token: str) -> float | None:
    """Read an SVG number; None for anything else, including values that overflow."""
    if not NUMBER_RE.fullmatch(token):
        return None
    value = float(token)
    return value if math.isfinite(value) else None


def _parse_operand(token: str, source: str) -> float:
    value = parse_number(token)
    if value is None:
        raise MalformedPathError(f"Invalid path operand {token!r}", source)
    return value


def parse_path(text: str) -> Path:
    """Parse path data into a Path. Raises MalformedPathError."""
    tokens = [t for t in _SEPARATORS_RE.split(text) if t]
    segments: list[PathSegment] = []
    seg_type: PathSegmentType | None = None
    absolute = True
    i = 0

    while i < len(tokens):
        token = tokens[i]
        if token[0].isalpha():
            seg_type, absolute = PathSegmentType.from_letter(token[0], text)
            if len(token) > 1:
                tokens[i] = token[1:]
            else:
                i += 1
        elif seg_type is None:
            raise MalformedPathError("Path data must start with a command", text)
        elif seg_type is PathSegmentType.CLOSE_PATH:
            raise MalformedPathError(f"Unexpected operand {token!r} after closepath", text)
        elif seg_type is PathSegmentType.MOVE_TO:
            # Coordinate pairs after a moveto are implicit linetos.
            seg_type = PathSegmentType.LINE_TO

        arity = seg_type.arity
        if i + arity > len(tokens):
            raise MalformedPathError(
                f"Command {seg_type.letter(absolute)!r} needs {arity} operands", text
            )
        operands = tuple(_parse_operand(tok, text) for tok in tokens[i : i + arity])
        segments.append(PathSegment(type=seg_type, absolute=absolute, operands=operands))
        i += arity

    logger.debug("Parsed path: %d segments", len(segments))
    return Path(segments)


def _continues(prev: PathSegment, seg: PathSegment) -> bool:
    """True when ``seg`` can be written without repeating a command letter."""
    # A repeated moveto would read back as a lineto; closepath has nothing to repeat.
    if prev.absolute != seg.absolute or seg.type in (PathSegmentType.MOVE_TO, PathSegmentType.CLOSE_PATH):
        return False
    if prev.type == seg.type:
        return True
    return prev.type is PathSegmentType.MOVE_TO and seg.type is PathSegmentType.LINE_TO


def serialize_path(path: Path) -> str:
    """Write a Path in canonical compacted form, e.g. ``"M 0 0 10 10 "``."""
    parts: list[str] = []
    prev: PathSegment | None = None
    for seg in path:
        if prev is None or not _continues(prev, seg):
            parts.append(seg.letter)
            parts.append(" ")
        for value in seg.operands:
            parts.append(format_number(value))
            parts.append(" ")
        prev = seg
    return "".join(parts)
