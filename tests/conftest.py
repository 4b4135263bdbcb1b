"""Shared test fixtures."""

from __future__ import annotations

import pytest


ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="24" height="24" viewBox="0 0 24 24">
  <defs>
    <path id="arrow" d="M 4 12 L 20 12 M 14 6 L 20 12 L 14 18" style="fill:none;stroke:black;stroke-width:2"/>
  </defs>
  <g id="layer1" transform="translate(2,2) rotate(45)">
    <use xlink:href="#arrow" x="0" y="0"/>
    <text x="2" y="22" style="font-size:4">Go</text>
  </g>
</svg>'''

FOREIGN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" viewBox="0 0 10 10">
  <inkscape:grid spacing="1"/>
  <circle cx="5" cy="5" r="4" inkscape:label="dot"/>
</svg>'''

MIXED_TEXT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"><text x="1" y="9">Hi <tspan>x</tspan>!</text></svg>'''

BAD_STYLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect width="1" height="1" style="fill red"/>
</svg>'''

# Path data already in canonical form: serialize(parse(d)) == d
CANONICAL_PATHS = [
    "M 0 0 10 10 20 20 ",
    "M 10 20 C 1 2 3 4 5 6 S 1 2 3 4 Z ",
    "m 1 2 3 4 h 5 v 6 z ",
    "M 0 0 A 25 25 0 0 1 50 50 Z ",
    "M 0 0 Q 1 1 2 2 T 3 3 4 4 ",
    "M 0.5 -1.25 1e+21 3 ",
    "M 0 0 l 1 1 L 2 2 ",
    "M 0 0 M 5 5 ",
    "M 0 0 Z Z ",
]

# Valid but non-canonical path data
LOOSE_PATHS = [
    "M0,0 L10,10 L20,20 z",
    "m 1,2 l 3,4",
    "M 0 0\tL\n1 1",
    "M 100,100 H 200 V 200 H 100 Z M 120,120 L 180,120 L 150,180 Z",
    "M 5 5 c 1,1 2,2 3,3 4,4 5,5 6,6",
]


@pytest.fixture
def icon_svg() -> str:
    return ICON_SVG


@pytest.fixture
def foreign_svg() -> str:
    return FOREIGN_SVG
