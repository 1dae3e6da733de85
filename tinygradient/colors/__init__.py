"""
TinyGradient Color Literals
===========================

Turns command-line color tokens into 8-bit RGB triples (plus alpha).

>>> from tinygradient.colors import parse_color
>>> parse_color("red")
((255, 0, 0), 255)
>>> parse_color("00ff0080")
((0, 255, 0), 128)
"""

from .parse import parse_color

__all__ = ["parse_color"]
