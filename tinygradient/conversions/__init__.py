"""
TinyGradient Color Conversions
==============================

Transfer functions between gamma-encoded sRGB and linear-light RGB, plus
8-bit quantization.

Gradients are blended in linear light: every stop color is expanded once,
interpolated, then compressed back before it lands in the pixel buffer.
Blending the encoded values directly gives visibly dark midpoints.

Examples
--------
>>> from tinygradient.conversions import np_linear_to_srgb, unit_to_byte
>>> float(np_linear_to_srgb(0.5))   # doctest: +ELLIPSIS
0.735...
>>> int(unit_to_byte(np_linear_to_srgb(0.5)))
188
"""

from .companding import (
    np_srgb_to_linear,
    np_linear_to_srgb,
    expand_rgba,
    compress_rgba,
)
from .numbers import unit_to_byte

__all__ = [
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'expand_rgba',
    'compress_rgba',
    'unit_to_byte',
]
