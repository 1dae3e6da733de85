"""
TinyGradient - 1D Gradient Strips from the Command Line
=======================================================

Renders a one-dimensional color gradient into a raster image file.

Key Features
------------
- Flexible command line: ``tg red 25% gold blue -s 256 -v out.png``
- Optional stop positions, evenly distributed when omitted
- Gradient reversal
- Gamma-correct blending in linear-light RGB
- Any output format Pillow can write, picked from the file extension

Quick Start
-----------
>>> from tinygradient import parse_arguments, normalize_stops, GradientEvaluator
>>>
>>> command = parse_arguments(["black", "white", "out.png"])
>>> evaluator = GradientEvaluator(normalize_stops(command.stops))
>>> evaluator.color_at(0.5)
(188, 188, 188)

Modules
-------
- cli: command-line grammar, options and the ``tg`` entry point
- gradients: stops, position normalization, evaluation and rendering
- conversions: sRGB companding and 8-bit quantization
- colors: color literal parsing
"""

from .errors import (
    GradientArgumentError,
    GrammarError,
    OptionValueError,
    ColorLiteralError,
    PathError,
    RenderError,
)
from .colors import parse_color
from .gradients import (
    Stop,
    normalize_stops,
    reverse_stops,
    GradientEvaluator,
    render_strip,
    render_gradient,
)
from .cli import parse_arguments, ParsedCommand, RenderOptions, main

__version__ = "1.0.0"

__all__ = [
    # errors
    "GradientArgumentError",
    "GrammarError",
    "OptionValueError",
    "ColorLiteralError",
    "PathError",
    "RenderError",
    # colors
    "parse_color",
    # gradients
    "Stop",
    "normalize_stops",
    "reverse_stops",
    "GradientEvaluator",
    "render_strip",
    "render_gradient",
    # command line
    "parse_arguments",
    "ParsedCommand",
    "RenderOptions",
    "main",
    # Version
    "__version__",
]
