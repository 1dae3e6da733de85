from .stops import Stop, normalize_stops, reverse_stops
from .evaluator import GradientEvaluator
from .renderer import render_strip, to_image, save_image, render_gradient

__all__ = [
    "Stop",
    "normalize_stops",
    "reverse_stops",
    "GradientEvaluator",
    "render_strip",
    "to_image",
    "save_image",
    "render_gradient",
]
