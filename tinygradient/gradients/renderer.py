"""
Pixel-strip rendering for 1D gradients.

The strip is always rendered horizontally, one sample per pixel column at
``t = i / (size - 1)``. Vertical output is a 90 degree clockwise rotation of the
finished strip, so the first stop ends up at the top.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from ..errors import RenderError
from ..types.color_types import OPAQUE
from .evaluator import GradientEvaluator
from .stops import Stop

log = logging.getLogger(__name__)


def render_strip(stops: Sequence[Stop], size: int) -> NDArray:
    """
    Render resolved stops into a ``(1, size, 4)`` RGBA pixel row.

    Args:
        stops: Normalized (and possibly reversed) stops
        size: Number of pixels along the gradient

    Returns:
        uint8 array of shape ``(1, size, 4)``
    """
    evaluator = GradientEvaluator(stops)
    return evaluator.sample(size)[None, :, :]


def to_image(pixels: NDArray, is_vertical: bool = False) -> Image.Image:
    """
    Wrap a rendered strip into a Pillow image.

    The alpha channel is dropped when every pixel is opaque so that formats
    without alpha (JPEG, BMP) can still be written.
    """
    if np.all(pixels[..., 3] == OPAQUE):
        pixels = pixels[..., :3]
    img = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    if is_vertical:
        img = img.transpose(Image.Transpose.ROTATE_270)
    return img


def save_image(img: Image.Image, filename: str) -> None:
    """Save ``img`` in the format Pillow infers from the extension of ``filename``."""
    try:
        img.save(filename)
    except (ValueError, OSError) as e:
        raise RenderError(f"Could not write {filename}: {e}", filename) from e
    log.info("Saved %dx%d gradient to %s", img.width, img.height, filename)


def render_gradient(
    stops: Sequence[Stop],
    filename: str,
    size: int,
    is_vertical: bool = False,
) -> Image.Image:
    """Render ``stops`` and write the result to ``filename``."""
    img = to_image(render_strip(stops, size), is_vertical)
    save_image(img, filename)
    return img
