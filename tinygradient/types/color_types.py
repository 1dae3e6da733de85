from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

IntRGB = Tuple[int, int, int]
IntRGBA = Tuple[int, int, int, int]
ColorElement = Union[IntRGB, IntRGBA]
ColorValue = Union[ColorElement, ndarray]  # Includes array support

OPAQUE = 255
CHANNEL_MAX = 255


def element_to_array(element: ColorValue) -> np.ndarray:
    """
    Convert an 8-bit color element to a float array in ``[0, 1]``.

    Args:
        element: RGB/RGBA tuple or already an ndarray of 8-bit values

    Returns:
        numpy array of unit floats
    """
    return np.asarray(element, dtype=float) / CHANNEL_MAX
