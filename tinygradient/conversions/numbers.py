import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CHANNEL_MAX


def unit_to_byte(c: NDArray) -> NDArray:
    """
    Quantize unit floats to 8-bit channel values.

    Rounds half up (``floor(c * 255 + 0.5)``) and clamps to ``[0, 255]``.
    """
    c = np.asarray(c, dtype=float)
    return np.clip(np.floor(c * CHANNEL_MAX + 0.5), 0, CHANNEL_MAX).astype(np.uint8)
