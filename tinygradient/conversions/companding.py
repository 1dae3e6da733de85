import numpy as np
from numpy import ndarray as NDArray

SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    result = np.where(
        c <= SRGB_TO_LINEAR_TH,
        c / 12.92,
        ((c + 0.055) / 1.055) ** 2.4
    )
    return result

def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    # Clip first so the power never sees a negative base
    c = np.clip(np.asarray(c, dtype=float), 0.0, 1.0)
    result = np.where(
        c <= LINEAR_TO_SRGB_TH,
        12.92 * c,
        1.055 * (c ** (1/2.4)) - 0.055
    )
    return result


def expand_rgba(rgba: NDArray) -> NDArray:
    """
    Gamma-expand the color channels of unit RGBA values.

    The last axis holds (r, g, b, a); alpha is left untouched.

    Args:
        rgba: Array of unit floats with 4 channels on the last axis

    Returns:
        New float array with linear-light r, g, b
    """
    out = np.array(rgba, dtype=float)
    out[..., :3] = np_srgb_to_linear(out[..., :3])
    return out


def compress_rgba(rgba: NDArray) -> NDArray:
    """Inverse of :func:`expand_rgba`: back to nonlinear sRGB, alpha untouched."""
    out = np.array(rgba, dtype=float)
    out[..., :3] = np_linear_to_srgb(out[..., :3])
    return out
