from __future__ import annotations

import re
from typing import Tuple

from PIL import ImageColor

from ..errors import ColorLiteralError
from ..types.color_types import IntRGB, OPAQUE

_BARE_HEX = re.compile(r"^(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_color(token: str) -> Tuple[IntRGB, int]:
    """
    Parse a color literal into an 8-bit RGB triple and an alpha value.

    Accepts everything Pillow's ``ImageColor`` understands (CSS color names,
    ``#rgb``, ``#rrggbb``, ``#rrggbbaa``, ``rgb()``, ``hsl()``, ...) and hex
    digits written without the leading ``#``.

    Args:
        token: Raw command-line token

    Returns:
        ``((r, g, b), alpha)``; alpha is 255 for opaque literals

    Raises:
        ColorLiteralError: If the token is not a recognized color
    """
    try:
        value = ImageColor.getrgb(token)
    except ValueError:
        if not _BARE_HEX.match(token):
            raise ColorLiteralError(f"Unrecognized color: {token}.", token) from None
        value = ImageColor.getrgb("#" + token)

    if len(value) == 4:
        r, g, b, alpha = value
    else:
        (r, g, b), alpha = value, OPAQUE
    return (r, g, b), alpha
