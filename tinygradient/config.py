"""Global configuration and constants for the ``tg`` command."""

from __future__ import annotations

import os
from typing import Final

PROG_NAME: Final = "tg"

DEFAULT_SIZE: Final = 512
MIN_SIZE: Final = 2
MAX_SIZE: Final = 4096

# Overridable from the environment; there are no configuration files
LOG_LEVEL: Final = os.environ.get("TINYGRADIENT_LOG_LEVEL", "WARNING").upper()
