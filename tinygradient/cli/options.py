from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from .. import config
from ..types.parser_types import GradientOption

# Keys are lower-case; lookups fold the token first
OPTION_ALIASES: Dict[str, GradientOption] = {
    "-s": GradientOption.SIZE,
    "--size": GradientOption.SIZE,
    "/s": GradientOption.SIZE,
    "/size": GradientOption.SIZE,
    "-v": GradientOption.VERTICAL,
    "--vertical": GradientOption.VERTICAL,
    "/v": GradientOption.VERTICAL,
    "/vertical": GradientOption.VERTICAL,
    "-r": GradientOption.REVERSE,
    "--reverse": GradientOption.REVERSE,
    "/r": GradientOption.REVERSE,
    "/reverse": GradientOption.REVERSE,
    "--h": GradientOption.HORIZONTAL,
    "--horizontal": GradientOption.HORIZONTAL,
    "/h": GradientOption.HORIZONTAL,
    "/horizontal": GradientOption.HORIZONTAL,
}


def lookup_option(token: str) -> Optional[GradientOption]:
    return OPTION_ALIASES.get(token.lower())


def _invalid_path_chars() -> FrozenSet[str]:
    if os.name == "nt":
        return frozenset('"<>|' + "".join(chr(i) for i in range(32)))
    return frozenset("\0")


INVALID_PATH_CHARS: FrozenSet[str] = _invalid_path_chars()


def has_invalid_path_chars(path: str) -> bool:
    return any(ch in INVALID_PATH_CHARS for ch in path)


@dataclass(frozen=True)
class RenderOptions:
    filename: str
    size: int = config.DEFAULT_SIZE
    is_vertical: bool = False
    reverse: bool = False
