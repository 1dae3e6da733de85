"""
Gradient stops and the passes that resolve their positions.

A stop list leaves the parser with some positions missing. ``normalize_stops``
fills them in (ends snap to 0 and 1, interior runs are spread evenly between
their positioned neighbours) and ``reverse_stops`` mirrors a resolved list.
Both return new lists; ``Stop`` itself is immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from ..types.color_types import IntRGB, OPAQUE


@dataclass(frozen=True)
class Stop:
    color: IntRGB
    position: Optional[float] = None
    alpha: int = OPAQUE

    @property
    def rgba(self):
        return (*self.color, self.alpha)

    def at(self, position: float) -> "Stop":
        """Return a copy of this stop placed at ``position``."""
        return replace(self, position=position)


def normalize_stops(stops: Sequence[Stop]) -> List[Stop]:
    """
    Resolve every missing stop position.

    - A first stop without a position goes to 0, a last one to 1.
    - An interior run of unpositioned stops starting at ``i`` is bounded by the
      positioned stop ``i - 1`` on the left and the next positioned stop ``j``
      on the right; when none follows, the last stop is forced to 1 and closes
      the run. Stop ``k`` of the run lands on
      ``from + (k - i + 1) * (to - from) / (j - i + 1)``.

    Args:
        stops: Parsed stops, at least two

    Returns:
        New list of stops whose positions are all set

    Raises:
        ValueError: If fewer than two stops are given
    """
    if len(stops) < 2:
        raise ValueError("At least 2 stops are required for a gradient")

    resolved = list(stops)
    last = len(resolved) - 1
    i = 0
    while i <= last:
        if resolved[i].position is not None:
            i += 1
            continue
        if i == 0:
            resolved[i] = resolved[i].at(0.0)
            i += 1
            continue
        if i == last:
            resolved[i] = resolved[i].at(1.0)
            break

        j = i + 1
        while j <= last and resolved[j].position is None:
            j += 1
        if j > last:
            j = last
            resolved[j] = resolved[j].at(1.0)

        start = resolved[i - 1].position
        delta = resolved[j].position - start
        count = j - i + 1
        for k in range(i, j):
            resolved[k] = resolved[k].at(start + (k - i + 1) * delta / count)
        i = j + 1

    return resolved


def reverse_stops(stops: Sequence[Stop]) -> List[Stop]:
    """
    Mirror a resolved stop list: reverse its order and map each position ``p`` to ``1 - p``.

    Applying it twice gives back the original list.
    """
    return [stop.at(1.0 - stop.position) for stop in reversed(stops)]
