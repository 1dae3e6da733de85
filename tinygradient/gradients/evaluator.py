from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..conversions import compress_rgba, expand_rgba, unit_to_byte
from ..types.color_types import IntRGB, IntRGBA, element_to_array
from .stops import Stop


class GradientEvaluator:
    """
    Maps a coordinate ``t`` in ``[0, 1]`` to the color of a resolved stop list.

    Stops are gamma-expanded once on construction; every blend happens in
    linear light and is compressed back to 8-bit sRGB. Before the first stop
    and after the last one the color is flat, and a ``t`` sitting on a stop
    returns that stop's color exactly.
    """

    def __init__(self, stops: Sequence[Stop]) -> None:
        if len(stops) < 2:
            raise ValueError("At least 2 stops are required for a gradient")
        if any(stop.position is None for stop in stops):
            raise ValueError("Stop positions must be resolved before evaluation")

        self._stops: Tuple[Stop, ...] = tuple(stops)
        self._positions: List[float] = [stop.position for stop in self._stops]
        self._linear: NDArray = expand_rgba(
            element_to_array([stop.rgba for stop in self._stops])
        )

    @property
    def stops(self) -> Tuple[Stop, ...]:
        return self._stops

    def _segment(self, t: float) -> int:
        """Index of the ``to`` stop whose segment covers ``t``."""
        return min(bisect_right(self._positions, t, 1), len(self._stops) - 1)

    def _blend(self, to_index: int, t: float) -> IntRGBA:
        start = self._stops[to_index - 1]
        end = self._stops[to_index]
        if t <= start.position:
            return start.rgba
        if t >= end.position:
            return end.rgba

        u = min(1.0, (t - start.position) / (end.position - start.position))
        linear = self._linear[to_index - 1] * (1 - u) + self._linear[to_index] * u
        return tuple(int(c) for c in unit_to_byte(compress_rgba(linear)))

    def rgba_at(self, t: float) -> IntRGBA:
        """Color at ``t`` with its alpha channel."""
        return self._blend(self._segment(t), t)

    def color_at(self, t: float) -> IntRGB:
        """
        Color at ``t`` as an 8-bit RGB triple.

        Args:
            t: Coordinate along the gradient, normally in ``[0, 1]``

        Returns:
            (r, g, b) tuple
        """
        r, g, b, _ = self.rgba_at(t)
        return r, g, b

    def iter_colors(self, ts: Iterable[float]) -> Iterator[IntRGBA]:
        """
        Stream colors for non-decreasing coordinates in one pass.

        Keeps a scan pointer on the current segment and only moves it forward,
        so sampling a whole strip costs O(N + len(ts)).
        """
        to_index = 1
        last = len(self._stops) - 1
        for t in ts:
            while t >= self._positions[to_index] and to_index < last:
                to_index += 1
            yield self._blend(to_index, t)

    def sample(self, size: int) -> NDArray:
        """
        Sample ``size`` evenly spaced coordinates ``i / (size - 1)``.

        Returns:
            ``(size, 4)`` uint8 RGBA array
        """
        if size < 2:
            raise ValueError(f"Gradient size must be at least 2, got {size}")
        ts = (i / (size - 1) for i in range(size))
        return np.array(list(self.iter_colors(ts)), dtype=np.uint8)
