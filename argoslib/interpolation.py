"""Piecewise linear interpolation over a sorted table of points."""

from __future__ import annotations

import bisect
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

__all__ = ["InterpMapPoint", "InterpolationMap"]


@dataclass(frozen=True, order=True)
class InterpMapPoint:
    """One input-to-output mapping point; points order by input value."""

    in_val: Any
    out_val: Any = field(compare=False)


class InterpolationMap:
    """Linearly interpolates an output from a set of input-to-output points."""

    def __init__(self, points: Iterable[InterpMapPoint | tuple[Any, Any]]) -> None:
        """Build a map from points sorted by input value, smallest first."""
        converted = tuple(
            p if isinstance(p, InterpMapPoint) else InterpMapPoint(*p) for p in points
        )
        if not converted:
            raise ValueError("map must contain at least one point")
        if any(b.in_val < a.in_val for a, b in zip(converted, converted[1:])):
            raise ValueError("map points must be sorted by input value")
        self._points = converted
        self._inputs = [p.in_val for p in converted]

    @property
    def points(self) -> tuple[InterpMapPoint, ...]:
        """The interpolation points."""
        return self._points

    def map(self, in_val: Any) -> Any:
        """Return the interpolated output for ``in_val``, clamped at the ends."""
        first, last = self._points[0], self._points[-1]
        if in_val >= last.in_val:
            return last.out_val
        if in_val <= first.in_val:
            return first.out_val
        index = bisect.bisect_left(self._inputs, in_val)
        after = self._points[index]
        before = self._points[index - 1]
        fraction = (in_val - before.in_val) / (after.in_val - before.in_val)
        return before.out_val + fraction * (after.out_val - before.out_val)

    def __call__(self, in_val: Any) -> Any:
        """Shorthand for :meth:`map`."""
        return self.map(in_val)