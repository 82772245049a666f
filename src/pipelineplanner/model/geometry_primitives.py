"""
Geometric Primitives for site placement and link weights.
"""
from __future__ import annotations
from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Point:
    """A point on the planning canvas."""
    x: float
    y: float

    def squared_distance_to(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: Point) -> float:
        return math.sqrt(self.squared_distance_to(other))


def round_half_up(value: float) -> int:
    """
    Round a non-negative length to the nearest integer, halves going up.

    Python's built-in round() rounds halves to even (round(2.5) == 2),
    link weights round 2.5 to 3.
    """
    # floor(value + 0.5) is off for 0.49999999999999994 and for values >= 2**52
    whole = math.floor(value)
    return int(whole) + (value - whole >= 0.5)
