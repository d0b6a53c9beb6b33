"""Transform data structures for coordinate representation."""
import math
from dataclasses import dataclass


def round_half_up(value):
    """Round to the nearest integer, ties toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Pointer positions and deltas in screen pixels
    - Layer positions and deltas in logical composition units
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def rounded(self):
        """Round both components to the nearest integer, ties upward."""
        return Vec2(round_half_up(self.x), round_half_up(self.y))
