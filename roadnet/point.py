"""A point on a two-dimensional integer plane."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An immutable point with integer coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        """Return the dot product of the two points seen as vectors."""
        return self.x * other.x + self.y * other.y

    def __str__(self):
        return f"({self.x}, {self.y})"

    def componentwise_min(self, other):
        """Return the coordinate-wise minimum of this and the other point."""
        return Point(min(self.x, other.x), min(self.y, other.y))

    def componentwise_max(self, other):
        """Return the coordinate-wise maximum of this and the other point."""
        return Point(max(self.x, other.x), max(self.y, other.y))

    def manhattan_distance_to(self, other):
        """Return the Manhattan or city-block distance to the other point."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def euclidean_distance_to(self, other):
        """Return the Euclidean distance to the other point."""
        return math.sqrt(self.squared_euclidean_distance_to(other))

    def squared_euclidean_distance_to(self, other):
        """Return the squared Euclidean distance to the other point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def chebyshev_distance_to(self, other):
        """Return the Chebyshev or chessboard distance to the other point."""
        return max(abs(self.x - other.x), abs(self.y - other.y))