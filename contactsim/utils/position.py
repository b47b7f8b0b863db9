#This file defines position utilities used by host mobility and contact detection

from dataclasses import dataclass
import math
from typing import Tuple

@dataclass
class Position:
    x: float
    y: float

    def distance_to(self, other: 'Position') -> float:
        """Calculate Euclidean distance to another position."""
        return math.sqrt((self.x - other.x) ** 2 +
                         (self.y - other.y) ** 2)

    def is_within_range(self, other: 'Position', range_limit: float) -> bool:
        """Check if another position is within a certain range."""
        return self.distance_to(other) <= range_limit

    def as_tuple(self) -> Tuple[float, float]:
        """Return position as a tuple."""
        return (self.x, self.y)

    def move_towards(self, target: 'Position', distance: float) -> 'Position':
        """Move from current position towards target by specified distance"""
        current_distance = self.distance_to(target)

        if current_distance <= distance:
            return Position(target.x, target.y)  # We can reach target

        dx = (target.x - self.x) / current_distance
        dy = (target.y - self.y) / current_distance

        return Position(
            self.x + dx * distance,
            self.y + dy * distance
        )

    @classmethod
    def from_tuple(cls, pos: Tuple[float, float]) -> 'Position':
        """Create Position from tuple"""
        return cls(pos[0], pos[1])

    def __str__(self) -> str:
        return f"Position(x={self.x:.1f}, y={self.y:.1f})"
