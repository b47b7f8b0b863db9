"""Utility functions and classes"""

from .position import Position

__all__ = [
    'Position',
]
