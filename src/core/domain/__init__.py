"""
Domain value types.

Contains immutable value objects: fixed-arity tuples and 2D geometry.
"""

from src.core.domain.geometry import (
    DiagonalLine,
    Line,
    Point,
    VerticalLine,
    find_intersection,
    line_from_points,
)
from src.core.domain.tuples import Pair, Quad, Triple

__all__ = [
    # Tuples
    "Pair",
    "Triple",
    "Quad",
    # Geometry
    "Point",
    "Line",
    "DiagonalLine",
    "VerticalLine",
    "find_intersection",
    "line_from_points",
]
