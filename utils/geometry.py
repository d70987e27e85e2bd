"""
This module provides:
    - sort_points
    - find_repeated_point
    - all_collinear
"""

from typing import List, Optional, Sequence

from models.point import Point


# ----------------------------------------------------------------------
#  SORTING
# ----------------------------------------------------------------------

def sort_points(points: Sequence[Point]) -> List[Point]:
    """
    Returns a new list holding the points in (y, x) order.
    The input sequence is never modified.
    """
    return sorted(points)


# ----------------------------------------------------------------------
#  DUPLICATE CHECK (on an already sorted list)
# ----------------------------------------------------------------------

def find_repeated_point(sorted_points: Sequence[Point]) -> Optional[Point]:
    """
    Returns the first point that appears twice in a row, or None.

    Equal points end up adjacent after sorting, so a single pass
    is enough.
    """
    for a, b in zip(sorted_points, sorted_points[1:]):
        if a.compare(b) == 0:
            return a
    return None


# ----------------------------------------------------------------------
#  COLLINEARITY (exact, slope based)
# ----------------------------------------------------------------------

def all_collinear(points: Sequence[Point]) -> bool:
    """
    True if every point lies on the line through points[0] and points[1].

    Slopes are measured from points[0], which must be the smallest point
    of the group, and compared exactly (no tolerance).
    """
    if len(points) < 2:
        return False

    origin = points[0]
    first = origin.slope_to(points[1])
    return all(origin.slope_to(p) == first for p in points[2:])
