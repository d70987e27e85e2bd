"""
Brute-force collinear point detector.

This module provides:
    • BruteCollinearPoints(points)
        .number_of_segments()
        .segments()
"""

from itertools import combinations
from typing import List, Sequence

from models.point import Point
from models.line_segment import LineSegment
from detectors.errors import NullPointError, DuplicatePointError, NullSegmentError
from utils.geometry import sort_points, find_repeated_point, all_collinear


SEGMENT_POINT_COUNT = 4


class BruteCollinearPoints:
    """
    Finds every line segment made of exactly 4 collinear points by
    examining each 4-point combination of the input once.

    Input is assumed to never hold 5 or more collinear points. If it does,
    overlapping segments for the same line are reported, one per qualifying
    4-point subset.

    Notes:
      • All work happens in the constructor; the accessors only read.
      • The caller's sequence is copied and the copy is sorted, so the
        caller's data is never reordered.
    """

    def __init__(self, points: Sequence[Point]):
        if points is None:
            raise NullPointError("points must not be None")

        pts: List[Point] = list(points)
        for i, p in enumerate(pts):
            if p is None:
                raise NullPointError(f"points[{i}] is None")

        pts = sort_points(pts)
        repeated = find_repeated_point(pts)
        if repeated is not None:
            raise DuplicatePointError(repeated)

        self._segments: List[LineSegment] = []

        # combinations() walks i < j < k < l over the sorted copy, so each
        # subset is seen exactly once
        for subset in combinations(pts, SEGMENT_POINT_COUNT):
            subset = sort_points(subset)
            if all_collinear(subset):
                self._enqueue(LineSegment(subset[0], subset[-1]))

    # ------------------------------------------------------------------
    # Segment collection
    # ------------------------------------------------------------------

    def _enqueue(self, segment: LineSegment):
        if segment is None:
            raise NullSegmentError("cannot add a None segment")
        self._segments.append(segment)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def number_of_segments(self) -> int:
        return len(self._segments)

    def segments(self) -> List[LineSegment]:
        """Returns a copy of the segments, in the order they were found."""
        return list(self._segments)

    def __repr__(self):
        return f"BruteCollinearPoints(segments={len(self._segments)})"
