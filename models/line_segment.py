from dataclasses import dataclass

from models.point import Point


@dataclass(frozen=True)
class LineSegment:
    """
    Segment between two distinct points, produced by the collinear detectors.

    `p` and `q` are the smallest and largest point (by Point ordering)
    of the collinear group the segment was built from.
    """

    p: Point
    q: Point

    def __post_init__(self):
        if self.p is None or self.q is None:
            raise TypeError("LineSegment endpoints must not be None")
        if self.p == self.q:
            raise ValueError(f"LineSegment endpoints must differ, got {self.p} twice")

    @property
    def endpoints(self):
        return self.p, self.q

    def __str__(self):
        return f"{self.p} -> {self.q}"
