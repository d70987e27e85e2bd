"""
Exceptions raised by the collinear detectors and the point loader.
"""


class CollinearError(Exception):
    """Base class for every error raised by this package."""


class NullPointError(CollinearError, TypeError):
    """The point sequence, or one of its elements, is None."""


class DuplicatePointError(CollinearError, ValueError):
    """The point sequence contains the same point twice."""

    def __init__(self, point):
        super().__init__(f"repeated point {point}")
        self.point = point


class NullSegmentError(CollinearError, TypeError):
    """A None segment was handed to the segment collection."""


class PointFileError(CollinearError, ValueError):
    """A point-list file is malformed."""
