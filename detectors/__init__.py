"""
Detectors Package

Contains the collinear-point detection modules:
- Brute-force 4-point collinear search
- Error types shared with the point loader
"""

from .brute_collinear import BruteCollinearPoints
from .errors import (
    CollinearError,
    NullPointError,
    DuplicatePointError,
    NullSegmentError,
    PointFileError,
)

__all__ = [
    "BruteCollinearPoints",
    "CollinearError",
    "NullPointError",
    "DuplicatePointError",
    "NullSegmentError",
    "PointFileError",
]
