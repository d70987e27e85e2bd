"""
Data Models

Defines the core data structures:
- Point
- Slope
- LineSegment
"""

from .point import Point, Slope, SlopeKind
from .line_segment import LineSegment

__all__ = ["Point", "Slope", "SlopeKind", "LineSegment"]
