"""
Visualization Tools

Provides drawing utilities for:
- Input points
- Detected line segments
"""

from .draw_points import new_canvas, to_canvas, draw_points
from .draw_segments import draw_segments
from .save_outputs import (
    save_all_outputs,
    save_points,
    save_segments,
    save_segment_list,
)

__all__ = [
    "new_canvas",
    "to_canvas",
    "draw_points",
    "draw_segments",
    "save_all_outputs",
    "save_points",
    "save_segments",
    "save_segment_list",
]
