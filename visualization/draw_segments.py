"""
Visualization utilities for rendering detected line segments.

This module provides:
    • draw_segments(img, segments, color, thickness)
"""

import cv2
from typing import List, Tuple

from models.line_segment import LineSegment
from visualization.draw_points import to_canvas
from config import get_active_params


def draw_segments(
    image,
    segments: List[LineSegment],
    color: Tuple[int, int, int] = None,
    thickness: int = None
):
    """
    Draws each segment from p to q onto an image.

    Args:
        image: BGR numpy array (modified in-place)
        segments: list of LineSegment objects
        color: (B, G, R)
        thickness: pixel width
    """
    params = get_active_params()
    if color is None:
        color = params["COLOR_SEGMENT"]
    if thickness is None:
        thickness = params["SEGMENT_THICKNESS"]

    size = image.shape[0]
    for seg in segments:
        cv2.line(
            image,
            to_canvas(seg.p, canvas_size=size),
            to_canvas(seg.q, canvas_size=size),
            color,
            thickness
        )
    return image
