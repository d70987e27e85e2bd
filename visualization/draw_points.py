"""
Visualization utilities for rendering input points.

This module provides:
    • new_canvas(size, color)
    • to_canvas(point, canvas_size, coord_max, flip_y)
    • draw_points(img, points, color, radius)

Used by:
    - visualization.draw_segments
    - visualization.save_outputs
"""

from typing import List, Tuple

import cv2
import numpy as np

from models.point import Point
from config import get_active_params


# ---------------------------------------------------------------------
#  Blank canvas
# ---------------------------------------------------------------------

def new_canvas(size: int = None, color: Tuple[int, int, int] = None) -> np.ndarray:
    """
    Returns a square BGR image filled with `color`.
    """
    params = get_active_params()
    if size is None:
        size = params["CANVAS_SIZE"]
    if color is None:
        color = params["COLOR_BACKGROUND"]

    canvas = np.zeros((size, size, 3), dtype=np.uint8)
    canvas[:, :] = color
    return canvas


# ---------------------------------------------------------------------
#  Coordinate mapping
# ---------------------------------------------------------------------

def to_canvas(
    point: Point,
    canvas_size: int = None,
    coord_max: int = None,
    flip_y: bool = None
) -> Tuple[int, int]:
    """
    Maps a point from [0, coord_max) into pixel coordinates of a
    canvas_size x canvas_size image. With flip_y, y = 0 is the bottom row.
    """
    params = get_active_params()
    if canvas_size is None:
        canvas_size = params["CANVAS_SIZE"]
    if coord_max is None:
        coord_max = params["COORD_MAX"]
    if flip_y is None:
        flip_y = params["FLIP_Y"]

    scale = canvas_size / coord_max
    px = int(point.x * scale)
    py = int(point.y * scale)
    if flip_y:
        py = canvas_size - 1 - py
    return px, py


# ---------------------------------------------------------------------
#  Draw points
# ---------------------------------------------------------------------

def draw_points(
    image,
    points: List[Point],
    color: Tuple[int, int, int] = None,
    radius: int = None
):
    """
    Draws every point as a filled circle (modifies image in-place).
    """
    params = get_active_params()
    if color is None:
        color = params["COLOR_POINT"]
    if radius is None:
        radius = params["POINT_RADIUS"]

    size = image.shape[0]
    for p in points:
        cv2.circle(
            image,
            to_canvas(p, canvas_size=size),
            radius,
            color,
            thickness=-1
        )
    return image
