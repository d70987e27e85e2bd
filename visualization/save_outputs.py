"""
Centralized output-saving utilities for the collinear pipeline.

This module provides:
    • save_all_outputs(...)
    • save_points(...)
    • save_segments(...)
    • save_segment_list(...)

Uses draw modules to visualize and utils.image_io for filesystem handling.
"""

from typing import List

from models.point import Point
from models.line_segment import LineSegment

from visualization.draw_points import new_canvas, draw_points
from visualization.draw_segments import draw_segments
from utils.image_io import save_image, save_text, ensure_output_dir


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_points(path: str, points: List[Point]):
    """
    Draw the input points on a blank canvas and save to disk.
    """
    vis = new_canvas()
    draw_points(vis, points)
    save_image(path, vis)


def save_segments(path: str, points: List[Point], segments: List[LineSegment]):
    """
    Draw the segments over the input points and save to disk.
    """
    vis = new_canvas()
    draw_segments(vis, segments)
    draw_points(vis, points)
    save_image(path, vis)


def save_segment_list(path: str, segments: List[LineSegment]):
    """
    Writes one "p -> q" line per segment.
    """
    save_text(path, (str(s) for s in segments))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    name: str,
    points: List[Point],
    segments: List[LineSegment]
):
    """
    Saves every output artifact for one processed point set.

    Example output:
        <name>_points.png
        <name>_segments.png
        <name>_segments.txt
    """

    ensure_output_dir(output_dir)

    save_points(f"{output_dir}/{name}_points.png", points)

    save_segments(f"{output_dir}/{name}_segments.png", points, segments)

    save_segment_list(f"{output_dir}/{name}_segments.txt", segments)
