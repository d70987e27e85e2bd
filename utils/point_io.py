"""
Point-list loading for the collinear pipeline.

This module provides:
    • parse_points(text)
    • load_points(path)
    • load_point_files(path_pattern)

File format (whitespace-insensitive):

    n
    x0 y0
    x1 y1
    ...
"""

import glob
import os
from typing import List, Tuple

import numpy as np

from models.point import Point
from detectors.errors import PointFileError


# -------------------------------------------------------------------------
#  PARSING
# -------------------------------------------------------------------------

def parse_points(text: str) -> List[Point]:
    """
    Parses the contents of a point-list file.

    Raises PointFileError if the count is missing, a token is not an
    integer, or the number of coordinates does not match the count.
    """
    tokens = text.split()
    if not tokens:
        raise PointFileError("missing point count")

    try:
        values = np.array(tokens, dtype=np.int64)
    except (ValueError, OverflowError) as error:
        raise PointFileError("point files may only contain integers") from error

    n = int(values[0])
    if n < 0:
        raise PointFileError(f"negative point count {n}")

    coords = values[1:]
    if coords.size != 2 * n:
        raise PointFileError(
            f"expected {2 * n} coordinates for {n} points, found {coords.size}"
        )

    return [Point(int(x), int(y)) for x, y in coords.reshape(-1, 2)]


# -------------------------------------------------------------------------
#  FILE LOADING
# -------------------------------------------------------------------------

def load_points(path: str) -> List[Point]:
    """
    Reads one point-list file from disk.
    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as error:
        raise PointFileError(f"{path} is not a UTF-8 text file") from error
    return parse_points(text)


def load_point_files(path_pattern: str) -> Tuple[List[List[Point]], List[str]]:
    """
    Loads all point files matching the given glob pattern.

    Returns:
        point_sets: list of point lists
        names:      file names without directory and extension

    Files that cannot be read or parsed are skipped with a warning.
    """
    file_list = sorted(glob.glob(path_pattern))
    point_sets = []
    names = []

    for fname in file_list:
        try:
            points = load_points(fname)
        except (OSError, PointFileError) as error:
            print(f"[WARN] Skipping {fname}: {error}")
            continue
        point_sets.append(points)
        names.append(os.path.splitext(os.path.basename(fname))[0])

    return point_sets, names
