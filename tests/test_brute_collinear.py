from __future__ import annotations

import pytest

import config
from detectors.brute_collinear import SEGMENT_POINT_COUNT, BruteCollinearPoints
from detectors.errors import (
    CollinearError,
    DuplicatePointError,
    NullPointError,
    NullSegmentError,
)
from models.line_segment import LineSegment
from models.point import Point


def _points(*coords: tuple[int, int]) -> list[Point]:
    return [Point(x, y) for x, y in coords]


def test_four_diagonal_points_give_one_segment() -> None:
    collinear = BruteCollinearPoints(_points((1, 1), (2, 2), (3, 3), (4, 4)))

    assert collinear.number_of_segments() == 1
    assert collinear.segments() == [LineSegment(Point(1, 1), Point(4, 4))]


def test_extra_non_collinear_points_are_ignored() -> None:
    points = _points((1, 1), (2, 2), (3, 3), (4, 4), (1, 4), (4, 1))

    collinear = BruteCollinearPoints(points)

    assert collinear.number_of_segments() == 1
    segment = collinear.segments()[0]
    assert (segment.p, segment.q) == (Point(1, 1), Point(4, 4))


def test_three_collinear_points_give_no_segment() -> None:
    collinear = BruteCollinearPoints(_points((1, 1), (2, 2), (3, 3)))

    assert collinear.number_of_segments() == 0
    assert collinear.segments() == []


def test_empty_and_tiny_inputs_give_no_segment() -> None:
    assert BruteCollinearPoints([]).number_of_segments() == 0
    assert BruteCollinearPoints(_points((0, 0))).number_of_segments() == 0


def test_repeated_point_raises_duplicate_error() -> None:
    points = _points((5, 5), (1, 2), (5, 5), (7, 0))

    with pytest.raises(DuplicatePointError) as excinfo:
        BruteCollinearPoints(points)

    assert excinfo.value.point == Point(5, 5)
    assert isinstance(excinfo.value, ValueError)


def test_none_sequence_raises_null_point_error() -> None:
    with pytest.raises(NullPointError):
        BruteCollinearPoints(None)


@pytest.mark.parametrize("position", [0, 2, 4])
def test_none_element_raises_null_point_error(position: int) -> None:
    points: list[Point | None] = list(_points((0, 0), (1, 1), (2, 2), (3, 3)))
    points.insert(position, None)

    with pytest.raises(NullPointError):
        BruteCollinearPoints(points)


def test_errors_share_a_common_base() -> None:
    with pytest.raises(CollinearError):
        BruteCollinearPoints(None)
    with pytest.raises(CollinearError):
        BruteCollinearPoints(_points((1, 1), (1, 1)))


def test_input_sequence_is_not_reordered() -> None:
    points = _points((4, 4), (3, 3), (2, 2), (1, 1), (9, 0))
    snapshot = list(points)

    BruteCollinearPoints(points)

    assert points == snapshot


def test_input_order_does_not_change_endpoints() -> None:
    collinear = BruteCollinearPoints(_points((4, 4), (2, 2), (1, 1), (3, 3)))

    segment = collinear.segments()[0]
    assert str(segment) == "(1, 1) -> (4, 4)"


def test_accepts_tuples_and_generators() -> None:
    coords = ((0, 0), (0, 1), (0, 2), (0, 3))

    from_tuple = BruteCollinearPoints(tuple(_points(*coords)))
    from_generator = BruteCollinearPoints(Point(x, y) for x, y in coords)

    assert from_tuple.segments() == from_generator.segments()


def test_segments_returns_independent_copies() -> None:
    collinear = BruteCollinearPoints(_points((1, 1), (2, 2), (3, 3), (4, 4)))

    first = collinear.segments()
    first.clear()
    second = collinear.segments()

    assert second == collinear.segments()
    assert len(second) == 1
    assert collinear.number_of_segments() == len(second)


def test_vertical_horizontal_and_sloped_lines() -> None:
    points = _points(
        # vertical x = 10
        (10, 0), (10, 5), (10, 10), (10, 15),
        # horizontal y = 20
        (0, 20), (3, 20), (6, 20), (9, 20),
        # slope -1
        (30, 0), (29, 1), (28, 2), (27, 3),
    )

    collinear = BruteCollinearPoints(points)

    found = {(s.p, s.q) for s in collinear.segments()}
    assert collinear.number_of_segments() == len(collinear.segments()) == 3
    assert found == {
        (Point(10, 0), Point(10, 15)),
        (Point(0, 20), Point(9, 20)),
        (Point(30, 0), Point(27, 3)),
    }


def test_segments_keep_discovery_order() -> None:
    points = _points(
        (0, 10), (1, 10), (2, 10), (3, 10),
        (0, 0), (1, 1), (2, 2), (3, 3),
    )

    segments = BruteCollinearPoints(points).segments()

    assert [str(s) for s in segments] == [
        "(0, 0) -> (3, 3)",
        "(0, 10) -> (3, 10)",
    ]


def test_five_collinear_points_report_every_four_point_subset() -> None:
    # no-5-collinear is an input precondition; violating it repeats the line
    points = _points((0, 0), (1, 1), (2, 2), (3, 3), (4, 4))

    collinear = BruteCollinearPoints(points)

    assert collinear.number_of_segments() == 5


def test_enqueue_rejects_none() -> None:
    collinear = BruteCollinearPoints([])

    with pytest.raises(NullSegmentError):
        collinear._enqueue(None)
    assert collinear.number_of_segments() == 0


def test_group_size_is_fixed_at_four() -> None:
    assert SEGMENT_POINT_COUNT == 4
    assert "SEGMENT_POINT_COUNT" not in config.get_active_params()
