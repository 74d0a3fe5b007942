"""Tests for nearest-neighbour and cheapest insertion planning."""

import random

import pytest

from greedytour.errors import EmptySequenceEdgeError
from greedytour.models import Point
from greedytour.planner import (
    HEURISTICS,
    cheapest_edge,
    get_planner,
    insertion_cost,
    nearest_node,
    plan_cheapest,
    plan_nearest,
)
from greedytour.sequence import CyclicSequence


SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


def _random_points(seed, n):
    rng = random.Random(seed)
    return [Point(rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(n)]


class TestInsertionCost:
    def test_point_on_edge_costs_nothing(self):
        assert insertion_cost(Point(0, 0), Point(10, 0), Point(5, 0)) == pytest.approx(0.0)

    def test_point_below_edge(self):
        cost = insertion_cost(Point(0, 0), Point(10, 0), Point(5, -5))
        assert cost == pytest.approx(2 * 50 ** 0.5 - 10)

    def test_self_loop_edge(self):
        a = Point(1, 1)
        assert insertion_cost(a, a, Point(4, 5)) == pytest.approx(10.0)


class TestEmptySequence:
    def test_plans_signal_insert_as_first(self):
        seq = CyclicSequence()
        assert plan_nearest(seq, Point(1, 1)) is None
        assert plan_cheapest(seq, Point(1, 1)) is None

    def test_raw_scans_raise(self):
        seq = CyclicSequence()
        with pytest.raises(EmptySequenceEdgeError):
            nearest_node(seq, Point(1, 1))
        with pytest.raises(EmptySequenceEdgeError):
            cheapest_edge(seq, Point(1, 1))


class TestPlanNearest:
    def test_picks_closest_node(self):
        seq = CyclicSequence.from_points(SQUARE)
        assert plan_nearest(seq, Point(9, 11)).point == Point(10, 10)

    def test_tie_goes_to_first_in_anchor_order(self):
        seq = CyclicSequence.from_points(SQUARE)
        assert plan_nearest(seq, Point(5, 0)).point == Point(0, 0)
        assert plan_nearest(seq, Point(5, 5)).point == Point(0, 0)
        assert plan_nearest(seq, Point(10, 5)).point == Point(10, 0)

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_chosen_node_is_minimal(self, seed):
        points = _random_points(seed, 30)
        seq = CyclicSequence.from_points(points[:-1])
        p = points[-1]
        chosen = plan_nearest(seq, p)
        best = p.distance_to(chosen.point)
        assert all(best <= p.distance_to(q) for q in seq.points())


class TestPlanCheapest:
    def test_square_scenario(self):
        seq = CyclicSequence.from_points(SQUARE)
        edge, cost = cheapest_edge(seq, Point(5, -5))
        assert (edge.start.point, edge.end.point) == (Point(0, 0), Point(10, 0))
        assert cost == pytest.approx(4.1421356, abs=1e-6)
        assert plan_cheapest(seq, Point(5, -5)) == edge.start

    def test_wraparound_edge_is_a_candidate(self):
        seq = CyclicSequence.from_points(SQUARE)
        assert plan_cheapest(seq, Point(-1, 5)).point == Point(0, 10)

    def test_tie_goes_to_first_edge(self):
        seq = CyclicSequence.from_points(SQUARE)
        assert plan_cheapest(seq, Point(5, 5)).point == Point(0, 0)

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_chosen_edge_is_minimal(self, seed):
        points = _random_points(seed, 30)
        seq = CyclicSequence.from_points(points[:-1])
        p = points[-1]
        _, best = cheapest_edge(seq, p)
        for edge in seq.iterate():
            assert best <= insertion_cost(edge.start.point, edge.end.point, p) + 1e-12


class TestPlanningIsReadOnly:
    @pytest.mark.parametrize("planner", [plan_nearest, plan_cheapest])
    def test_size_and_length_unchanged(self, planner):
        seq = CyclicSequence.from_points(_random_points(7, 20))
        size, length, order = seq.size(), seq.total_length(), seq.points()
        for p in _random_points(8, 5):
            planner(seq, p)
        assert seq.size() == size
        assert seq.total_length() == length
        assert seq.points() == order


class TestRegistry:
    def test_names(self):
        assert set(HEURISTICS) == {"nearest", "smallest"}
        assert get_planner("smallest") is plan_cheapest

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown heuristic"):
            get_planner("farthest")
