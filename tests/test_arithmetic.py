import pytest

from cyclegraph.core.arithmetic import (
    EDGE_DONE, first_edge_state, next_edge, edge_at, edge_index,
    ring_edge_count, ring_has_edge, neighbor_count, neighbor_at,
)


def run_state_machine(nv):
    edges = []
    step = next_edge(nv, first_edge_state(nv))
    while step is not None:
        edge, state = step
        edges.append(edge)
        step = next_edge(nv, state)
    return edges


class TestEdgeStateMachine:

    @pytest.mark.parametrize("nv", [0, 1])
    def test_starts_terminal(self, nv):
        assert first_edge_state(nv) == EDGE_DONE
        assert next_edge(nv, EDGE_DONE) is None

    def test_two_vertices(self):
        assert next_edge(2, 1) == ((1, 2), 2)
        assert next_edge(2, 2) is None

    def test_closing_edge(self):
        assert next_edge(4, 3) == ((3, 4), 4)
        assert next_edge(4, 4) == ((1, 4), EDGE_DONE)

    def test_steps_are_pure(self):
        assert next_edge(6, 2) == next_edge(6, 2) == ((2, 3), 3)

    @pytest.mark.parametrize("nv", range(0, 10))
    def test_matches_closed_form(self, nv):
        edges = run_state_machine(nv)
        assert len(edges) == ring_edge_count(nv)
        assert edges == [edge_at(nv, i) for i in range(ring_edge_count(nv))]
        assert [edge_index(nv, u, v) for u, v in edges] == list(range(len(edges)))


class TestOracle:

    @pytest.mark.parametrize("nv", range(0, 10))
    def test_has_edge_symmetric(self, nv):
        for u in range(0, nv + 2):
            for v in range(0, nv + 2):
                assert ring_has_edge(nv, u, v) == ring_has_edge(nv, v, u)

    def test_wraparound(self):
        assert ring_has_edge(7, 1, 7)
        assert not ring_has_edge(7, 2, 7)
        assert not ring_has_edge(1, 1, 1)


class TestNeighborArithmetic:

    @pytest.mark.parametrize("nv, expected", [(0, 0), (1, 0), (2, 1), (3, 2), (9, 2)])
    def test_neighbor_count(self, nv, expected):
        assert neighbor_count(nv) == expected

    def test_order(self):
        assert [neighbor_at(6, 1, i) for i in range(2)] == [2, 6]
        assert [neighbor_at(6, 6, i) for i in range(2)] == [1, 5]
        assert [neighbor_at(6, 4, i) for i in range(2)] == [3, 5]
        assert neighbor_at(2, 1, 0) == 2
        assert neighbor_at(2, 2, 0) == 1
