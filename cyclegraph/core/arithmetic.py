"""
Closed-form ring arithmetic.

Every query on a cycle graph reduces to one of the functions below. They
take the vertex count ``nv`` and plain Python integers and return plain
Python integers; conversion to the graph's vertex type happens in the
callers. None of them keeps state between calls.
"""

from typing import Optional, Tuple

# Terminal state of the edge state machine
EDGE_DONE = 0


def ring_edge_count(nv: int) -> int:
    """
    Number of edges of the cycle graph on ``nv`` vertices.

    A ring of two vertices is a single edge, not a pair of parallel edges.
    """
    if nv >= 3:
        return nv
    if nv == 2:
        return 1
    return 0


def ring_has_edge(nv: int, u: int, v: int) -> bool:
    """
    Whether ``u`` and ``v`` are adjacent on the ring of ``nv`` vertices.

    The wraparound clause ``(1, nv)`` coincides with the consecutive clause
    when ``nv == 2``, so small rings need no separate handling. Self-loops
    are excluded explicitly, otherwise ``(1, 1)`` would match the wraparound
    clause when ``nv == 1``.
    """
    lo, hi = (u, v) if u <= v else (v, u)
    in_bounds = 1 <= lo < hi <= nv
    adjacent = (hi - lo == 1) or (lo == 1 and hi == nv)
    return in_bounds and adjacent


def first_edge_state(nv: int) -> int:
    """Initial state of the edge state machine."""
    return 1 if nv >= 2 else EDGE_DONE


def next_edge(nv: int, state: int) -> Optional[Tuple[Tuple[int, int], int]]:
    """
    Advance the edge state machine.

    The state is the left endpoint of the next consecutive edge, or
    ``EDGE_DONE``. Consecutive edges ``(s, s + 1)`` are emitted while
    ``s < nv``; once ``s`` reaches ``nv`` the closing edge ``(1, nv)`` is
    emitted if the ring has at least three vertices.

    Parameters
    ----------
    nv : int
        Number of vertices
    state : int
        Current state

    Returns
    -------
    tuple or None
        ``((src, dst), next_state)``, or None when the sequence is exhausted
    """
    if state == EDGE_DONE:
        return None
    if state < nv:
        return (state, state + 1), state + 1
    if nv >= 3:
        return (1, nv), EDGE_DONE
    return None


def edge_at(nv: int, i: int) -> Tuple[int, int]:
    """
    The ``i``-th edge (0-based) in enumeration order.

    Caller guarantees ``0 <= i < ring_edge_count(nv)``.
    """
    if i < nv - 1:
        return i + 1, i + 2
    return 1, nv


def edge_index(nv: int, u: int, v: int) -> int:
    """
    Position of the edge ``{u, v}`` in enumeration order.

    Caller guarantees ``ring_has_edge(nv, u, v)``.
    """
    lo, hi = (u, v) if u <= v else (v, u)
    if hi - lo == 1:
        return lo - 1
    return nv - 1


def neighbor_count(nv: int) -> int:
    """Number of neighbors of any vertex on the ring of ``nv`` vertices."""
    if nv <= 1:
        return 0
    if nv == 2:
        return 1
    return 2


def neighbor_at(nv: int, v: int, i: int) -> int:
    """
    The ``i``-th neighbor (0-based) of vertex ``v``.

    Order is fixed: vertex 1 yields ``2, nv``; vertex ``nv`` yields
    ``1, nv - 1``; any other vertex yields its predecessor then its
    successor. Caller guarantees ``0 <= i < neighbor_count(nv)``.
    """
    if nv == 2:
        return 3 - v
    if v == 1:
        return 2 if i == 0 else nv
    if v == nv:
        return 1 if i == 0 else nv - 1
    return v - 1 if i == 0 else v + 1
