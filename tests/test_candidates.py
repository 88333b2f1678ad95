"""Tests for candidate generation."""

from hedgehog.grid.board import Board
from hedgehog.grid.parser import normalize_puzzle
from hedgehog.grid.topology import build_topology
from hedgehog.search.candidates import candidates_after


def _locs(cells):
    return [(c.location.chunk, c.location.row, c.location.col) for c in cells]


def test_candidates_follow_adjacency_then_scan_order(blank_2x2):
    board = Board(normalize_puzzle(blank_2x2))
    cands = candidates_after(board, build_topology(4, "plain"), board.root)
    # row 0 of chunk 1, then column 0 of chunk 2
    assert _locs(cands) == [(1, 0, 0), (1, 0, 1), (2, 0, 0), (2, 1, 0)]


def test_extended_adds_tube_candidate(blank_2x2):
    board = Board(normalize_puzzle(blank_2x2))
    cands = candidates_after(board, build_topology(4, "extended"), board.root)
    assert _locs(cands) == [(1, 0, 0), (1, 0, 1), (2, 0, 0), (2, 1, 0), (3, 0, 0)]


def test_assigned_cells_are_not_candidates(blank_2x2):
    blank_2x2[1][0][1] = 5
    board = Board(normalize_puzzle(blank_2x2))
    board.assign(board.cell_at(2, 1, 0), 7)
    cands = candidates_after(board, build_topology(4), board.root)
    assert _locs(cands) == [(1, 0, 0), (2, 0, 0)]


def test_fixed_adjacent_successor_is_forced(blank_2x2):
    blank_2x2[1][0][1] = 2
    board = Board(normalize_puzzle(blank_2x2))
    cands = candidates_after(board, build_topology(4), board.root)
    assert _locs(cands) == [(1, 0, 1)]


def test_fixed_unreachable_successor_gives_no_candidates(blank_2x2):
    blank_2x2[3][1][1] = 2
    board = Board(normalize_puzzle(blank_2x2))
    assert candidates_after(board, build_topology(4), board.root) == ()


def test_candidates_are_fresh_each_call(blank_2x2):
    board = Board(normalize_puzzle(blank_2x2))
    topo = build_topology(4)
    first = candidates_after(board, topo, board.root)
    second = candidates_after(board, topo, board.root)
    assert first == second

    # consuming one sequence does not affect the next call
    it = iter(first)
    next(it)
    next(it)
    assert len(candidates_after(board, topo, board.root)) == 4


def test_duplicate_links_to_same_chunk_listed_once(blank_2x2):
    from hedgehog.grid.topology import Topology

    topo = Topology.from_descriptor(
        {
            0: [(1, "row"), (1, "tube"), (2, "col")],
            1: [(0, "row"), (0, "tube"), (3, "col")],
            2: [(3, "row"), (0, "col")],
            3: [(2, "row"), (1, "col")],
        }
    )
    board = Board(normalize_puzzle(blank_2x2))
    cands = candidates_after(board, topo, board.root)
    assert _locs(cands) == [(1, 0, 0), (1, 0, 1), (2, 0, 0), (2, 1, 0)]


def test_unassigned_cell_has_no_candidates(blank_2x2):
    board = Board(normalize_puzzle(blank_2x2))
    assert candidates_after(board, build_topology(4), board.cell_at(3, 1, 1)) == ()
