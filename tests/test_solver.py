"""Tests for the backtracking search engine."""

import logging

import numpy as np
import pytest

from hedgehog.errors import TopologyError
from hedgehog.eval.verify import verify_solution
from hedgehog.grid.board import Board
from hedgehog.grid.parser import normalize_puzzle
from hedgehog.grid.topology import Topology, build_topology
from hedgehog.logging_utils import get_search_logger
from hedgehog.search.solver import HedgehogSolver
from hedgehog.types import Location


def _solver(puzzle, variant="plain", **kwargs):
    grid = normalize_puzzle(puzzle)
    board = Board(grid)
    return grid, board, HedgehogSolver(board, build_topology(grid.shape[0], variant), **kwargs)


def test_orchard_is_solved(orchard):
    grid, board, solver = _solver(orchard)
    result = solver.solve()

    assert result.solved
    assert result.status == "solved"
    assert result.solution.shape == (4, 3, 3)
    assert sorted(result.solution.ravel().tolist()) == list(range(1, 37))
    assert verify_solution(result.solution, grid, build_topology(4)) == []
    # fixed cells keep their numbers
    fixed = grid != -1
    assert np.array_equal(result.solution[fixed], grid[fixed])
    # the stack is left intact as the solution path
    assert len(solver.stack) == 36
    assert result.path[0] == Location(1, 1, 0)
    assert len(result.path) == 36


def test_orchard_consecutive_numbers_are_adjacent(orchard):
    _, _, solver = _solver(orchard)
    result = solver.solve()
    topo = build_topology(4)
    path = result.path
    for a, b in zip(path, path[1:]):
        assert topo.adjacent(a, b)
    assert topo.adjacent(path[-1], path[0])


def test_solve_is_deterministic(orchard):
    first = _solver(orchard)[2].solve()
    second = _solver(orchard)[2].solve()
    assert np.array_equal(first.solution, second.solution)
    assert first.steps == second.steps
    assert first.backtracks == second.backtracks


def test_tiny_plain_solution():
    _, _, solver = _solver([[[1]], [[-1]], [[-1]], [[-1]]])
    result = solver.solve()
    assert result.solved
    assert result.solution.tolist() == [[[1]], [[2]], [[4]], [[3]]]
    assert result.steps == 3
    assert result.backtracks == 0
    assert result.max_depth == 4


def test_tiny_extended_solution_uses_tube():
    puzzle = [[[1]], [[-1]], [[-1]], [[2]]]
    _, _, solver = _solver(puzzle, variant="extended")
    result = solver.solve()
    assert result.solved
    assert result.solution.tolist() == [[[1]], [[4]], [[3]], [[2]]]


def test_unreachable_fixed_successor_is_unsolvable():
    puzzle = [[[1]], [[-1]], [[-1]], [[2]]]
    grid, board, solver = _solver(puzzle)
    result = solver.solve()
    assert result.status == "unsolvable"
    assert not result.solved
    assert result.solution is None
    assert solver.stack == []
    assert np.array_equal(board.to_array(), grid)


def test_deeper_unreachable_pair_is_unsolvable(blank_2x2):
    # chunks 0 and 3 are never adjacent, so 5 -> 6 cannot be placed
    blank_2x2[0][1][1] = 5
    blank_2x2[3][0][0] = 6
    grid, board, solver = _solver(blank_2x2)
    result = solver.solve()
    assert result.status == "unsolvable"
    assert result.backtracks > 0
    assert np.array_equal(board.to_array(), grid)


def test_full_board_with_broken_chain_is_not_solved():
    # 1 -> 2 is not adjacent even though 4 closes the loop back to 1
    puzzle = [[[1]], [[3]], [[4]], [[2]]]
    _, board, solver = _solver(puzzle)
    assert board.is_full()
    assert solver.closes_loop()
    result = solver.solve()
    assert result.status == "unsolvable"


def test_solved_predicate_conditions_are_independent():
    _, board, solver = _solver([[[1]], [[2]], [[4]], [[3]]])
    assert solver.is_full()
    assert solver.closes_loop()
    assert not solver.chain_complete()
    assert not solver.is_solved()

    _, _, open_loop = _solver([[[1]], [[2]], [[3]], [[4]]])
    assert open_loop.is_full()
    assert not open_loop.closes_loop()

    _, _, partial = _solver([[[1]], [[-1]], [[-1]], [[-1]]])
    assert not partial.is_full()
    assert not partial.closes_loop()


def test_all_fixed_puzzle_walks_forced_chain():
    _, _, solver = _solver([[[1]], [[2]], [[4]], [[3]]])
    result = solver.solve()
    assert result.solved
    assert result.steps == 3
    assert solver.chain_complete()


def test_open_loop_is_unsolvable():
    _, _, solver = _solver([[[1]], [[2]], [[3]], [[4]]])
    assert solver.solve().status == "unsolvable"


def test_custom_topology_with_two_chunks():
    grid = normalize_puzzle([[[1, -1]], [[-1, -1]]])
    topo = Topology.from_descriptor({0: [(1, "row")], 1: [(0, "row")]})
    result = HedgehogSolver(Board(grid), topo).solve()
    assert result.solved
    assert result.solution.tolist() == [[[1, 3]], [[2, 4]]]


def test_topology_must_match_board():
    grid = normalize_puzzle([[[1, -1]], [[-1, -1]]])
    with pytest.raises(TopologyError):
        HedgehogSolver(Board(grid), build_topology(4))


def test_max_steps_cancels_and_restores_board(orchard):
    grid, board, solver = _solver(orchard, max_steps=1)
    result = solver.solve()
    assert result.status == "cancelled"
    assert result.solution is None
    assert result.steps == 1
    assert np.array_equal(board.to_array(), grid)


def test_should_cancel_hook(orchard):
    calls = []

    def cancel():
        calls.append(1)
        return True

    grid, board, solver = _solver(orchard, should_cancel=cancel)
    result = solver.solve()
    assert result.status == "cancelled"
    assert result.steps == 0
    assert calls
    assert np.array_equal(board.to_array(), grid)


def test_injected_logger_receives_trace(caplog):
    logger = logging.getLogger("tests.search")
    caplog.set_level(logging.DEBUG, logger="tests.search")
    _, _, solver = _solver([[[1]], [[-1]], [[-1]], [[-1]]], logger=logger)
    solver.solve()
    messages = [r.getMessage() for r in caplog.records if r.name == "tests.search"]
    assert "depth: 4" in messages
    assert "solved" in messages


def test_search_logger_is_silent_by_default():
    logger = get_search_logger()
    assert not logger.isEnabledFor(logging.CRITICAL)
    assert get_search_logger(verbose=True).isEnabledFor(logging.DEBUG)


def test_verbose_logger_leaves_quiet_logger_quiet():
    quiet = get_search_logger(False)
    loud = get_search_logger(True)
    assert loud is not quiet
    assert not quiet.isEnabledFor(logging.DEBUG)
    # asking again for a quiet logger does not silence the verbose one either
    assert get_search_logger(False) is quiet
    assert loud.isEnabledFor(logging.DEBUG)
    assert not quiet.propagate and not loud.propagate


@pytest.mark.slow
@pytest.mark.parametrize("name", ["22", "23"])
def test_four_by_four_samples(name):
    from hedgehog.samples import SAMPLES

    grid, _, solver = _solver(SAMPLES[name])
    result = solver.solve()
    assert result.solved
    assert verify_solution(result.solution, grid, build_topology(4)) == []
