"""Tests for solution verification."""

import numpy as np

from hedgehog.eval.verify import verify_solution
from hedgehog.grid.parser import normalize_puzzle
from hedgehog.grid.topology import build_topology

PUZZLE = normalize_puzzle([[[1]], [[-1]], [[-1]], [[-1]]])
TOPO = build_topology(4)


def test_valid_solution_has_no_problems():
    assert verify_solution(np.array([[[1]], [[2]], [[4]], [[3]]]), PUZZLE, TOPO) == []


def test_repeated_numbers_are_reported():
    problems = verify_solution(np.array([[[1]], [[2]], [[2]], [[3]]]), PUZZLE, TOPO)
    assert problems == ["numbers are not exactly 1..4"]


def test_non_adjacent_step_is_reported():
    problems = verify_solution(np.array([[[1]], [[3]], [[4]], [[2]]]), PUZZLE, TOPO)
    assert any(p.startswith("1 at") for p in problems)


def test_open_loop_is_reported():
    problems = verify_solution(np.array([[[1]], [[2]], [[3]], [[4]]]), PUZZLE, TOPO)
    assert any("loop not closed" in p for p in problems)


def test_changed_fixed_cell_is_reported():
    puzzle = normalize_puzzle([[[1]], [[-1]], [[-1]], [[2]]])
    topo = build_topology(4, "extended")
    problems = verify_solution(np.array([[[1]], [[2]], [[4]], [[3]]]), puzzle, topo)
    assert any("fixed cell (3, 0, 0)" in p for p in problems)


def test_shape_mismatch():
    problems = verify_solution(np.zeros((4, 2, 2), dtype=int), PUZZLE, TOPO)
    assert problems and "shape mismatch" in problems[0]
