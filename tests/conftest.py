import pytest

from hedgehog.samples import ORCHARD


@pytest.fixture
def orchard():
    return [[list(row) for row in chunk] for chunk in ORCHARD]


@pytest.fixture
def tiny_puzzle():
    """4 chunks of 1x1; only the root is fixed."""
    return [[[1]], [[-1]], [[-1]], [[-1]]]


@pytest.fixture
def blank_2x2():
    """4 chunks of 2x2 with 1 in the top-left of chunk 0."""
    puzzle = [[[-1, -1], [-1, -1]] for _ in range(4)]
    puzzle[0][0][0] = 1
    return puzzle
