# -*- coding: utf-8 -*-
"""
完成盤面が正しいかどうかを検査するモジュールです。

検査項目
--------
- 番号がちょうど 1..N を1回ずつ使っている
- i と i+1 の入ったマスが隣接している（i = 1..N-1）
- N の入ったマスが 1 の入ったマスと隣接している（輪が閉じている）
- 入力で固定されていたマスの番号が変わっていない
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..config import BLANK
from ..grid.topology import Topology
from ..types import Location


def verify_solution(
    grid: np.ndarray,
    puzzle: np.ndarray,
    topology: Topology,
) -> List[str]:
    """
    完成盤面 ``grid`` を検査し、見つかった違反の説明をリストで返します。

    空リストなら正しい解です。

    Parameters
    ----------
    grid : numpy.ndarray
        shape = (chunks, rows, cols) の完成盤面。
    puzzle : numpy.ndarray
        検査済みの入力パズル（BLANK を含む）。
    topology : Topology
        隣接判定に使うトポロジー。
    """
    problems: List[str] = []
    if grid.shape != puzzle.shape:
        return [f"shape mismatch: solution {grid.shape} vs puzzle {puzzle.shape}"]

    total = grid.size
    values = np.sort(grid.ravel())
    if not np.array_equal(values, np.arange(1, total + 1)):
        problems.append(f"numbers are not exactly 1..{total}")
        return problems

    # 番号 → 座標
    where = {}
    for (c, r, k), v in np.ndenumerate(grid):
        where[int(v)] = Location(c, r, k)

    for n in range(1, total):
        if not topology.adjacent(where[n], where[n + 1]):
            problems.append(f"{n} at {where[n]} is not adjacent to {n + 1} at {where[n + 1]}")

    if not topology.adjacent(where[total], where[1]):
        problems.append(f"loop not closed: {total} at {where[total]} is not adjacent to 1")

    fixed = puzzle != BLANK
    changed = np.argwhere(fixed & (grid != puzzle))
    for c, r, k in changed:
        problems.append(
            f"fixed cell ({c}, {r}, {k}) changed from {puzzle[c, r, k]} to {grid[c, r, k]}"
        )

    return problems
