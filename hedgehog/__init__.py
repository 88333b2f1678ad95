# -*- coding: utf-8 -*-
"""
hedgehog パッケージの入口となるモジュールです。

api_proto/local_api.py などから:

    from hedgehog import solve

と呼び出されることを想定しています。

ここでは、3次元のパズル（chunk × row × col）を受け取り、
1. 入力の検査と正規化
2. トポロジー（チャンク間の隣接表）の構築
3. 盤面（Board）の構築
4. バックトラック探索
5. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from .config import DEFAULT_VARIANT, MAX_SEARCH_STEPS, SEARCH_VERBOSE
from .errors import BoardStateError, InvalidPuzzleError, TopologyError
from .logging_utils import get_logger, get_search_logger
from .grid.parser import normalize_puzzle
from .grid.board import Board
from .grid.topology import Topology, build_topology
from .search.solver import HedgehogSolver
from .postprocess.render_result import build_result
from .eval.verify import verify_solution
from .types import STATUS_CANCELLED, STATUS_SOLVED, STATUS_UNSOLVABLE, SolveResult

logger = get_logger()

__all__ = [
    "solve",
    "Board",
    "HedgehogSolver",
    "Topology",
    "build_topology",
    "normalize_puzzle",
    "verify_solution",
    "SolveResult",
    "InvalidPuzzleError",
    "TopologyError",
    "BoardStateError",
    "STATUS_SOLVED",
    "STATUS_UNSOLVABLE",
    "STATUS_CANCELLED",
]


def solve(
    puzzle: Any,
    variant: str = DEFAULT_VARIANT,
    topology: Optional[Topology] = None,
    verbose: bool = SEARCH_VERBOSE,
    max_steps: Optional[int] = MAX_SEARCH_STEPS,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> Dict[str, Any]:
    """
    hedgehog パズルを解くメイン関数。

    Parameters
    ----------
    puzzle : sequence, numpy.ndarray, or sequence of pandas.DataFrame
        3次元の整数データ（空白は -1）。
    variant : str
        "plain" または "extended"。topology を渡した場合は使いません。
    topology : Topology, optional
        明示的な隣接表。4 チャンク以外の盤面ではこちらを渡します。
    verbose : bool
        True なら探索の詳細ログを出します。
    max_steps : int, optional
        探索ステップ数の上限。

    Returns
    -------
    dict
        :func:`hedgehog.postprocess.render_result.build_result` の結果。

    Raises
    ------
    InvalidPuzzleError
        入力やトポロジーが不正な場合（探索は行いません）。
    """
    logger.info("=== solve() START ===")

    # 1) 入力の検査
    grid = normalize_puzzle(puzzle)
    logger.info("Puzzle shape: %s", grid.shape)

    # 2) トポロジー
    if topology is None:
        topology = build_topology(grid.shape[0], variant)
    elif topology.chunk_count != grid.shape[0]:
        raise TopologyError(
            f"topology has {topology.chunk_count} chunks but puzzle has {grid.shape[0]}"
        )

    # 3) 盤面
    board = Board(grid)

    # 4) 探索
    solver = HedgehogSolver(
        board,
        topology,
        logger=get_search_logger(verbose),
        max_steps=max_steps,
        should_cancel=should_cancel,
    )
    result = solver.solve()
    logger.info(
        "Search finished: status=%s steps=%d backtracks=%d (%d ms)",
        result.status,
        result.steps,
        result.backtracks,
        result.duration_ms,
    )

    # 念のため、完成盤面を検査しておく
    if result.solution is not None:
        for problem in verify_solution(result.solution, grid, topology):
            logger.warning("[WARNING] %s", problem)

    # 5) 表示用の結果
    out = build_result(board, result)
    logger.info("=== solve() END ===")
    return out
