# -*- coding: utf-8 -*-
"""
バックトラック探索を行うモジュールです。

再帰ではなく「明示的なスタック」で深さ優先探索を行います。
スタックの各段（Frame）は「置いたマス」と「次の番号の候補イテレータ」の組で、
深さ d の段のマスには番号 d が入っています。

ざっくり流れ
------------
1. Start      : 番号 1 のマス（root）の段を積む
2. Descend    : 一番上の段の候補から次のマスを取り出し、
                固定マスでなければ番号（深さ + 1）を置いて段を積む
3. 候補切れ    : 解けているか調べる（全マスが埋まり、番号 N のマスが root と隣接）
4. Backtrack  : 解けていなければ一番上の段を降ろし、固定マスでなければ番号を外す
5. スタックが空になったら「解なし」

盤面を書き換えるのは Descend（assign）と Backtrack（unassign）の2か所だけです。
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from ..config import MAX_SEARCH_STEPS, PROGRESS_LOG_INTERVAL
from ..errors import TopologyError
from ..grid.board import Board
from ..grid.topology import Topology
from ..logging_utils import get_search_logger
from ..types import (
    STATUS_CANCELLED, STATUS_SOLVED, STATUS_UNSOLVABLE,
    Cell, Frame, SolveResult,
)
from .candidates import candidates_after


class HedgehogSolver:
    """
    Board と Topology を受け取り、最初に見つかった解を返す探索エンジンです。

    Parameters
    ----------
    board : Board
        探索で書き換える盤面。探索の間はこの solver が専有します。
    topology : Topology
        チャンク間の隣接表。チャンク数は board と一致している必要があります。
    logger : logging.Logger, optional
        探索ログの出力先。省略時は何も出力しないロガーを使います。
    max_steps : int, optional
        descend の回数の上限。超えたら "cancelled" で打ち切ります。
    should_cancel : callable, optional
        各ステップの前に呼ばれ、True を返したら "cancelled" で打ち切ります。
    """

    def __init__(
        self,
        board: Board,
        topology: Topology,
        logger: Optional[logging.Logger] = None,
        max_steps: Optional[int] = MAX_SEARCH_STEPS,
        should_cancel: Optional[Callable[[], bool]] = None,
        progress_interval: int = PROGRESS_LOG_INTERVAL,
    ) -> None:
        if topology.chunk_count != board.chunk_count:
            raise TopologyError(
                f"topology has {topology.chunk_count} chunks but board has {board.chunk_count}"
            )
        self.board = board
        self.topology = topology
        self.logger = logger or get_search_logger()
        self.max_steps = max_steps
        self.should_cancel = should_cancel
        self.progress_interval = progress_interval

        self.stack: List[Frame] = []
        self.steps = 0
        self.backtracks = 0
        self.max_depth = 0

    # ------------------------------------------------------------------
    # 解けたかどうかの判定
    # ------------------------------------------------------------------
    def is_full(self) -> bool:
        """全マスに番号が入っているか。"""
        return self.board.is_full()

    def chain_complete(self) -> bool:
        """スタックが 1..N の全番号を順につないでいるか。"""
        return len(self.stack) == self.board.total_cells

    def closes_loop(self) -> bool:
        """番号 N のマスが root（番号 1）と隣接しているか。"""
        last = self.board.cell_with_number(self.board.total_cells)
        if last is None:
            return False
        return self.topology.adjacent(last.location, self.board.root.location)

    def is_solved(self) -> bool:
        return self.is_full() and self.chain_complete() and self.closes_loop()

    # ------------------------------------------------------------------
    # スタック操作
    # ------------------------------------------------------------------
    def _push(self, cell: Cell) -> None:
        candidates = candidates_after(self.board, self.topology, cell)
        self.logger.debug(
            "found %d possibilities for number %s", len(candidates), cell.num
        )
        self.stack.append(Frame(cell=cell, candidates=iter(candidates)))
        if len(self.stack) > self.max_depth:
            self.max_depth = len(self.stack)

    def _pop(self) -> None:
        frame = self.stack.pop()
        if not frame.cell.fixed:
            self.board.unassign(frame.cell)

    def _unwind(self) -> None:
        """スタックをすべて降ろし、探索で置いた番号を外します。"""
        while self.stack:
            self._pop()

    def _cancelled(self) -> bool:
        if self.max_steps is not None and self.steps >= self.max_steps:
            return True
        return self.should_cancel is not None and self.should_cancel()

    # ------------------------------------------------------------------
    # 探索本体
    # ------------------------------------------------------------------
    def solve(self) -> SolveResult:
        """
        探索を実行し、結果を SolveResult で返します。

        解けた場合、スタックと盤面は解の状態のまま残ります。
        解なし・打ち切りの場合、盤面は入力時の状態に戻ります。
        """
        start = time.time()
        self.stack = []
        self.steps = 0
        self.backtracks = 0
        self.max_depth = 0

        self.logger.info(
            "search start: %d cells, %d fixed",
            self.board.total_cells,
            len(self.board.number_index),
        )
        self._push(self.board.root)

        while self.stack:
            top = self.stack[-1]
            nxt = next(top.candidates, None)

            if nxt is not None:
                # --- Descend ---
                if self._cancelled():
                    self._unwind()
                    return self._result(STATUS_CANCELLED, start, "Search cancelled.")

                if not nxt.fixed:
                    self.board.assign(nxt, len(self.stack) + 1)
                self._push(nxt)
                self.steps += 1
                self.logger.debug("depth: %d", len(self.stack))

                if self.steps % self.progress_interval == 0:
                    self.logger.info(
                        "[search] steps = %d, backtracks = %d, depth = %d, max_depth = %d",
                        self.steps,
                        self.backtracks,
                        len(self.stack),
                        self.max_depth,
                    )
                continue

            # --- 候補切れ ---
            self.logger.debug("no additional possibilities - checking solved state")
            if self.is_solved():
                self.logger.info("solved")
                return self._result(STATUS_SOLVED, start, "Solved successfully.")

            # --- Backtrack ---
            self._pop()
            self.backtracks += 1
            self.logger.debug("backtrack to depth: %d", len(self.stack))

        self.logger.info("puzzle not solvable")
        return self._result(STATUS_UNSOLVABLE, start, "Puzzle not solvable.")

    def _result(self, status: str, start: float, message: str) -> SolveResult:
        duration_ms = int((time.time() - start) * 1000)
        self.logger.info(
            "search end in %d ms: status=%s, steps=%d, backtracks=%d",
            duration_ms,
            status,
            self.steps,
            self.backtracks,
        )
        solved = status == STATUS_SOLVED
        return SolveResult(
            status=status,
            solution=self.board.to_array() if solved else None,
            steps=self.steps,
            backtracks=self.backtracks,
            max_depth=self.max_depth,
            duration_ms=duration_ms,
            message=message,
            path=[frame.cell.location for frame in self.stack] if solved else [],
        )
