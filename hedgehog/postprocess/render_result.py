# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List

import numpy as np
import pandas as pd

from ..grid.board import Board
from ..types import SolveResult


def format_grid(grid: np.ndarray) -> str:
    """
    盤面をテキストにします。

    1行につき1行分のマスを "[a, b, c]" の形で並べ、チャンクの間は空行で区切ります。
    """
    width = max(len(str(int(v))) for v in grid.ravel())
    lines: List[str] = []
    for chunk in grid:
        for row in chunk:
            lines.append("[" + ", ".join(str(int(v)).rjust(width) for v in row) + "]")
        lines.append("")
    return "\n".join(lines)


def solution_to_frame(grid: np.ndarray) -> pd.DataFrame:
    """
    完成盤面を縦持ち（chunk, row, col, num）の DataFrame に変換します。

    番号順に並べるので、上から読むとそのまま 1 → N の経路になります。
    """
    chunks, rows, cols = np.indices(grid.shape)
    df = pd.DataFrame(
        {
            "chunk": chunks.ravel(),
            "row": rows.ravel(),
            "col": cols.ravel(),
            "num": grid.ravel(),
        }
    )
    return df.sort_values("num", kind="stable").reset_index(drop=True)


def build_sequence(result: SolveResult) -> List[Dict[str, int]]:
    """番号 → 座標の対応表を作る"""
    return [
        {"num": i, "chunk": loc.chunk, "row": loc.row, "col": loc.col}
        for i, loc in enumerate(result.path, start=1)
    ]


def build_result(board: Board, result: SolveResult) -> Dict[str, Any]:
    """
    API や CLI にそのまま返せる dict を作ります（numpy / DataFrame は含めない）。
    """
    solved_board = result.solution.tolist() if result.solution is not None else None

    return {
        "status": result.status,
        "message": result.message,
        "solved_board": solved_board,
        "sequence": build_sequence(result),
        "shape": board.shape,
        "stats": {
            "steps": result.steps,
            "backtracks": result.backtracks,
            "max_depth": result.max_depth,
            "duration_ms": result.duration_ms,
        },
    }
