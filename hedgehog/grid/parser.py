# -*- coding: utf-8 -*-
"""
入力パズルを内部表現（numpy 配列）に正規化するモジュールです。

主な役割:
- ネストしたリスト / numpy 配列 / チャンクごとの pandas.DataFrame を
  shape = (chunks, rows, cols) の int 配列に変換
- 形（長方形かどうか）や値（重複・範囲・1 の有無）を検査

ここで弾かれた入力は探索に入りません。
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, List, Sequence

import numpy as np
import pandas as pd

from ..config import BLANK
from ..errors import InvalidPuzzleError


def _chunk_rows(chunk: Any, chunk_index: int) -> List[List[Any]]:
    """1チャンク分を「行のリスト」に変換します。"""
    if isinstance(chunk, pd.DataFrame):
        return chunk.to_numpy().tolist()
    if isinstance(chunk, np.ndarray):
        if chunk.ndim != 2:
            raise InvalidPuzzleError(
                f"chunk {chunk_index} must be 2-dimensional, got ndim={chunk.ndim}"
            )
        return chunk.tolist()
    if isinstance(chunk, (str, bytes)) or not isinstance(chunk, Sequence):
        raise InvalidPuzzleError(f"chunk {chunk_index} is not a sequence of rows")

    rows = []
    for r, row in enumerate(chunk):
        if isinstance(row, np.ndarray):
            row = row.tolist()
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidPuzzleError(
                f"row {r} of chunk {chunk_index} is not a sequence of numbers"
            )
        rows.append(list(row))
    return rows


def _check_value(x: Any, where: str) -> int:
    # bool は int のサブクラスなので明示的に弾く
    if isinstance(x, bool) or not isinstance(x, Integral):
        raise InvalidPuzzleError(f"{where}: value {x!r} is not an integer")
    return int(x)


def normalize_puzzle(puzzle: Any) -> np.ndarray:
    """
    入力パズルを検査し、shape = (chunks, rows, cols) の int64 配列に変換します。

    Parameters
    ----------
    puzzle : sequence, numpy.ndarray, or sequence of pandas.DataFrame
        3次元の整数データ。``BLANK``（-1）は空白マス、それ以外は固定番号です。

    Returns
    -------
    numpy.ndarray
        検査済みの int64 配列。

    Raises
    ------
    InvalidPuzzleError
        - 3次元でない / どこかの次元が空 / 長方形でない
        - 整数以外の値、BLANK でも 1..N でもない値がある
        - 同じ固定番号が複数ある
        - 1 の入ったマスがない
    """
    if isinstance(puzzle, np.ndarray):
        if puzzle.ndim != 3:
            raise InvalidPuzzleError(
                f"puzzle must be 3-dimensional (chunk, row, col), got ndim={puzzle.ndim}"
            )
        chunks = [puzzle[i] for i in range(puzzle.shape[0])]
    elif isinstance(puzzle, (str, bytes)) or not isinstance(puzzle, Sequence):
        raise InvalidPuzzleError("puzzle must be a sequence of chunks")
    else:
        chunks = list(puzzle)

    if not chunks:
        raise InvalidPuzzleError("puzzle has no chunks")

    # --- 形の検査（全チャンクで行数・列数が同じか） ---
    grid_rows = [_chunk_rows(chunk, c) for c, chunk in enumerate(chunks)]
    n_rows = len(grid_rows[0])
    if n_rows == 0:
        raise InvalidPuzzleError("chunk 0 has no rows")
    n_cols = len(grid_rows[0][0])
    if n_cols == 0:
        raise InvalidPuzzleError("chunk 0 has no columns")

    for c, rows in enumerate(grid_rows):
        if len(rows) != n_rows:
            raise InvalidPuzzleError(
                f"chunk {c} has {len(rows)} rows, expected {n_rows}"
            )
        for r, row in enumerate(rows):
            if len(row) != n_cols:
                raise InvalidPuzzleError(
                    f"row {r} of chunk {c} has {len(row)} columns, expected {n_cols}"
                )

    # --- 値の検査 ---
    values = [
        [
            [_check_value(x, f"cell ({c}, {r}, {k})") for k, x in enumerate(row)]
            for r, row in enumerate(rows)
        ]
        for c, rows in enumerate(grid_rows)
    ]
    grid = np.array(values, dtype=np.int64)
    total = grid.size

    fixed = grid[grid != BLANK]
    bad = fixed[(fixed < 1) | (fixed > total)]
    if bad.size:
        raise InvalidPuzzleError(
            f"fixed numbers must be in 1..{total} (or {BLANK} for blank), got {sorted(set(bad.tolist()))}"
        )

    uniq, counts = np.unique(fixed, return_counts=True)
    dups = uniq[counts > 1]
    if dups.size:
        raise InvalidPuzzleError(f"duplicate fixed numbers: {dups.tolist()}")

    if 1 not in uniq:
        raise InvalidPuzzleError("puzzle has no cell holding 1 (root)")

    return grid
