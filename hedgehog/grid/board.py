# -*- coding: utf-8 -*-
"""
盤面（Board）を表すモジュールです。

Board は次の2つの索引を持ちます。
- 位置索引 : (chunk, row, col) → Cell（numpy のオブジェクト配列）
- 番号索引 : 割り当て済みの番号 → Cell（dict）

探索中に盤面を書き換えるのは assign() と unassign() だけで、
assign(cell, n) のあとに unassign(cell) を呼ぶと、マスも番号索引も元に戻ります。
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

import numpy as np

from ..config import BLANK
from ..errors import BoardStateError, InvalidPuzzleError
from ..types import Cell, Location


class Board:
    """
    パズル盤面を保持するクラスです。

    Parameters
    ----------
    grid : numpy.ndarray
        :func:`hedgehog.grid.parser.normalize_puzzle` で検査済みの
        shape = (chunks, rows, cols) の整数配列。

    Raises
    ------
    InvalidPuzzleError
        同じ固定番号が複数ある、または 1 の入ったマスがないとき。
    """

    def __init__(self, grid: np.ndarray) -> None:
        chunks, rows, cols = grid.shape
        self.shape: Tuple[int, int, int] = (chunks, rows, cols)
        self.total_cells: int = chunks * rows * cols

        self.cells = np.empty(self.shape, dtype=object)
        self.number_index: Dict[int, Cell] = {}
        self.root: Optional[Cell] = None

        for (c, r, k), value in np.ndenumerate(grid):
            value = int(value)
            fixed = value != BLANK
            cell = Cell(
                location=Location(c, r, k),
                num=value if fixed else None,
                fixed=fixed,
            )
            self.cells[c, r, k] = cell
            if fixed:
                if value in self.number_index:
                    raise InvalidPuzzleError(
                        f"duplicate fixed number {value} at {(c, r, k)} and "
                        f"{self.number_index[value]!r}"
                    )
                self.number_index[value] = cell
                if value == 1:
                    self.root = cell

        if self.root is None:
            raise InvalidPuzzleError("board has no root cell (number 1)")

    @property
    def chunk_count(self) -> int:
        return self.shape[0]

    @property
    def rows(self) -> int:
        return self.shape[1]

    @property
    def cols(self) -> int:
        return self.shape[2]

    def cell_at(self, chunk: int, row: int, col: int) -> Cell:
        return self.cells[chunk, row, col]

    def iter_cells(self) -> Iterator[Cell]:
        """chunk → row → col の順（走査順）に全マスを返します。"""
        return iter(self.cells.ravel())

    def cell_with_number(self, n: int) -> Optional[Cell]:
        return self.number_index.get(n)

    def is_assigned(self, cell: Cell) -> bool:
        return cell.num is not None

    def is_full(self) -> bool:
        """全マスに番号が入っていれば True。"""
        return len(self.number_index) == self.total_cells

    def assign(self, cell: Cell, number: int) -> None:
        """
        未割り当てのマスに番号を置き、番号索引に登録します。

        Raises
        ------
        BoardStateError
            マスがすでに割り当て済み、またはその番号が別のマスで使用中のとき。
        """
        if cell.num is not None:
            raise BoardStateError(f"{cell!r} is already assigned")
        if number in self.number_index:
            raise BoardStateError(
                f"number {number} is already held by {self.number_index[number]!r}"
            )
        cell.num = number
        self.number_index[number] = cell

    def unassign(self, cell: Cell) -> None:
        """
        マスの番号を外し、番号索引から削除します。

        固定マスに対して呼ぶのはプログラムの誤りなので BoardStateError を送出します。
        """
        if cell.fixed:
            raise BoardStateError(f"cannot unassign fixed {cell!r}")
        if cell.num is None:
            raise BoardStateError(f"{cell!r} is not assigned")
        del self.number_index[cell.num]
        cell.num = None

    def to_array(self) -> np.ndarray:
        """現在の盤面を int64 配列で返します（未割り当ては BLANK）。"""
        out = np.full(self.shape, BLANK, dtype=np.int64)
        for cell in self.iter_cells():
            if cell.num is not None:
                loc = cell.location
                out[loc.chunk, loc.row, loc.col] = cell.num
        return out

    def __repr__(self) -> str:
        return (
            f"Board(shape={self.shape}, assigned={len(self.number_index)}/{self.total_cells})"
        )
