# -*- coding: utf-8 -*-
"""
hedgehog solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

import numpy as np


class Alignment(str, Enum):
    """
    チャンク同士の「揃え方」を表します。

    - ROW  : 同じ行番号のマス同士が隣接
    - COL  : 同じ列番号のマス同士が隣接
    - TUBE : 同じ行番号かつ同じ列番号のマス同士だけが隣接
    """

    ROW = "row"
    COL = "col"
    TUBE = "tube"


@dataclass(frozen=True)
class Location:
    """マスの座標 (chunk, row, col) です。"""

    chunk: int
    row: int
    col: int


@dataclass(frozen=True)
class Adjacency:
    """
    隣接表の1エントリです。

    Attributes
    ----------
    chunk : int
        隣接先のチャンク番号。
    alignment : Alignment
        隣接先チャンクとの揃え方。
    """

    chunk: int
    alignment: Alignment


@dataclass(eq=False)
class Cell:
    """
    盤面上の1マスを表すクラスです。

    Attributes
    ----------
    location : Location
        マスの座標。
    num : int or None
        割り当て済みの番号。未割り当てなら None。
    fixed : bool
        入力パズルで最初から番号が入っていたマスなら True。
        固定マスは探索中に変更されません。

    eq=False なので、同じ座標でも別オブジェクトなら別のマスとして扱います
    （Board が各座標につき1つだけ Cell を作るので問題ありません）。
    """

    location: Location
    num: Optional[int] = None
    fixed: bool = False

    @property
    def assigned(self) -> bool:
        return self.num is not None

    def __repr__(self) -> str:
        loc = self.location
        return f"Cell({loc.chunk},{loc.row},{loc.col}={self.num})"


@dataclass
class Frame:
    """
    バックトラック用スタックの1段です。

    置いたマスと、その次の番号の候補（途中まで消費されたイテレータ）を組にします。
    """

    cell: Cell
    candidates: Iterator[Cell]


@dataclass
class SolveResult:
    """
    探索結果を表すクラスです。

    Attributes
    ----------
    status : str
        "solved" / "unsolvable" / "cancelled" のいずれか。
    solution : numpy.ndarray or None
        解けた場合は shape = (chunks, rows, cols) の完成盤面。
    steps : int
        descend（マスに番号を置いてスタックを積んだ）回数。
    backtracks : int
        スタックを戻した回数。
    max_depth : int
        探索中に到達した最大の深さ。
    duration_ms : int
        探索にかかった時間（ミリ秒）。
    message : str
        人が読むための短い説明。
    path : list of Location
        解けた場合、番号 1..N を置いた順のマス座標（スタックの中身）。
    """

    status: str
    solution: Optional[np.ndarray]
    steps: int = 0
    backtracks: int = 0
    max_depth: int = 0
    duration_ms: int = 0
    message: str = ""
    path: List[Location] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.status == STATUS_SOLVED


STATUS_SOLVED = "solved"
STATUS_UNSOLVABLE = "unsolvable"
STATUS_CANCELLED = "cancelled"
