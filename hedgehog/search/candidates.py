# -*- coding: utf-8 -*-
"""
「次の番号を置けるマス」（候補）を列挙するモジュールです。

マス ``cell`` に番号 k が入っているとき、k+1 を置けるマスを次のように求めます。

1. k+1 がすでに盤面にある（固定マス）場合
   - それが cell と隣接していれば、そのマスだけが候補
   - 隣接していなければ候補なし（1段上に戻らせる）
2. そうでなければ、cell のチャンクの隣接エントリを順に見て、
   行 / 列 / チューブで揃う未割り当てのマスをすべて候補にする

候補の並び順（隣接表の順 → チャンク内の走査順）は決定的で、
複数の解があるときにどれが最初に見つかるかを決めます。
"""

from __future__ import annotations

from typing import List, Tuple

from ..grid.board import Board
from ..grid.topology import Topology
from ..types import Alignment, Cell

# 候補がないことを表す値
NO_CANDIDATES: Tuple[Cell, ...] = ()


def candidates_after(board: Board, topology: Topology, cell: Cell) -> Tuple[Cell, ...]:
    """
    ``cell`` の次の番号を置けるマスを、毎回新しいタプルで返します。

    Parameters
    ----------
    board : Board
        現在の盤面。
    topology : Topology
        チャンク間の隣接表。
    cell : Cell
        番号が入っているマス。

    Returns
    -------
    tuple of Cell
        候補マス。空タプルなら候補なし。
    """
    if cell.num is None:
        return NO_CANDIDATES

    loc = cell.location

    # 1) 次の番号がすでに置かれている（固定マス）
    existing_next = board.cell_with_number(cell.num + 1)
    if existing_next is not None:
        if topology.adjacent(loc, existing_next.location):
            return (existing_next,)
        return NO_CANDIDATES

    # 2) 隣接チャンクの揃うマスをすべて調べる
    found: List[Cell] = []
    seen = set()
    for adj in topology.adjacents(loc.chunk):
        if adj.alignment is Alignment.ROW:
            line = [board.cell_at(adj.chunk, loc.row, k) for k in range(board.cols)]
        elif adj.alignment is Alignment.COL:
            line = [board.cell_at(adj.chunk, r, loc.col) for r in range(board.rows)]
        else:
            line = [board.cell_at(adj.chunk, loc.row, loc.col)]

        for possibility in line:
            # すでに番号の入っているマスは候補にならない
            if possibility.num is not None or possibility in seen:
                continue
            seen.add(possibility)
            found.append(possibility)

    return tuple(found)
