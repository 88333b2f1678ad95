# -*- coding: utf-8 -*-
"""
hedgehog で使う例外クラスです。

- 入力が壊れている場合は InvalidPuzzleError（探索前に検出）
- 盤面の操作を誤った場合は BoardStateError（プログラムのバグ）

「解けない」は例外ではなく、SolveResult.status で表します。
"""

from __future__ import annotations


class InvalidPuzzleError(ValueError):
    """入力パズルの形や値が不正なときに送出されます。"""


class TopologyError(InvalidPuzzleError):
    """チャンク数・バリエーション・隣接表が扱えないときに送出されます。"""


class BoardStateError(RuntimeError):
    """固定マスの解除など、Board への不正な操作で送出されます。"""
