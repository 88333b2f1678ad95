# -*- coding: utf-8 -*-
"""
動作確認用のサンプルパズルです。

いずれも 4 チャンク（2x2）の plain トポロジー用で、空白マスは -1 です。
"""

from __future__ import annotations

from typing import Dict, List

Puzzle = List[List[List[int]]]

# 3x3 チャンクの「orchard」パズル（N = 36）
ORCHARD: Puzzle = [
    [
        [32, -1, -1],
        [36,  4, 18],
        [ 8, 24, 28],
    ],
    [
        [11, 13, -1],
        [ 1, -1,  5],
        [27, 29,  7],
    ],
    [
        [-1, -1, 17],
        [ 9, 23, 15],
        [33, 25, 19],
    ],
    [
        [ 2, 30,  6],
        [-1, -1, -1],
        [26, 34, -1],
    ],
]

# 4x4 チャンク（N = 64）
PUZZLE_22: Puzzle = [
    [
        [59, -1, -1, -1],
        [61,  3, 39,  1],
        [57, -1, 41, 55],
        [31, 45, -1, -1],
    ],
    [
        [34, 36, -1, 16],
        [62, -1, 28,  2],
        [-1, -1, -1, -1],
        [44, 52, 24, 20],
    ],
    [
        [60,  4, 40, -1],
        [-1, -1, 38, -1],
        [58, 46, -1, 22],
        [-1, 14, -1, 64],
    ],
    [
        [-1, -1, -1, -1],
        [33, 11, 25, 17],
        [ 7, -1, -1, -1],
        [63, -1, 29, -1],
    ],
]

PUZZLE_23: Puzzle = [
    [
        [-1, -1, -1, 27],
        [-1, -1, -1, -1],
        [55, 57,  5, 59],
        [-1, 17, 63, 61],
    ],
    [
        [-1, 32, -1, -1],
        [-1, -1, -1, 40],
        [58, -1, -1, -1],
        [-1, 62, 14, 64],
    ],
    [
        [-1, 18, 42, -1],
        [24,  8, -1, -1],
        [-1, -1, 34, 60],
        [-1, -1, -1, -1],
    ],
    [
        [21, 45, 43, 41],
        [51,  9, 49, -1],
        [-1, -1, 15,  1],
        [53, -1, -1, 29],
    ],
]

SAMPLES: Dict[str, Puzzle] = {
    "orchard": ORCHARD,
    "22": PUZZLE_22,
    "23": PUZZLE_23,
}
