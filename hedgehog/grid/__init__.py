# -*- coding: utf-8 -*-
"""
hedgehog.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py   : 入力パズルの検査と numpy 配列への変換
- board.py    : マスと番号の索引を持つ Board
- topology.py : チャンク同士の隣接表と隣接判定
"""
