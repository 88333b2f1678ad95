# -*- coding: utf-8 -*-
"""
hedgehog.search パッケージ

番号の並べ方を探す処理をまとめています。
- candidates.py : 次の番号を置けるマスの列挙
- solver.py     : 明示的なスタックによるバックトラック探索
"""
