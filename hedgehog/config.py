# -*- coding: utf-8 -*-
"""
hedgehog 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 空白マスを表す値
- 盤面のバリエーション（plain / extended）
- 探索ステップ数の上限
- ログ出力の細かさ
などを簡単に変更できます。
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

# ==== 盤面関連 =============================================================

# 入力パズルで「空白マス」を表す値
BLANK: int = -1

# ==== トポロジー関連 =======================================================

# 通常の 2x2 隣接サイクル
VARIANT_PLAIN: str = "plain"

# 対角チャンク同士をチューブ（同じ行・同じ列）で結ぶ拡張版
VARIANT_EXTENDED: str = "extended"

SUPPORTED_VARIANTS: Tuple[str, ...] = (VARIANT_PLAIN, VARIANT_EXTENDED)

DEFAULT_VARIANT: str = VARIANT_PLAIN

# build_topology() が組み込みの隣接表を持っているチャンク数。
# これ以外のチャンク数は Topology.from_descriptor() で明示的に渡します。
SUPPORTED_CHUNK_COUNTS: Tuple[int, ...] = (4,)

# ==== 探索関連 =============================================================

# 探索で何ステップ（descend の回数）まで進めるかの上限。
# None なら無制限（見つかるか、全探索が終わるまで続ける）。
MAX_SEARCH_STEPS: Optional[int] = None

# 何ステップごとに進捗ログを出すか
PROGRESS_LOG_INTERVAL: int = 100000

# ==== ログ関連 =============================================================

# hedgehog パッケージ共通で使うロガー名
LOGGER_NAME: str = "hedgehog"

# 探索エンジン用のロガー名（既定では何も出力しない）
SEARCH_LOGGER_NAME: str = "hedgehog.search"

# verbose=True のときに使う探索ロガー名（DEBUG まで出力する）
VERBOSE_SEARCH_LOGGER_NAME: str = "hedgehog.search.verbose"

# HEDGEHOG_VERBOSE=1 なら探索の詳細ログを出す
SEARCH_VERBOSE: bool = os.getenv("HEDGEHOG_VERBOSE", "0") == "1"
