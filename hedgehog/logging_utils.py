# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- パイプライン全体の進み具合は get_logger() のロガーに INFO で出します。
- 探索の1手ごとの様子は get_search_logger() のロガーに DEBUG で出します。
  こちらは既定では何も表示しません（verbose=True のときだけ表示）。
"""

from __future__ import annotations

import logging

from .config import LOGGER_NAME, SEARCH_LOGGER_NAME, VERBOSE_SEARCH_LOGGER_NAME

_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

# 何も表示しないときのレベル（CRITICAL より上）
_SILENT_LEVEL = logging.CRITICAL + 1


def get_logger() -> logging.Logger:
    """
    hedgehog 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def get_search_logger(verbose: bool = False) -> logging.Logger:
    """
    探索エンジン（HedgehogSolver）に渡すロガーを返します。

    - verbose=False : "hedgehog.search"（何も出力しない）
    - verbose=True  : "hedgehog.search.verbose"（DEBUG まで出力）

    2つのロガーはそれぞれ最初の1回だけ設定し、以後レベルを書き換えません。
    そのため、ある呼び出しが verbose=True でも、他の solver は静かなままです。
    """
    if verbose:
        logger = logging.getLogger(VERBOSE_SEARCH_LOGGER_NAME)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(handler)
            logger.setLevel(logging.DEBUG)
            # 親ロガーへの伝播禁止（二重に表示しない）
            logger.propagate = False
        return logger

    logger = logging.getLogger(SEARCH_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(_SILENT_LEVEL)
        logger.propagate = False
    return logger
