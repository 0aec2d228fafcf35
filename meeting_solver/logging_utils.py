# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

- get_logger()              : パッケージ共通のロガー（コンソール出力）
- get_search_debug_logger() : 探索トレース専用のロガー（ファイル出力）
"""

from __future__ import annotations

import logging
import os

from .config import LOG_LEVEL, SEARCH_DEBUG_LOG_DIR

# meeting_solver パッケージ共通で使うロガー名
LOGGER_NAME = "meeting_solver"


def get_logger() -> logging.Logger:
    """
    meeting_solver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に LOG_LEVEL 以上のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)

    return logger


def get_search_debug_logger(log_dir: str = SEARCH_DEBUG_LOG_DIR) -> logging.Logger:
    """
    探索の 1 ノードごとの試行を <log_dir>/search_debug.log に書き出す logger を返します。
    コンソールには流しません。
    """
    logger = logging.getLogger(f"{LOGGER_NAME}.search_debug")
    if not logger.handlers:
        os.makedirs(log_dir, exist_ok=True)
        handler = logging.FileHandler(os.path.join(log_dir, "search_debug.log"), encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
    return logger
