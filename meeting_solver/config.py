# -*- coding: utf-8 -*-
"""
meeting_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- ログの出力レベル
- 探索の途中経過を出力する間隔
- 探索トレース（デバッグログ）の有無と保存場所
- 制約 CSV の列名
などを簡単に変更できます。
"""

from __future__ import annotations

import os

# ==== ログ関連 =============================================================

# solver 全体のログレベル。環境変数で上書きできます。
LOG_LEVEL: str = os.getenv("MEETING_SOLVER_LOG_LEVEL", "INFO")

# 探索トレース（1ノードごとのログ）をファイルに出力するかどうか。
# 大きな問題だとログが膨大になるので、普段は False にしておきます。
SEARCH_DEBUG_LOG_ENABLED: bool = os.getenv("MEETING_SOLVER_SEARCH_DEBUG", "0") == "1"

# 探索トレースの保存ディレクトリ
SEARCH_DEBUG_LOG_DIR: str = "logs"

# ==== 探索関連 =============================================================

# バックトラック探索で、何ノードごとに途中経過を INFO 出力するか。
SEARCH_LOG_INTERVAL: int = 1000

# ==== 入出力関連 ===========================================================

# 制約 CSV で、制約式が入っている列の名前
# 例: "0 < 1", "0 + 3 <= 1", "2 != 2024-05-01"
CONSTRAINT_COLUMN: str = "constraint"

# 日付の文字列表現（結果表示・API 応答で使用）
DATE_FORMAT: str = "%Y-%m-%d"
