# -*- coding: utf-8 -*-
"""
meeting_solver で使う例外クラスをまとめたモジュールです。

「解なし（NoSolution）」は例外ではなく、探索の結果として返します。
ここにあるのは「入力がおかしい」ことを呼び出し側に伝えるための例外だけです。
"""

from __future__ import annotations


class MeetingSolverError(Exception):
    """meeting_solver パッケージ共通の基底例外。"""


class InvalidRangeError(MeetingSolverError, ValueError):
    """日付範囲の開始日が終了日より後になっている場合に送出します。"""

    def __init__(self, range_start, range_end):
        self.range_start = range_start
        self.range_end = range_end
        super().__init__(
            f"Invalid date range: start {range_start} is after end {range_end}"
        )


class InvalidConstraintError(MeetingSolverError, ValueError):
    """制約の関係記号や被演算子の型が不正な場合に送出します。"""


class InvalidConstraintOperandError(InvalidConstraintError):
    """制約が [0, n_meetings) の外の会議番号を参照している場合に送出します。"""

    def __init__(self, constraint, index: int, n_meetings: int):
        self.constraint = constraint
        self.index = index
        self.n_meetings = n_meetings
        super().__init__(
            f"Constraint {constraint} references meeting {index}, "
            f"but only {n_meetings} meeting(s) exist"
        )


class ConstraintParseError(InvalidConstraintError):
    """制約の文字列表現を解釈できなかった場合に送出します。"""
