# -*- coding: utf-8 -*-
"""
日付どうしの関係記号（==, !=, <, <=, >, >=）を扱うモジュールです。

- RELATIONS  : 記号 -> 比較関数
- CONVERSES  : 記号 -> 左右を入れ替えたときの記号（"<" なら ">"）
"""

from __future__ import annotations

import operator
from datetime import date
from typing import Callable, Dict, Union

# 日付どうし、または序数（int）どうしを比較する
Comparable = Union[date, int]

RELATIONS: Dict[str, Callable[[Comparable, Comparable], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}

# a OP b  <=>  b CONVERSES[OP] a
CONVERSES: Dict[str, str] = {
    "==": "==",
    "!=": "!=",
    "<": ">",
    "<=": ">=",
    ">": "<",
    ">=": "<=",
}

# 長い記号から順に並べておく（文字列パース時に "<=" を "<" より先に試すため）
SYMBOLS_BY_LENGTH = sorted(RELATIONS, key=len, reverse=True)


def is_relation(op: str) -> bool:
    """op が既知の関係記号かどうかを返します。"""
    return op in RELATIONS


def compare(op: str, left: Comparable, right: Comparable) -> bool:
    """
    関係記号 op で left と right を比較します。

    Raises
    ------
    KeyError
        op が未知の記号の場合。
    """
    return RELATIONS[op](left, right)


def converse(op: str) -> str:
    """左右を入れ替えても同じ意味になる記号を返します。"""
    return CONVERSES[op]
