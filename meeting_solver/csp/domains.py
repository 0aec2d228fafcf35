# -*- coding: utf-8 -*-
"""
会議ごとのドメイン（候補日集合）を扱うモジュールです。

- MeetingDomain    : 1つの会議の候補日集合
- generate_domains : 会議数ぶんのドメインを日付範囲から作る

ドメインは node / arc consistency によって縮むだけで、
増えることはありません。
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator, List, Optional, Set

import pandas as pd

from ..errors import InvalidRangeError


def date_range(start: date, end: date) -> List[date]:
    """
    start から end まで（両端を含む）の日付を1日刻みで返します。

    Raises
    ------
    InvalidRangeError
        start > end の場合。
    """
    if start > end:
        raise InvalidRangeError(start, end)
    # 秒単位にしておくと、西暦1年〜9999年のどの範囲でも扱える
    return [ts.date() for ts in pd.date_range(start=start, end=end, freq="D", unit="s")]


class MeetingDomain:
    """
    1つの会議の候補日集合です。

    反復は常に日付の昇順で行うため、
    探索で値を試す順番は実行ごとに変わりません。
    """

    def __init__(self, values: Optional[Iterable[date]] = None):
        self.values: Set[date] = set(values) if values is not None else set()

    @classmethod
    def from_range(cls, start: date, end: date) -> "MeetingDomain":
        """日付範囲 [start, end] のすべての日を候補とするドメインを作ります。"""
        return cls(date_range(start, end))

    def copy(self) -> "MeetingDomain":
        """候補日集合を複製した新しいドメインを返します。"""
        return MeetingDomain(self.values)

    def remove(self, value: date) -> None:
        """候補日を取り除きます。存在しなければ KeyError。"""
        self.values.remove(value)

    def discard(self, value: date) -> None:
        self.values.discard(value)

    def is_empty(self) -> bool:
        return not self.values

    def __iter__(self) -> Iterator[date]:
        return iter(sorted(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeetingDomain):
            return NotImplemented
        return self.values == other.values

    def __repr__(self) -> str:
        if not self.values:
            return "MeetingDomain([])"
        return f"MeetingDomain({min(self.values)}..{max(self.values)}, size={len(self)})"


def generate_domains(n: int, start: date, end: date) -> List[MeetingDomain]:
    """
    会議 0..n-1 のドメインを作ります。

    リストの i 番目が会議 i のドメインです。
    各ドメインは独立したオブジェクトなので、1つを絞り込んでも他には影響しません。
    """
    base = MeetingDomain.from_range(start, end)
    return [base.copy() for _ in range(n)]
