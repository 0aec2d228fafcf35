# -*- coding: utf-8 -*-
"""
バックトラック探索を行うモジュールです。

ざっくり流れ
------------
1. 会議 0 から順に、1段につき1つの会議へ日付を割り当てる
2. 割り当てるたびに、現在の部分割り当てで全制約をチェック
   （まだ決まっていない会議が関わる制約はスキップ）
3. 矛盾がなければ次の会議へ進み、ダメなら割り当てを外して次の候補日へ
4. 全会議が決まったら、その割り当てを解として即座に返す

探索はドメインを読むだけで書き換えません。書き換えるのは割り当てだけです。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import SEARCH_DEBUG_LOG_ENABLED, SEARCH_LOG_INTERVAL
from ..logging_utils import get_logger, get_search_debug_logger
from ..types import Assignment, DateConstraint
from .domains import MeetingDomain

logger = get_logger()


def default_assignment(n_meetings: int) -> Assignment:
    """すべて未割り当て（None）の割り当てを作ります。"""
    return [None] * n_meetings


def check_assignment(
    assignment: Sequence[Optional[date]],
    constraints: Iterable[DateConstraint],
) -> bool:
    """
    現在の（部分）割り当てが、判定可能なすべての制約を満たすかを返します。

    - 左辺の会議が未割り当ての制約はスキップ
    - 二項制約で右辺の会議が未割り当てのものもスキップ
    - 最初に見つかった違反で False を返す

    「決まるまでは満たしているとみなす」方針なので、
    部分割り当てに対して False になるのは、本当に矛盾している場合だけです。
    """
    size = len(assignment)
    for c in constraints:
        if not 0 <= c.l_val < size:
            continue
        left = assignment[c.l_val]
        if left is None:
            continue

        if c.is_binary:
            if not 0 <= c.r_val < size:  # type: ignore[operator]
                continue
            right = assignment[c.r_val]  # type: ignore[index]
            if right is None:
                continue
        else:
            right = c.r_val  # type: ignore[assignment]

        if not c.is_satisfied_by(left, right):
            return False
    return True


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    domains: Sequence[MeetingDomain]
    constraints: List[DateConstraint]
    nodes_visited: int = 0
    debug_logger: Optional[logging.Logger] = None

    @property
    def n_meetings(self) -> int:
        return len(self.domains)


def recursive_backtracking(
    ctx: SearchContext,
    assignment: Assignment,
    meeting_index: int = 0,
) -> Optional[Assignment]:
    """
    会議 meeting_index 以降に日付を割り当てます。

    Parameters
    ----------
    ctx : SearchContext
        ドメインと制約（読み取り専用）。
    assignment : list
        0..meeting_index-1 が割り当て済み、それ以降は None の割り当て。
        この関数の中で書き換えます。
    meeting_index : int
        今回割り当てる会議の番号。

    Returns
    -------
    list or None
        解が見つかれば割り当て（全スロット割り当て済み）、なければ None。
        None を返すときは、meeting_index 以降のスロットはすべて None に戻っています。
    """
    if meeting_index == ctx.n_meetings:
        return assignment

    for d in ctx.domains[meeting_index]:
        ctx.nodes_visited += 1
        if ctx.nodes_visited % SEARCH_LOG_INTERVAL == 0:
            logger.info(
                "[search] nodes_visited = %d, depth = %d/%d",
                ctx.nodes_visited, meeting_index, ctx.n_meetings,
            )

        assignment[meeting_index] = d
        ok = check_assignment(assignment, ctx.constraints)
        if ctx.debug_logger is not None:
            ctx.debug_logger.debug(
                "depth=%d meeting=%d date=%s %s",
                meeting_index, meeting_index, d, "ok" if ok else "violated",
            )

        if ok:
            result = recursive_backtracking(ctx, assignment, meeting_index + 1)
            if result is not None:
                return result

        assignment[meeting_index] = None

    return None


def backtracking_search(
    domains: Sequence[MeetingDomain],
    constraints: Iterable[DateConstraint],
) -> Tuple[Optional[List[date]], int]:
    """
    バックトラック探索のエントリポイント。

    Returns
    -------
    (assignment, nodes_visited)
        解が見つからなければ assignment は None。
    """
    ctx = SearchContext(
        domains=domains,
        constraints=sorted(set(constraints), key=DateConstraint.sort_key),
        debug_logger=get_search_debug_logger() if SEARCH_DEBUG_LOG_ENABLED else None,
    )

    result = recursive_backtracking(ctx, default_assignment(ctx.n_meetings), 0)

    logger.debug("[search] finished: nodes_visited = %d, solved = %s",
                 ctx.nodes_visited, result is not None)

    if result is None:
        return None, ctx.nodes_visited
    return list(result), ctx.nodes_visited  # type: ignore[arg-type]
