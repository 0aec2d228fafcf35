# -*- coding: utf-8 -*-
"""
meeting_solver パッケージの入口となるモジュールです。

    from meeting_solver import solve, binary, unary

と呼び出されることを想定しています。

ここでは、会議数・日付範囲・制約集合を受け取り、
1. 入力チェック（日付範囲・制約が参照する会議番号）
2. 会議ごとのドメイン生成
3. node consistency（単項制約による絞り込み）
4. arc consistency（二項制約による AC-3）
5. バックトラック探索
を順番に呼び出します。
"""

from __future__ import annotations

import time
from datetime import date
from typing import Iterable, List, Optional

from .csp.domains import MeetingDomain, generate_domains
from .csp.propagation import arc_consistency, node_consistency
from .csp.search import backtracking_search
from .errors import (
    ConstraintParseError,
    InvalidConstraintError,
    InvalidConstraintOperandError,
    InvalidRangeError,
    MeetingSolverError,
)
from .logging_utils import get_logger
from .types import (
    Arc,
    ConstraintKind,
    DateConstraint,
    ScheduleResult,
    SolveStatus,
    binary,
    unary,
)

__all__ = [
    "solve",
    "solve_schedule",
    "validate_inputs",
    "DateConstraint",
    "ConstraintKind",
    "Arc",
    "MeetingDomain",
    "ScheduleResult",
    "SolveStatus",
    "unary",
    "binary",
    "MeetingSolverError",
    "InvalidRangeError",
    "InvalidConstraintError",
    "InvalidConstraintOperandError",
    "ConstraintParseError",
]

logger = get_logger()


def validate_inputs(
    n_meetings: int,
    range_start: date,
    range_end: date,
    constraints: Iterable[DateConstraint],
) -> None:
    """
    探索を始める前に入力をチェックします。

    Raises
    ------
    ValueError
        n_meetings が負の場合。
    InvalidRangeError
        range_start > range_end の場合。
    InvalidConstraintOperandError
        制約が [0, n_meetings) の外の会議番号を参照している場合。
    """
    if n_meetings < 0:
        raise ValueError(f"n_meetings must be >= 0, got {n_meetings}")
    if range_start > range_end:
        raise InvalidRangeError(range_start, range_end)

    for c in constraints:
        if not isinstance(c, DateConstraint):
            raise InvalidConstraintError(f"Not a DateConstraint: {c!r}")
        for idx in c.operands:
            if not 0 <= idx < n_meetings:
                raise InvalidConstraintOperandError(c, idx, n_meetings)


def solve_schedule(
    n_meetings: int,
    range_start: date,
    range_end: date,
    constraints: Iterable[DateConstraint],
) -> ScheduleResult:
    """
    会議の日程を決めるメイン関数。

    Parameters
    ----------
    n_meetings : int
        会議の数。会議は 0..n_meetings-1 の番号で表します。
    range_start, range_end : date
        すべての会議に共通の候補日の範囲（両端を含む）。
    constraints : iterable of DateConstraint
        単項・二項の制約。

    Returns
    -------
    ScheduleResult
        status が SOLVED なら assignment に会議番号順の日付が入ります。
    """
    start_time = time.perf_counter()
    constraints = frozenset(constraints)
    validate_inputs(n_meetings, range_start, range_end, constraints)

    logger.info(
        "=== solve START: meetings=%d, range=%s..%s, constraints=%d ===",
        n_meetings, range_start, range_end, len(constraints),
    )

    # 1) ドメイン生成
    domains = generate_domains(n_meetings, range_start, range_end)
    domain_sizes = {"initial": [len(d) for d in domains]}

    # 2) 単項制約
    node_consistency(domains, constraints)
    domain_sizes["node"] = [len(d) for d in domains]

    # 3) 二項制約（AC-3）
    arc_consistency(domains, constraints)
    domain_sizes["arc"] = [len(d) for d in domains]
    logger.info("Domain sizes after filtering: %s", domain_sizes["arc"])

    # 4) 探索
    assignment, nodes_visited = backtracking_search(domains, constraints)

    status = SolveStatus.SOLVED if assignment is not None else SolveStatus.NO_SOLUTION
    solve_time = (time.perf_counter() - start_time) * 1000

    logger.info(
        "=== solve END: status=%s, nodes_visited=%d, %.1f ms ===",
        status.name, nodes_visited, solve_time,
    )

    return ScheduleResult(
        status=status,
        assignment=assignment,
        range_start=range_start,
        range_end=range_end,
        domains=domains,
        domain_sizes=domain_sizes,
        nodes_visited=nodes_visited,
        solve_time_ms=solve_time,
    )


def solve(
    n_meetings: int,
    range_start: date,
    range_end: date,
    constraints: Iterable[DateConstraint],
) -> Optional[List[date]]:
    """
    会議 0..n_meetings-1 の日付を、すべての制約を満たすように決めます。

    Returns
    -------
    list[date] or None
        会議番号順の日付のリスト。解がなければ None。
        会議数 0 の場合は空リストを返します（None とは区別されます）。
    """
    return solve_schedule(n_meetings, range_start, range_end, constraints).assignment
