# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..config import DATE_FORMAT
from ..csp.domains import MeetingDomain, date_range
from ..types import ScheduleResult


def build_schedule_rows(
    assignment: Optional[Sequence[date]],
) -> List[Dict[str, Any]]:
    """
    会議番号 → 日付（＋曜日）の対応表を作る
    """
    if not assignment:
        return []

    items: List[Dict[str, Any]] = []
    for i, d in enumerate(assignment):
        items.append({
            "meeting": i,
            "date": d.strftime(DATE_FORMAT),
            "weekday": d.strftime("%a"),
        })
    return items


def build_domain_grid(
    domains: Sequence[MeetingDomain],
    start: date,
    end: date,
) -> np.ndarray:
    """
    絞り込み後のドメインを「会議 × 日付」の真偽値グリッドにします。

    Parameters
    ----------
    domains : list[MeetingDomain]
        i 番目が会議 i のドメイン。
    start, end : date
        列に並べる日付の範囲（両端を含む）。

    Returns
    -------
    numpy.ndarray
        shape = (会議数, 日数) の bool 配列。
        grid[i, j] が True なら、会議 i は j 日目を候補として残している。
    """
    days = date_range(start, end)
    grid = np.zeros((len(domains), len(days)), dtype=bool)

    for i, dom in enumerate(domains):
        for j, d in enumerate(days):
            if d in dom:
                grid[i, j] = True

    return grid


def domains_to_frame(result: ScheduleResult) -> pd.DataFrame:
    """build_domain_grid() の結果を、日付を列名にした DataFrame にします。"""
    grid = build_domain_grid(result.domains, result.range_start, result.range_end)
    columns = [d.strftime(DATE_FORMAT) for d in date_range(result.range_start, result.range_end)]
    return pd.DataFrame(grid, columns=columns).rename_axis("meeting")


def schedule_to_frame(result: ScheduleResult) -> pd.DataFrame:
    """解を 'meeting', 'date', 'weekday' 列の DataFrame にします（解なしなら空）。"""
    return pd.DataFrame(
        build_schedule_rows(result.assignment),
        columns=["meeting", "date", "weekday"],
    )


def build_result(result: ScheduleResult) -> Dict[str, Any]:
    """
    API などで返すための辞書を作ります（JSON にそのまま変換できる値だけを含む）。
    """
    return {
        "status": result.status.name,
        "schedule": build_schedule_rows(result.assignment),
        "domain_sizes": {k: list(v) for k, v in result.domain_sizes.items()},
        "nodes_visited": result.nodes_visited,
        "solve_time_ms": result.solve_time_ms,
    }
