# -*- coding: utf-8 -*-
"""
制約伝播（ドメインの絞り込み）を行うモジュールです。

- node_consistency : 単項制約だけを使って、各会議のドメインから
                     条件を満たさない候補日を取り除く（1パス）
- arc_consistency  : 二項制約を使った AC-3。
                     「相手側に1つも支持値がない候補日」を取り除き、
                     ドメインが縮んだら影響を受けるアークを再検査する

どちらもドメインのリストをその場で書き換えます。
ドメインが空になるのは正常な状態で、その場合は探索側が「解なし」を返します。
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Mapping, Set, Tuple

from ..logging_utils import get_logger
from ..types import Arc, DateConstraint
from .domains import MeetingDomain

logger = get_logger()


def split_by_arity(
    constraints: Iterable[DateConstraint],
) -> Tuple[List[DateConstraint], List[DateConstraint]]:
    """
    制約を（単項, 二項）に分けて返します。

    どちらのリストも sort_key() 順に並んでいます。
    """
    unary: List[DateConstraint] = []
    binary: List[DateConstraint] = []
    for c in sorted(set(constraints), key=DateConstraint.sort_key):
        if c.is_unary:
            unary.append(c)
        else:
            binary.append(c)
    return unary, binary


# ======================================================================
# Node consistency
# ======================================================================

def node_consistency(
    domains: List[MeetingDomain],
    constraints: Iterable[DateConstraint],
) -> int:
    """
    単項制約でドメインを絞り込みます。

    Parameters
    ----------
    domains : list[MeetingDomain]
        i 番目が会議 i のドメイン。その場で書き換えます。
    constraints : iterable of DateConstraint
        単項・二項が混在していてよい（単項だけを処理します）。

    Returns
    -------
    int
        取り除いた候補日の総数。
    """
    unary, _ = split_by_arity(constraints)

    removed = 0
    for c in unary:
        dom = domains[c.l_val]
        # スナップショットを回しながら元の集合から消す
        for d in list(dom):
            if not c.is_satisfied_by(d, c.r_val):  # type: ignore[arg-type]
                dom.remove(d)
                removed += 1

    logger.debug(
        "node_consistency: %d unary constraint(s), removed %d candidate(s)",
        len(unary), removed,
    )
    return removed


# ======================================================================
# Arc consistency (AC-3)
# ======================================================================

def build_arcs(constraints: Iterable[DateConstraint]) -> List[Arc]:
    """
    二項制約ごとに、向きの異なる2本のアークを作ります。

    - (l_val -> r_val, c)
    - (r_val -> l_val, c.reverse())
    """
    _, binary = split_by_arity(constraints)

    arcs: List[Arc] = []
    seen: Set[Arc] = set()
    for c in binary:
        rev = c.reverse()
        for arc in (Arc(c.l_val, c.r_val, c), Arc(rev.l_val, rev.r_val, rev)):  # type: ignore[arg-type]
            if arc not in seen:
                seen.add(arc)
                arcs.append(arc)
    return arcs


def build_neighbor_index(arcs: Iterable[Arc]) -> Dict[int, Tuple[Arc, ...]]:
    """
    head の会議番号 -> その会議を head に持つアーク一覧 の対応表を作ります。

    会議 X のドメインが縮んだら、neighbor_index[X] のアークを再検査すればよい。
    """
    index: Dict[int, List[Arc]] = {}
    for arc in arcs:
        index.setdefault(arc.head, []).append(arc)
    return {head: tuple(lst) for head, lst in index.items()}


def revise(domains: List[MeetingDomain], arc: Arc) -> bool:
    """
    arc の tail のドメインから、head 側に支持値を持たない候補日を取り除きます。

    Returns
    -------
    bool
        1つでも取り除いたら True。
    """
    tail_dom = domains[arc.tail]
    head_dom = domains[arc.head]
    c = arc.constraint

    removed = False
    for left in list(tail_dom):
        if not any(c.is_satisfied_by(left, right) for right in head_dom.values):
            tail_dom.remove(left)
            removed = True
    return removed


def arc_consistency(
    domains: List[MeetingDomain],
    constraints: Iterable[DateConstraint],
) -> int:
    """
    AC-3 で二項制約についてアーク整合にします。

    1. 二項制約ごとに双方向のアークを作る（neighbor index は呼び出し中固定）
    2. 全アークを FIFO キューに入れる
    3. キューからアークを取り出して revise()
    4. tail のドメインが縮んだら、tail を head に持つアークを再度キューへ

    ドメインは縮むだけなので、必ず停止します。
    空になったドメインも伝播を続け、つながっている会議のドメインもすべて空になります。

    Returns
    -------
    int
        revise() で実際に候補日が減った回数。
    """
    arcs = build_arcs(constraints)
    neighbors: Mapping[int, Tuple[Arc, ...]] = build_neighbor_index(arcs)

    queue = deque(arcs)
    queued: Set[Arc] = set(arcs)
    revisions = 0
    processed = 0

    while queue:
        arc = queue.popleft()
        queued.discard(arc)
        processed += 1

        if not revise(domains, arc):
            continue
        revisions += 1

        if domains[arc.tail].is_empty():
            logger.debug("arc_consistency: domain of meeting %d emptied by %s", arc.tail, arc)

        for neighbor in neighbors.get(arc.tail, ()):
            if neighbor not in queued:
                queue.append(neighbor)
                queued.add(neighbor)

    logger.debug(
        "arc_consistency: %d arc(s), processed %d, revisions %d",
        len(arcs), processed, revisions,
    )
    return revisions


def is_arc_consistent(
    domains: List[MeetingDomain],
    constraints: Iterable[DateConstraint],
) -> bool:
    """
    すべてのアークについて、tail の全候補日が head 側に支持値を持つかを返します。
    """
    for arc in build_arcs(constraints):
        head_dom = domains[arc.head]
        for left in domains[arc.tail]:
            if not any(arc.constraint.is_satisfied_by(left, right) for right in head_dom.values):
                return False
    return True
