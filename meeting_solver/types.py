# -*- coding: utf-8 -*-
"""
meeting_solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。

制約（DateConstraint）は「単項」「二項」の2種類を
1つのクラスで表し、kind というタグで区別します。
フィルタ処理はタグを見て分岐するだけで、型のダウンキャストは行いません。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum, auto
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Union

from .csp.relations import compare, converse, is_relation
from .errors import InvalidConstraintError

if TYPE_CHECKING:
    from .csp.domains import MeetingDomain

# 割り当て: 会議番号 i -> 日付（未割り当てなら None）
Assignment = List[Optional[date]]


class ConstraintKind(Enum):
    """制約の種類（タグ）。"""

    UNARY = 1   # 会議 OP 基準日
    BINARY = 2  # 会議L (+ gap 日) OP 会議R


@dataclass(frozen=True)
class DateConstraint:
    """
    会議の日付に対する制約を表すクラスです。

    Attributes
    ----------
    kind : ConstraintKind
        UNARY（単項）か BINARY（二項）か。
    l_val : int
        左辺の会議番号。
    r_val : int or date
        UNARY の場合は基準日、BINARY の場合は右辺の会議番号。
    op : str
        関係記号（"==", "!=", "<", "<=", ">", ">="）。
    gap_days : int
        左辺の日付に足してから比較する日数（BINARY のみ）。
        例: gap_days=3, op="<=" なら「左の会議は右の会議の3日以上前」。

    値が同じ制約どうしは等しく、ハッシュも一致します
    （set に入れたり、キューのキーに使ったりするため）。
    """

    kind: ConstraintKind
    l_val: int
    r_val: Union[int, date]
    op: str
    gap_days: int = 0

    def __post_init__(self) -> None:
        if not is_relation(self.op):
            raise InvalidConstraintError(f"Unknown relation symbol: {self.op!r}")
        if not _is_index(self.l_val):
            raise InvalidConstraintError(
                f"Left operand must be a meeting index, got {self.l_val!r}"
            )
        if not _is_index(self.gap_days):
            raise InvalidConstraintError(
                f"gap_days must be an integer, got {self.gap_days!r}"
            )

        if self.kind is ConstraintKind.UNARY:
            r_val = self.r_val
            # pandas.Timestamp などの datetime は日付部分だけを使う
            if isinstance(r_val, datetime):
                object.__setattr__(self, "r_val", r_val.date())
            elif not isinstance(r_val, date):
                raise InvalidConstraintError(
                    f"Unary constraint needs a reference date, got {r_val!r}"
                )
            if self.gap_days != 0:
                raise InvalidConstraintError("Unary constraints cannot carry a gap")
        elif self.kind is ConstraintKind.BINARY:
            if not _is_index(self.r_val):
                raise InvalidConstraintError(
                    f"Right operand must be a meeting index, got {self.r_val!r}"
                )
        else:
            raise InvalidConstraintError(f"Unknown constraint kind: {self.kind!r}")

    @property
    def arity(self) -> int:
        """制約の項数（1 または 2）。"""
        return self.kind.value

    @property
    def is_unary(self) -> bool:
        return self.kind is ConstraintKind.UNARY

    @property
    def is_binary(self) -> bool:
        return self.kind is ConstraintKind.BINARY

    @property
    def operands(self) -> Tuple[int, ...]:
        """この制約が参照する会議番号のタプル。"""
        if self.is_binary:
            return (self.l_val, self.r_val)  # type: ignore[return-value]
        return (self.l_val,)

    def is_satisfied_by(self, left: date, right: date) -> bool:
        """
        left（左辺の候補日）と right（右辺の候補日 or 基準日）で
        制約が成り立つかを返します。

        gap_days を足すと date.max / date.min を越えることがあるので、
        日付ではなく序数（toordinal）で比較します。
        """
        if self.gap_days:
            return compare(self.op, left.toordinal() + self.gap_days, right.toordinal())
        return compare(self.op, left, right)

    def reverse(self) -> "DateConstraint":
        """
        左右を入れ替えた同値な二項制約を返します。

        l + gap OP r  <=>  r - gap CONVERSE(OP) l

        2回 reverse() すると元の制約と等しくなります。
        """
        if not self.is_binary:
            raise InvalidConstraintError("Only binary constraints can be reversed")
        return DateConstraint(
            kind=ConstraintKind.BINARY,
            l_val=self.r_val,  # type: ignore[arg-type]
            r_val=self.l_val,
            op=converse(self.op),
            gap_days=-self.gap_days,
        )

    def sort_key(self) -> Tuple[int, int, int, str, int]:
        """
        制約を決定的に並べるためのキー。

        set の反復順に依存せず、フィルタや探索の結果を再現可能にするために使います。
        """
        if self.is_unary:
            right = self.r_val.toordinal()  # type: ignore[union-attr]
        else:
            right = self.r_val  # type: ignore[assignment]
        return (self.arity, self.l_val, right, self.op, self.gap_days)

    def __str__(self) -> str:
        if self.is_unary:
            return f"{self.l_val} {self.op} {self.r_val.isoformat()}"  # type: ignore[union-attr]
        if self.gap_days > 0:
            return f"{self.l_val} + {self.gap_days} {self.op} {self.r_val}"
        if self.gap_days < 0:
            return f"{self.l_val} - {-self.gap_days} {self.op} {self.r_val}"
        return f"{self.l_val} {self.op} {self.r_val}"


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def unary(index: int, reference: date, op: str) -> DateConstraint:
    """単項制約「会議 index OP reference」を作ります。"""
    return DateConstraint(ConstraintKind.UNARY, index, reference, op)


def binary(left: int, right: int, op: str, gap_days: int = 0) -> DateConstraint:
    """二項制約「会議 left (+ gap_days 日) OP 会議 right」を作ります。"""
    return DateConstraint(ConstraintKind.BINARY, left, right, op, gap_days)


@dataclass(frozen=True)
class Arc:
    """
    AC-3 で使う有向アーク（tail -> head）です。

    constraint.is_satisfied_by(tail の候補日, head の候補日) の順で評価します。
    tail, head, constraint がすべて等しいときに等しいとみなします。
    """

    tail: int
    head: int
    constraint: DateConstraint

    def __str__(self) -> str:
        return f"({self.tail} -> {self.head})"


class SolveStatus(Enum):
    """探索の結果。"""

    SOLVED = auto()       # すべての制約を満たす割り当てが見つかった
    NO_SOLUTION = auto()  # 探索し尽くしても解がなかった


@dataclass
class ScheduleResult:
    """
    solve_schedule() の結果を表すクラスです。

    Attributes
    ----------
    status : SolveStatus
        探索結果。
    assignment : list[date] or None
        会議番号順の日付のリスト。解がなければ None。
        会議数 0 の場合は空リスト（NO_SOLUTION とは区別されます）。
    range_start, range_end : date
        候補日の範囲（両端を含む）。
    domains : list[MeetingDomain]
        node / arc consistency を適用した後のドメイン。
    domain_sizes : dict[str, list[int]]
        各段階（"initial", "node", "arc"）でのドメインサイズ。
    nodes_visited : int
        バックトラック探索で試した候補日の数。
    solve_time_ms : float
        solve にかかった時間（ミリ秒）。
    """

    status: SolveStatus
    assignment: Optional[List[date]]
    range_start: date
    range_end: date
    domains: List["MeetingDomain"] = field(default_factory=list)
    domain_sizes: Dict[str, List[int]] = field(default_factory=dict)
    nodes_visited: int = 0
    solve_time_ms: float = 0.0

    @property
    def is_solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def n_meetings(self) -> int:
        return len(self.domains)
