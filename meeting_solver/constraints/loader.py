# -*- coding: utf-8 -*-
"""
制約を文字列・CSV から読み込むモジュールです。

制約式の書き方：
- 単項: "<会議> <記号> <日付(ISO)>"             例: "0 != 2024-05-01"
- 二項: "<会議> <記号> <会議>"                   例: "0 < 1"
- 二項（日数つき）: "<会議> +|- <日数> <記号> <会議>"
                                                例: "0 + 3 <= 1"
  （会議0の3日後が会議1以前 = 会議0は会議1の3日以上前）

CSV には必ず 'constraint' 列（config.CONSTRAINT_COLUMN）がある前提です。
"""

from __future__ import annotations

import re
from datetime import date
from pathlib import Path
from typing import List

import pandas as pd

from ..config import CONSTRAINT_COLUMN
from ..csp.relations import SYMBOLS_BY_LENGTH
from ..errors import ConstraintParseError
from ..types import DateConstraint, binary, unary

_OP_PATTERN = "|".join(re.escape(s) for s in SYMBOLS_BY_LENGTH)

CONSTRAINT_RE = re.compile(
    r"^\s*(?P<left>[0-9]+)"
    r"(?:\s*(?P<sign>[+-])\s*(?P<gap>[0-9]+))?"
    rf"\s*(?P<op>{_OP_PATTERN})\s*"
    r"(?P<right>\S+)\s*$"
)


def parse_constraint(text: str) -> DateConstraint:
    """
    制約式の文字列を DateConstraint に変換します。

    例:
    - "0 < 1"            -> binary(0, 1, "<")
    - "0 + 3 <= 1"       -> binary(0, 1, "<=", gap_days=3)
    - "2 != 2024-05-01"  -> unary(2, date(2024, 5, 1), "!=")

    Raises
    ------
    ConstraintParseError
        書式に合わない場合。
    """
    if not isinstance(text, str):
        raise ConstraintParseError(f"Constraint must be a string, got {text!r}")

    m = CONSTRAINT_RE.match(text)
    if not m:
        raise ConstraintParseError(f"Cannot parse constraint: {text!r}")

    left = int(m.group("left"))
    op = m.group("op")
    right = m.group("right")

    gap = 0
    if m.group("gap") is not None:
        gap = int(m.group("gap"))
        if m.group("sign") == "-":
            gap = -gap

    if right.isascii() and right.isdecimal():
        return binary(left, int(right), op, gap_days=gap)

    try:
        ref = date.fromisoformat(right)
    except ValueError as e:
        raise ConstraintParseError(
            f"Right operand must be a meeting index or ISO date: {text!r}"
        ) from e

    if gap:
        raise ConstraintParseError(f"Unary constraints cannot carry a gap: {text!r}")
    return unary(left, ref, op)


def constraints_from_frame(df: pd.DataFrame) -> List[DateConstraint]:
    """
    'constraint' 列を持つ DataFrame から制約のリストを作ります。

    空欄（NaN）の行は無視し、同じ制約が重複していれば1つにまとめます。
    """
    if CONSTRAINT_COLUMN not in df.columns:
        raise ValueError(f"Constraint table must have a '{CONSTRAINT_COLUMN}' column.")

    texts = df[CONSTRAINT_COLUMN].dropna().astype(str).str.strip()
    texts = texts[texts != ""]

    out: List[DateConstraint] = []
    seen = set()
    for text in texts:
        c = parse_constraint(text)
        if c not in seen:
            seen.add(c)
            out.append(c)
    return out


def load_constraints(path: str | Path) -> List[DateConstraint]:
    """
    制約 CSV を読み込み、DateConstraint のリストにして返します。

    Parameters
    ----------
    path : str or Path
        CSV ファイルのパス。

    Returns
    -------
    list[DateConstraint]
        ファイル内の出現順に並んだ制約（重複は除く）。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Constraint CSV not found: {p}")

    df = pd.read_csv(p, encoding="utf-8-sig", dtype=str)
    return constraints_from_frame(df)
