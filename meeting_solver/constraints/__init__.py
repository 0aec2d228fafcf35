# -*- coding: utf-8 -*-
"""
meeting_solver.constraints パッケージ

制約の外部表現（文字列・CSV・DataFrame）を扱うサブパッケージです。
- loader.py : 制約式のパースと CSV 読み込み
"""

from .loader import constraints_from_frame, load_constraints, parse_constraint

__all__ = ["parse_constraint", "constraints_from_frame", "load_constraints"]
