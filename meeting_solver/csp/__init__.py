# -*- coding: utf-8 -*-
"""
meeting_solver.csp パッケージ

会議日程の CSP（制約充足問題）に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- relations.py   : 日付どうしの関係記号と、その逆向きの記号
- domains.py     : 会議ごとのドメイン（候補日集合）
- propagation.py : node consistency / arc consistency (AC-3)
- search.py      : バックトラック探索と部分割り当てのチェック
"""
