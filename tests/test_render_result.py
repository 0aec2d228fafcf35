"""
Tests for result rendering helpers.
"""

import json

import numpy as np

from meeting_solver import binary, solve_schedule, unary
from meeting_solver.csp.domains import MeetingDomain
from meeting_solver.postprocess.render_result import (
    build_domain_grid,
    build_result,
    build_schedule_rows,
    domains_to_frame,
    schedule_to_frame,
)

from conftest import day


def test_schedule_rows():
    rows = build_schedule_rows([day(0), day(3)])
    assert rows == [
        {"meeting": 0, "date": "2024-05-01", "weekday": "Wed"},
        {"meeting": 1, "date": "2024-05-04", "weekday": "Sat"},
    ]


def test_schedule_rows_without_solution():
    assert build_schedule_rows(None) == []


def test_domain_grid():
    domains = [MeetingDomain([day(0), day(2)]), MeetingDomain()]
    grid = build_domain_grid(domains, day(0), day(2))
    assert grid.shape == (2, 3)
    assert grid.dtype == np.bool_
    assert grid[0].tolist() == [True, False, True]
    assert not grid[1].any()


def test_build_result_is_json_serializable():
    result = solve_schedule(2, day(0), day(4), {binary(0, 1, "<"), unary(1, day(4), "==")})
    payload = build_result(result)
    assert payload["status"] == "SOLVED"
    assert payload["schedule"][1]["date"] == "2024-05-05"
    assert payload["domain_sizes"]["arc"] == [4, 1]
    json.dumps(payload)


def test_build_result_no_solution():
    result = solve_schedule(1, day(0), day(0), {unary(0, day(0), "!=")})
    payload = build_result(result)
    assert payload["status"] == "NO_SOLUTION"
    assert payload["schedule"] == []


def test_frames():
    result = solve_schedule(2, day(0), day(2), {binary(0, 1, ">")})
    schedule = schedule_to_frame(result)
    assert list(schedule.columns) == ["meeting", "date", "weekday"]
    assert schedule["date"].tolist() == ["2024-05-02", "2024-05-01"]

    dom_df = domains_to_frame(result)
    assert dom_df.shape == (2, 3)
    assert dom_df.loc[0, "2024-05-01"] == False  # noqa: E712
    assert dom_df.loc[1, "2024-05-03"] == False  # noqa: E712


def test_schedule_frame_without_solution():
    result = solve_schedule(1, day(0), day(0), {unary(0, day(0), "<")})
    assert schedule_to_frame(result).empty
