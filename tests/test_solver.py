"""
Tests for the solve() / solve_schedule() entry points.

pytest tests/test_solver.py -v
"""

import random
from datetime import date

import pytest

from meeting_solver import (
    InvalidConstraintOperandError,
    InvalidRangeError,
    ScheduleResult,
    SolveStatus,
    binary,
    solve,
    solve_schedule,
    unary,
)
from meeting_solver.csp.relations import RELATIONS
from meeting_solver.csp.search import check_assignment

from conftest import all_satisfied, brute_force, day


class TestScenarios:
    def test_strictly_before(self, five_days):
        start, end = five_days
        result = solve(2, start, end, {binary(0, 1, "<")})
        assert result is not None
        assert len(result) == 2
        assert result[0] < result[1]
        assert start <= result[0] <= end and start <= result[1] <= end

    def test_unary_empties_domain(self):
        assert solve(1, day(0), day(0), {unary(0, day(0), "!=")}) is None

    def test_cycle_has_no_solution(self, five_days):
        start, end = five_days
        cs = {binary(0, 1, "<"), binary(1, 2, "<"), binary(2, 0, "<")}
        result = solve_schedule(3, start, end, cs)
        assert result.status is SolveStatus.NO_SOLUTION
        assert result.assignment is None
        assert result.domain_sizes["arc"] == [0, 0, 0]

    def test_zero_meetings(self, five_days):
        start, end = five_days
        result = solve(0, start, end, set())
        assert result == []
        assert result is not None

    def test_zero_meetings_is_solved(self, five_days):
        result = solve_schedule(0, *five_days, [])
        assert result.is_solved
        assert result.assignment == []

    def test_exact_gap_and_fixed_date(self):
        cs = {
            unary(0, day(2), "=="),
            binary(0, 1, "==", gap_days=3),
            binary(2, 1, ">"),
        }
        assert solve(3, day(0), day(9), cs) == [day(2), day(5), day(6)]

    def test_no_constraints(self, five_days):
        assert solve(3, *five_days, set()) == [day(0), day(0), day(0)]


class TestCalendarEdges:
    def test_gap_at_end_of_calendar(self):
        cs = {binary(0, 1, "<=", gap_days=1)}
        assert solve(2, date(9999, 12, 30), date.max, cs) == [date(9999, 12, 30), date.max]

    def test_gap_at_start_of_calendar(self):
        cs = {binary(0, 1, ">=", gap_days=-1)}
        assert solve(2, date.min, date(1, 1, 2), cs) == [date(1, 1, 2), date.min]

    def test_gap_past_end_of_calendar_has_no_solution(self):
        cs = {binary(0, 1, "==", gap_days=5)}
        assert solve(2, date(9999, 12, 30), date.max, cs) is None

    def test_unary_at_calendar_bounds(self):
        cs = {unary(0, date.max, "=="), unary(1, date.min, "!=")}
        assert solve(2, date(9999, 12, 30), date.max, cs) == [date.max, date(9999, 12, 30)]


class TestValidation:
    def test_invalid_range(self):
        with pytest.raises(InvalidRangeError):
            solve(1, day(3), day(0), set())

    def test_single_day_range_is_valid(self):
        assert solve(1, day(0), day(0), set()) == [day(0)]

    def test_operand_out_of_range(self, five_days):
        with pytest.raises(InvalidConstraintOperandError) as exc:
            solve(2, *five_days, {binary(0, 2, "<")})
        assert exc.value.index == 2
        assert exc.value.n_meetings == 2

    def test_negative_operand(self, five_days):
        with pytest.raises(InvalidConstraintOperandError):
            solve(2, *five_days, {unary(-1, day(0), "==")})

    def test_negative_meeting_count(self, five_days):
        with pytest.raises(ValueError):
            solve(-1, *five_days, set())

    def test_accepts_any_iterable(self, five_days):
        assert solve(2, *five_days, [binary(0, 1, ">")]) == [day(1), day(0)]


class TestScheduleResult:
    def test_result_fields(self, five_days):
        cs = {unary(0, day(1), ">"), binary(0, 1, "<")}
        result = solve_schedule(2, *five_days, cs)
        assert isinstance(result, ScheduleResult)
        assert result.is_solved
        assert result.n_meetings == 2
        assert result.domain_sizes["initial"] == [5, 5]
        assert result.domain_sizes["node"] == [3, 5]
        assert result.domain_sizes["arc"] == [2, 2]
        assert result.nodes_visited >= 2
        assert result.solve_time_ms >= 0.0

    def test_calls_do_not_share_state(self, five_days):
        cs = {binary(0, 1, "<")}
        first = solve_schedule(2, *five_days, cs)
        second = solve_schedule(2, *five_days, cs)
        assert first.assignment == second.assignment
        assert first.domains is not second.domains
        first.domains[0].remove(day(0))
        assert day(0) in second.domains[0]


def _random_constraints(rng, n_meetings, n_days, count):
    ops = sorted(RELATIONS)
    cs = set()
    for _ in range(count):
        if n_meetings > 1 and rng.random() < 0.7:
            left, right = rng.sample(range(n_meetings), 2)
            cs.add(binary(left, right, rng.choice(ops), gap_days=rng.randint(-2, 2)))
        else:
            cs.add(unary(rng.randrange(n_meetings), day(rng.randrange(n_days)), rng.choice(ops)))
    return cs


class TestAgainstBruteForce:
    @pytest.mark.parametrize("seed", range(40))
    def test_sound_and_complete(self, seed):
        rng = random.Random(seed)
        n_meetings = rng.randint(1, 4)
        n_days = rng.randint(1, 5)
        cs = _random_constraints(rng, n_meetings, n_days, rng.randint(0, 6))
        start, end = day(0), day(n_days - 1)

        expected = brute_force(n_meetings, start, end, cs)
        result = solve(n_meetings, start, end, cs)

        if expected is None:
            assert result is None
        else:
            # the search-time check must accept every valid full assignment
            assert check_assignment(expected, cs)
            assert result is not None
            assert all_satisfied(result, cs)

    @pytest.mark.parametrize("seed", range(10))
    def test_deterministic(self, seed):
        rng = random.Random(seed)
        cs = _random_constraints(rng, 4, 6, 6)
        first = solve(4, day(0), day(5), cs)
        second = solve(4, day(0), day(5), set(cs))
        assert first == second
