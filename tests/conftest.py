"""
Shared fixtures and helpers for meeting_solver tests.
"""

import itertools
import operator
from datetime import date, timedelta

import pytest


D0 = date(2024, 5, 1)

# Reference relation table, kept separate from the package's own
_OPS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


def day(i):
    """D0 + i days."""
    return D0 + timedelta(days=i)


def holds(c, left, right):
    """Evaluates c on concrete dates using day ordinals: left + gap OP right."""
    return _OPS[c.op](left.toordinal() + c.gap_days, right.toordinal())


def all_satisfied(assignment, constraints):
    for c in constraints:
        left = assignment[c.l_val]
        right = assignment[c.r_val] if c.is_binary else c.r_val
        if not holds(c, left, right):
            return False
    return True


def brute_force(n_meetings, start, end, constraints):
    """Exhaustive search without any pruning; returns the first solution or None."""
    days = []
    d = start
    while d <= end:
        days.append(d)
        d += timedelta(days=1)
    for combo in itertools.product(days, repeat=n_meetings):
        if all_satisfied(combo, constraints):
            return list(combo)
    return None


@pytest.fixture
def five_days():
    return day(0), day(4)
