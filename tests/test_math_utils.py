from __future__ import annotations

import numpy as np
import pytest

from smashcore.math_utils import (
    chi_squared_statistic,
    coset_letter_counts,
    proportions,
    small_divisors,
)


@pytest.mark.parametrize(
    "n, expected",
    [(2, []), (3, []), (4, [2]), (7, []), (12, [2, 3]), (24, [2, 3, 4]), (36, [2, 3, 4, 6])],
)
def test_small_divisors(n, expected):
    assert small_divisors(n) == expected


def test_coset_counts_skip_non_letters():
    counts = coset_letter_counts("ABA A!", 2)
    assert counts.shape == (2, 26)
    # positions 0, 2, 4 -> "A", "A", "A"; positions 1, 3, 5 -> "B", " ", "!"
    assert counts[0, 0] == 3
    assert counts[1, 1] == 1
    assert counts.sum() == 4


def test_coset_counts_ignore_lowercase_and_empty():
    assert coset_letter_counts("abc", 1).sum() == 0
    assert coset_letter_counts("", 3).shape == (3, 26)


def test_coset_counts_reject_zero_columns():
    with pytest.raises(ValueError):
        coset_letter_counts("ABC", 0)


def test_proportions_leave_empty_rows_zero():
    props, totals = proportions(np.array([[2, 2], [0, 0]]))
    assert totals.tolist() == [4, 0]
    assert props.tolist() == [[0.5, 0.5], [0.0, 0.0]]


def test_chi_squared():
    expected = np.array([0.5, 0.25, 0.25])
    assert chi_squared_statistic(expected, expected) == 0.0
    assert chi_squared_statistic([1.0, 0.0, 0.0], expected) == pytest.approx(1.0)
    with pytest.raises(ValueError):
        chi_squared_statistic([1.0], expected)
    with pytest.raises(ValueError):
        chi_squared_statistic([1.0, 0.0], [1.0, 0.0])
