"""
Column Frequency Analyzer
==========================

Splits text into key columns (cosets) by character position, measures the
letter proportions of each column and scores them against expected
English frequencies with Pearson's chi-squared statistic:

    X^2 = sum_i (f_i - F_i)^2 / F_i

where f_i is the observed proportion of letter i in the column and F_i
its expected English frequency.  Lower is more English-like.

A column without letters has no proportions; its score is reported as
``+inf`` so it always ranks last instead of poisoning comparisons with
NaN.

References:
    - Pearson, K. (1900). Philosophical Magazine, 50(302), 157-175.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

import math
from typing import Mapping

import numpy as np
from numpy.typing import NDArray

from smashcore.math_utils import (
    chi_squared_statistic,
    coset_letter_counts,
    proportions,
)
from vigenere.core.alphabet import LETTER_FREQUENCIES, LETTERS, expected_vector
from vigenere.core.errors import InvalidColumnCountError
from vigenere.core.models import ColumnFrequency


class FrequencyAnalyzer:
    """Column-wise letter frequency and chi-squared scoring.

    Usage::

        analyzer = FrequencyAnalyzer()
        for column in analyzer.analyze("LXFOPVEFRNHR", columns=5):
            print(column.column, column.score)
    """

    def __init__(
        self, letter_frequencies: Mapping[str, float] = LETTER_FREQUENCIES
    ) -> None:
        self.letter_frequencies = letter_frequencies
        self._expected = expected_vector(letter_frequencies)

    def analyze(self, text: str, columns: int = 1) -> list[ColumnFrequency]:
        """Compute proportions and score for each of *columns* cosets.

        Args:
            text: Uppercase text; non-letters are skipped.
            columns: Number of key columns (1 = whole text).

        Returns:
            One :class:`ColumnFrequency` per column.

        Raises:
            InvalidColumnCountError: If *columns* is smaller than 1.
        """
        props, totals = self._proportions(text, columns)
        results: list[ColumnFrequency] = []
        for column in range(columns):
            total = int(totals[column])
            results.append(ColumnFrequency(
                column=column,
                proportions={
                    letter: float(props[column, idx])
                    for idx, letter in enumerate(LETTERS)
                },
                total=total,
                score=self._score(props[column], total),
            ))
        return results

    def scores(self, text: str, columns: int = 1) -> list[float]:
        """Return only the per-column chi-squared scores."""
        props, totals = self._proportions(text, columns)
        return [
            self._score(props[column], int(totals[column]))
            for column in range(columns)
        ]

    # ------------------------------------------------------------------ #

    @staticmethod
    def _proportions(
        text: str, columns: int
    ) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
        if columns < 1:
            raise InvalidColumnCountError(
                f"Column count must be >= 1, got {columns}"
            )
        return proportions(coset_letter_counts(text, columns))

    def _score(self, observed: NDArray[np.float64], total: int) -> float:
        if total == 0:
            return math.inf
        return chi_squared_statistic(observed, self._expected)
