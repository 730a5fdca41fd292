"""
Kasiski Analyzer
=================

Estimates the key length of a repeating-key cipher from the distances
between repeated ciphertext substrings.

Pipeline:
1. Recurrence search: for every substring length ``k`` in
   ``[2, floor(n/2) - 1]`` and every start with room for a second,
   non-overlapping copy, find each later occurrence.  Searching resumes
   just past the previous match, and every gap is measured from the
   original start index.
2. Gap factorisation: each distinct gap is counted and its divisors in
   ``[2, sqrt(gap)]`` are recorded once, on first sight.
3. Aggregation: every gap's count is added to each of its factors.
4. Ranking: factors sorted by descending weight (stable on ties, which
   keep ascending-factor order).  The suggested key length is the
   highest ranked factor not below the minimum key length.

The search is the naive O(n^2 k) scan; ciphertexts handled here are short
enough that suffix structures are not worth their complexity.

Reference:
    Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrir-Kunst.
    Berlin: E. S. Mittler und Sohn.
"""

from __future__ import annotations

from typing import Optional

from smashcore.logger import SmashLogger
from smashcore.math_utils import small_divisors
from vigenere.core.errors import NoCandidatesError
from vigenere.core.models import (
    CandidateFrequency,
    FactorEntry,
    KasiskiResult,
    RecurrenceResult,
    SubstringOccurrence,
)

DEFAULT_MINIMUM_KEY_LENGTH: int = 4


def recurrence_search(
    ciphertext: str, max_substring_length: int = 0
) -> RecurrenceResult:
    """Record all repeated, non-overlapping substrings of *ciphertext*.

    Args:
        ciphertext: Text to search, used verbatim.
        max_substring_length: Longest substring length to try;
            ``0`` searches every admissible length.

    Returns:
        :class:`RecurrenceResult` with occurrences per substring and the
        gap factor table in order of first sight.
    """
    n = len(ciphertext)
    substring_table: dict[str, list[tuple[int, int]]] = {}
    gap_counts: dict[int, int] = {}

    longest = n // 2 - 1
    if max_substring_length > 0:
        longest = min(longest, max_substring_length)

    for k in range(2, longest + 1):
        for start in range(n - 2 * k):
            candidate = ciphertext[start:start + k]
            search_index = start + k
            while True:
                match = ciphertext.find(candidate, search_index)
                if match < 0:
                    break
                gap = match - start
                substring_table.setdefault(candidate, []).append((start, gap))
                gap_counts[gap] = gap_counts.get(gap, 0) + 1
                search_index = match + k

    return RecurrenceResult(
        substring_table={
            substring: [
                SubstringOccurrence(index_of_appearance=start, gap_to_next_appearance=gap)
                for start, gap in occurrences
            ]
            for substring, occurrences in substring_table.items()
        },
        factor_table=[
            FactorEntry(gap=gap, frequency=count, factors=small_divisors(gap))
            for gap, count in gap_counts.items()
        ],
    )


def rank_factors(
    recurrence: RecurrenceResult,
) -> tuple[list[CandidateFrequency], list[CandidateFrequency]]:
    """Aggregate gap frequencies onto factors.

    Returns:
        ``(candidate_frequencies, frequency_ranks)``: the first ordered by
        ascending factor, the second by descending weight.
    """
    weights: dict[int, int] = {}
    for entry in recurrence.factor_table:
        for factor in entry.factors:
            weights[factor] = weights.get(factor, 0) + entry.frequency

    candidate_frequencies = [
        CandidateFrequency(factor=factor, frequency=weights[factor])
        for factor in sorted(weights)
    ]
    frequency_ranks = sorted(candidate_frequencies, key=lambda c: -c.frequency)
    return candidate_frequencies, frequency_ranks


def kasiski_examination(
    ciphertext: str,
    *,
    minimum_key_length: int = DEFAULT_MINIMUM_KEY_LENGTH,
    max_substring_length: int = 0,
) -> KasiskiResult:
    """Rank candidate key lengths for *ciphertext*.

    Args:
        ciphertext: Text to examine.
        minimum_key_length: Ranked factors below this are skipped when
            choosing ``first_key_length``.
        max_substring_length: Passed to :func:`recurrence_search`.

    Raises:
        NoCandidatesError: If nothing repeats, or no ranked factor reaches
            *minimum_key_length*.
    """
    recurrence = recurrence_search(ciphertext, max_substring_length)
    if recurrence.is_empty:
        raise NoCandidatesError(
            "No repeated substrings found; text is too short or too random "
            "for Kasiski examination",
            recurrence=recurrence,
        )

    candidate_frequencies, frequency_ranks = rank_factors(recurrence)
    first_key_length: Optional[int] = next(
        (c.factor for c in frequency_ranks if c.factor >= minimum_key_length),
        None,
    )
    if first_key_length is None:
        raise NoCandidatesError(
            f"No gap factor >= {minimum_key_length} among "
            f"{len(recurrence.factor_table)} repeated gap lengths",
            recurrence=recurrence,
        )

    return KasiskiResult(
        substring_table=recurrence.substring_table,
        factor_table=recurrence.factor_table,
        candidate_frequencies=candidate_frequencies,
        frequency_ranks=frequency_ranks,
        first_key_length=first_key_length,
        minimum_key_length=minimum_key_length,
    )


class KasiskiAnalyzer:
    """Configured, logging front end for :func:`kasiski_examination`.

    Usage::

        analyzer = KasiskiAnalyzer(minimum_key_length=4)
        result = analyzer.analyze(ciphertext)
        print(result.first_key_length, result.ranked_key_lengths[:5])
    """

    def __init__(
        self,
        minimum_key_length: int = DEFAULT_MINIMUM_KEY_LENGTH,
        max_substring_length: int = 0,
        logger: Optional[SmashLogger] = None,
    ) -> None:
        self.minimum_key_length = minimum_key_length
        self.max_substring_length = max_substring_length
        self.logger = logger or SmashLogger("vigenere.kasiski")

    def analyze(self, ciphertext: str) -> KasiskiResult:
        with self.logger.operation("kasiski_examination"):
            with self.logger.timed(f"recurrence search over {len(ciphertext)} chars"):
                try:
                    result = kasiski_examination(
                        ciphertext,
                        minimum_key_length=self.minimum_key_length,
                        max_substring_length=self.max_substring_length,
                    )
                except NoCandidatesError as exc:
                    self.logger.warning("Kasiski examination inconclusive: %s", exc)
                    raise

            self.logger.info(
                "Kasiski suggests key length %d (top factors: %s)",
                result.first_key_length,
                result.ranked_key_lengths[:5],
            )
            return result
