"""
SmashCore Mathematical Utilities
=================================

NumPy-backed statistics used by the cryptanalysis modules: coset letter
histograms, proportion normalisation, Pearson's chi-squared statistic and
the one-sided divisor search used by Kasiski examination.

References:
    [1] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [2] Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
        Approach. Mathematical Association of America.
    [3] Kasiski, F. W. (1863). Die Geheimschriften und die
        Dechiffrir-Kunst. Berlin: E. S. Mittler und Sohn.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


FloatArray = NDArray[np.floating]
IntArray = NDArray[np.int64]

ALPHABET_SIZE: int = 26
_ORD_A: int = ord("A")


# ======================== Letter Histograms ================================


def coset_letter_counts(text: str, columns: int) -> IntArray:
    """Count uppercase letters per coset of *text*.

    Position *i* belongs to coset ``i % columns``; the coset index is a
    *character* position, so non-letters still advance it but are not
    counted.

    Args:
        text:    Text to count (only ``A``-``Z`` are counted).
        columns: Number of cosets (>= 1).

    Returns:
        ``(columns, 26)`` int64 array of letter counts.

    Raises:
        ValueError: If *columns* is smaller than 1.
    """
    if columns < 1:
        raise ValueError(f"columns must be >= 1, got {columns}")

    counts = np.zeros((columns, ALPHABET_SIZE), dtype=np.int64)
    if not text:
        return counts

    codes = np.frombuffer(text.encode("utf-32-le"), dtype=np.uint32).astype(np.int64)
    positions = np.arange(codes.size, dtype=np.int64)
    letter_idx = codes - _ORD_A
    mask = (letter_idx >= 0) & (letter_idx < ALPHABET_SIZE)
    if not np.any(mask):
        return counts

    np.add.at(counts, (positions[mask] % columns, letter_idx[mask]), 1)
    return counts


def proportions(counts: IntArray) -> tuple[FloatArray, IntArray]:
    """Normalise per-row counts into proportions.

    Rows without any count stay all-zero instead of producing NaN.

    Returns:
        Tuple of ``(proportions, totals)``.
    """
    counts = np.asarray(counts, dtype=np.int64)
    totals = counts.sum(axis=-1)
    props = np.zeros(counts.shape, dtype=np.float64)
    nonzero = totals > 0
    props[nonzero] = counts[nonzero] / totals[nonzero, np.newaxis]
    return props, totals


# ======================== Statistical Tests ================================


def chi_squared_statistic(observed: FloatArray, expected: FloatArray) -> float:
    """Compute Pearson's chi-squared statistic.

    .. math::

        \\chi^2 = \\sum_i \\frac{(O_i - E_i)^2}{E_i}

    Here applied to *proportions* rather than counts, which keeps scores
    comparable between cosets of different sizes.

    Reference:
        Pearson, K. (1900). Philosophical Magazine, 50(302), 157-175.

    Args:
        observed: Observed values (1-D array of length *k*).
        expected: Expected values (1-D array of length *k*, all > 0).

    Returns:
        The chi-squared statistic (>= 0).

    Raises:
        ValueError: If arrays differ in shape or expected contains zeros.
    """
    observed = np.asarray(observed, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if observed.shape != expected.shape:
        raise ValueError(
            f"Array shapes differ: observed={observed.shape}, expected={expected.shape}"
        )
    if np.any(expected <= 0):
        raise ValueError("Expected values must be > 0")

    return float(np.sum((observed - expected) ** 2 / expected))


# ======================== Number Theory ====================================


def small_divisors(n: int) -> list[int]:
    """Return the divisors of *n* in ``[2, sqrt(n)]``, ascending.

    Only the lower member of each divisor pair is listed: the cofactor
    ``n // d`` is never included, nor are the trivial divisors 1 and *n*.

    >>> small_divisors(12)
    [2, 3]
    >>> small_divisors(7)
    []
    """
    if n < 4:
        return []
    return [d for d in range(2, math.isqrt(n) + 1) if n % d == 0]
