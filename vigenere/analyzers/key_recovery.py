"""
Chi-Squared Key Recovery
=========================

Recovers the letters of a repeating key once its length is known.

Every key column is a Caesar cipher.  Decrypting the whole ciphertext
under each of the 26 single-letter keys and scoring every column against
English letter frequencies ranks, per column, which shift makes that
column look most like English.  The best letter of each column forms the
first candidate key; lower-ranked letters stay available for assembling
alternative keys when the text is too short for the scores to be
decisive.

References:
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America. Ch. 2.
    - Pearson, K. (1900). Philosophical Magazine, 50(302), 157-175.
"""

from __future__ import annotations

from typing import Mapping, Optional

from smashcore.logger import SmashLogger
from vigenere.analyzers.frequency import FrequencyAnalyzer
from vigenere.core.alphabet import LETTER_FREQUENCIES, LETTERS, decrypt_text
from vigenere.core.errors import InvalidColumnCountError, InvalidParameterError
from vigenere.core.models import KeyCandidate, KeySmashResult

DEFAULT_OPTIONS: int = 3
MAX_OPTIONS: int = len(LETTERS)


class KeyRecovery:
    """Brute-force every shift per key column and rank by chi-squared.

    Usage::

        recovery = KeyRecovery()
        result = recovery.smash(ciphertext, length=5)
        print(result.first_key, result.assemble([0, 1, 0, 0, 0]))
    """

    def __init__(
        self,
        letter_frequencies: Mapping[str, float] = LETTER_FREQUENCIES,
        logger: Optional[SmashLogger] = None,
    ) -> None:
        self._frequency_analyzer = FrequencyAnalyzer(letter_frequencies)
        self.logger = logger or SmashLogger("vigenere.key_recovery")

    def smash(
        self, ciphertext: str, length: int, options: int = DEFAULT_OPTIONS
    ) -> KeySmashResult:
        """Rank candidate letters for each of *length* key columns.

        Args:
            ciphertext: Uppercase ciphertext.
            length: Key length (>= 1).
            options: Candidates kept per column; capped at 26.

        Returns:
            :class:`KeySmashResult` with the ranked table and first key.

        Raises:
            InvalidColumnCountError: If *length* is smaller than 1.
            InvalidParameterError: If *options* is smaller than 1.
        """
        if length < 1:
            raise InvalidColumnCountError(f"Key length must be >= 1, got {length}")
        if options < 1:
            raise InvalidParameterError(f"options must be >= 1, got {options}")
        options = min(options, MAX_OPTIONS)

        candidate_table: list[list[KeyCandidate]] = [[] for _ in range(length)]
        with self.logger.operation("smash_key"):
            for letter in LETTERS:
                shifted = decrypt_text(ciphertext, letter)
                scores = self._frequency_analyzer.scores(shifted, length)
                for column, score in enumerate(scores):
                    candidate_table[column].append(KeyCandidate(letter=letter, score=score))

            # Stable: equal scores keep alphabetical order
            ranked = [
                sorted(candidates, key=lambda c: c.score)[:options]
                for candidates in candidate_table
            ]
            first_key = "".join(candidates[0].letter for candidates in ranked)
            self.logger.info(
                "Recovered key candidate %r for length %d", first_key, length
            )

        return KeySmashResult(
            key_length=length,
            options=options,
            candidate_table=ranked,
            first_key=first_key,
        )


def smash_key(
    ciphertext: str,
    length: int,
    options: int = DEFAULT_OPTIONS,
    letter_frequencies: Mapping[str, float] = LETTER_FREQUENCIES,
) -> KeySmashResult:
    """Functional shortcut for :meth:`KeyRecovery.smash`."""
    return KeyRecovery(letter_frequencies).smash(ciphertext, length, options)
