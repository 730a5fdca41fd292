"""
Vigenere Core Data Models
==========================

Pydantic models for the Vigenere cryptanalysis engine.  They represent
the structured results of the recurrence search, Kasiski examination,
column frequency scoring and chi-squared key recovery.

All models are serialisable to JSON and designed for consumption by both
the CLI output layer and the JSON report writer.

References:
    - Kasiski, F. W. (1863). Die Geheimschriften und die
      Dechiffrir-Kunst. Berlin: E. S. Mittler und Sohn.
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable. Philosophical Magazine, 50(302).
    - Sinkov, A. (1966). Elementary Cryptanalysis. MAA.
"""

from __future__ import annotations

import enum
import itertools
import math
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, computed_field

from vigenere.core.errors import InvalidCombinationError


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Operation(str, enum.Enum):
    """Direction of a repeating-key transformation."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class KeyLengthSource(str, enum.Enum):
    """Where the key length used for recovery came from."""

    EXPLICIT = "explicit"
    KASISKI = "kasiski"
    FALLBACK = "fallback"


# ===================================================================== #
#  Cipher Models
# ===================================================================== #


class TransformResult(BaseModel):
    """Outcome of a single encrypt / decrypt call.

    Attributes:
        operation: Whether the text was encrypted or decrypted.
        key: Uppercased key that was applied.
        input_text: Working text before the transformation.
        output_text: Transformed text.
    """

    operation: Operation
    key: str
    input_text: str
    output_text: str


class ColumnFrequency(BaseModel):
    """Letter proportions and chi-squared score of one key column (coset).

    Attributes:
        column: Coset index (position modulo the column count).
        proportions: Observed proportion of each letter ``A`` .. ``Z``.
        total: Number of letters counted in this column.
        score: Chi-squared deviation from English; ``inf`` when the
            column holds no letters (``null`` in JSON, see ``degenerate``).
    """

    model_config = ConfigDict(ser_json_inf_nan="null")

    column: int = Field(ge=0)
    proportions: dict[str, float] = Field(default_factory=dict)
    total: int = Field(default=0, ge=0)
    score: float = math.inf

    @computed_field  # type: ignore[prop-decorator]
    @property
    def degenerate(self) -> bool:
        """True when the column holds no letters and its score is undefined."""
        return self.total == 0


class FrequencyResult(BaseModel):
    """All column frequencies of one text for a given column count."""

    columns: int = Field(ge=1)
    text_length: int = Field(ge=0)
    column_frequencies: list[ColumnFrequency] = Field(default_factory=list)


# ===================================================================== #
#  Kasiski Models
# ===================================================================== #


class SubstringOccurrence(BaseModel):
    """A repeated substring starting at ``index_of_appearance``.

    ``gap_to_next_appearance`` is measured from the start of that search
    position to the start of the repetition.
    """

    index_of_appearance: int = Field(ge=0)
    gap_to_next_appearance: int = Field(ge=1)


class FactorEntry(BaseModel):
    """How often one gap length occurred, and its non-trivial factors.

    Attributes:
        gap: Distance between two occurrences.
        frequency: Number of recorded repetitions with exactly this gap.
        factors: Divisors of ``gap`` in ``[2, sqrt(gap)]``, ascending.
    """

    gap: int = Field(ge=1)
    frequency: int = Field(default=1, ge=1)
    factors: list[int] = Field(default_factory=list)


class RecurrenceResult(BaseModel):
    """Raw output of the repeated-substring search.

    Attributes:
        substring_table: Occurrences per repeated substring, in discovery order.
        factor_table: One entry per distinct gap, in order of first sight.
    """

    substring_table: dict[str, list[SubstringOccurrence]] = Field(default_factory=dict)
    factor_table: list[FactorEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.factor_table

    def factor_entry(self, gap: int) -> Optional[FactorEntry]:
        """Return the entry recorded for *gap*, if any."""
        for entry in self.factor_table:
            if entry.gap == gap:
                return entry
        return None


class CandidateFrequency(BaseModel):
    """Aggregate weight of one factor across all gaps that list it."""

    factor: int = Field(ge=2)
    frequency: int = Field(ge=1)


class KasiskiResult(BaseModel):
    """Complete Kasiski examination result.

    Attributes:
        substring_table: See :class:`RecurrenceResult`.
        factor_table: See :class:`RecurrenceResult`.
        candidate_frequencies: Factor weights ordered by ascending factor.
        frequency_ranks: The same weights ranked by descending frequency;
            ties keep ascending-factor order.
        first_key_length: Highest ranked factor not below
            ``minimum_key_length``.
        minimum_key_length: Threshold applied when picking the suggestion.
    """

    substring_table: dict[str, list[SubstringOccurrence]] = Field(default_factory=dict)
    factor_table: list[FactorEntry] = Field(default_factory=list)
    candidate_frequencies: list[CandidateFrequency] = Field(default_factory=list)
    frequency_ranks: list[CandidateFrequency] = Field(default_factory=list)
    first_key_length: int = Field(ge=1)
    minimum_key_length: int = Field(default=4, ge=0)

    @property
    def ranked_key_lengths(self) -> list[int]:
        """Ranked factors that pass the minimum key length, best first."""
        return [
            c.factor for c in self.frequency_ranks
            if c.factor >= self.minimum_key_length
        ]


# ===================================================================== #
#  Key Recovery Models
# ===================================================================== #


class KeyCandidate(BaseModel):
    """One shift letter for a key column and its chi-squared score."""

    model_config = ConfigDict(ser_json_inf_nan="null")

    letter: str = Field(min_length=1, max_length=1)
    score: float


class KeySmashResult(BaseModel):
    """Ranked per-column key letters and the best-scoring key.

    Attributes:
        key_length: Number of key columns.
        options: Candidates retained per column.
        candidate_table: Per column, candidates ascending by score.
        first_key: Concatenation of each column's best letter.
    """

    key_length: int = Field(ge=1)
    options: int = Field(ge=1, le=26)
    candidate_table: list[list[KeyCandidate]] = Field(default_factory=list)
    first_key: str = ""

    def assemble(self, combination: Sequence[int]) -> str:
        """Build the key picking rank ``combination[i]`` in column *i*.

        Args:
            combination: One 0-based rank index per key column.

        Returns:
            The assembled key.  All zeros gives :attr:`first_key`.

        Raises:
            InvalidCombinationError: On a length mismatch or an index
                outside a column's candidate list.
        """
        if len(combination) != len(self.candidate_table):
            raise InvalidCombinationError(
                f"Combination has {len(combination)} indices, "
                f"key has {len(self.candidate_table)} columns"
            )

        letters: list[str] = []
        for column, (rank, candidates) in enumerate(zip(combination, self.candidate_table)):
            if not 0 <= rank < len(candidates):
                raise InvalidCombinationError(
                    f"Rank {rank} out of range for column {column} "
                    f"(0..{len(candidates) - 1})"
                )
            letters.append(candidates[rank].letter)
        return "".join(letters)

    def alternatives(self, limit: int = 10) -> list[str]:
        """Enumerate up to *limit* assembled keys, first key first.

        Combinations are visited in lexicographic order of their rank
        indices, so the last column varies fastest.
        """
        ranges = [range(len(candidates)) for candidates in self.candidate_table]
        return [
            self.assemble(combo)
            for combo in itertools.islice(itertools.product(*ranges), max(limit, 0))
        ]


class AssembledKeyResult(KeySmashResult):
    """Key smash result together with one user-chosen rank combination."""

    combination: list[int] = Field(default_factory=list)
    assembled_key: str = ""

    @classmethod
    def from_smash(
        cls, smash: KeySmashResult, combination: Sequence[int]
    ) -> AssembledKeyResult:
        """Assemble *combination* from *smash* and keep both."""
        return cls(
            **dict(smash),
            combination=list(combination),
            assembled_key=smash.assemble(combination),
        )


class CrackResult(BaseModel):
    """End-to-end result: key length, recovered key and decryption."""

    key_length: int = Field(ge=1)
    key_length_source: KeyLengthSource
    key: str
    plaintext: str
    kasiski: Optional[KasiskiResult] = None
    smash: KeySmashResult
