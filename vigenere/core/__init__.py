"""
Vigenere Core Module
=====================

Alphabet primitives, data models and error taxonomy for the Vigenere
cryptanalysis toolkit. The engine lives in :mod:`vigenere.core.engine`.
"""

from vigenere.core.alphabet import (
    LETTER_FREQUENCIES,
    LETTERS,
    cyclic_add,
    cyclic_sub,
    decrypt_text,
    encrypt_text,
)
from vigenere.core.errors import (
    InvalidColumnCountError,
    InvalidCombinationError,
    InvalidParameterError,
    NoCandidatesError,
    TextTooLongError,
    TypeMismatchError,
    VigenereError,
)
from vigenere.core.models import (
    AssembledKeyResult,
    CandidateFrequency,
    ColumnFrequency,
    CrackResult,
    FactorEntry,
    FrequencyResult,
    KasiskiResult,
    KeyCandidate,
    KeyLengthSource,
    KeySmashResult,
    Operation,
    RecurrenceResult,
    SubstringOccurrence,
    TransformResult,
)

__all__ = [
    "LETTER_FREQUENCIES",
    "LETTERS",
    "cyclic_add",
    "cyclic_sub",
    "decrypt_text",
    "encrypt_text",
    "InvalidColumnCountError",
    "InvalidCombinationError",
    "InvalidParameterError",
    "NoCandidatesError",
    "TextTooLongError",
    "TypeMismatchError",
    "VigenereError",
    "AssembledKeyResult",
    "CandidateFrequency",
    "ColumnFrequency",
    "CrackResult",
    "FactorEntry",
    "FrequencyResult",
    "KasiskiResult",
    "KeyCandidate",
    "KeyLengthSource",
    "KeySmashResult",
    "Operation",
    "RecurrenceResult",
    "SubstringOccurrence",
    "TransformResult",
]
