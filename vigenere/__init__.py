"""
Vigenere Smash -- Classical Vigenere Cryptanalysis
===================================================

Encrypts and decrypts repeating-key (Vigenere) ciphers and breaks them
with Kasiski examination and chi-squared frequency analysis.

Modules:
    - vigenere.core.alphabet: Letter frequencies and modular arithmetic
    - vigenere.core.engine: Central analysis engine
    - vigenere.core.models: Pydantic data models
    - vigenere.analyzers: Frequency, Kasiski and key recovery analyzers
    - vigenere.output: Console and report output
    - vigenere.cli: Click-based command-line interface

References:
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrir-Kunst.
    - Pearson, K. (1900). Chi-squared goodness of fit.
    - Sinkov, A. (1966). Elementary Cryptanalysis.
"""

from vigenere.analyzers.kasiski import kasiski_examination, recurrence_search
from vigenere.analyzers.key_recovery import smash_key
from vigenere.core.alphabet import LETTER_FREQUENCIES, cyclic_add, cyclic_sub
from vigenere.core.engine import VigenereEngine
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
    ColumnFrequency,
    CrackResult,
    KasiskiResult,
    KeySmashResult,
    RecurrenceResult,
    TransformResult,
)

__version__ = "1.0.0"
__tool_name__ = "vigenere"

__all__ = [
    "LETTER_FREQUENCIES",
    "cyclic_add",
    "cyclic_sub",
    "VigenereEngine",
    "InvalidColumnCountError",
    "InvalidCombinationError",
    "InvalidParameterError",
    "NoCandidatesError",
    "TextTooLongError",
    "TypeMismatchError",
    "VigenereError",
    "ColumnFrequency",
    "CrackResult",
    "KasiskiResult",
    "KeySmashResult",
    "RecurrenceResult",
    "TransformResult",
    "kasiski_examination",
    "recurrence_search",
    "smash_key",
]
