"""
English Alphabet Arithmetic
============================

The 26-letter alphabet primitives every other module builds on:

* ``LETTER_FREQUENCIES`` -- expected relative frequency of each letter in
  English text, as unit ratios from Project Gutenberg counts.  The mapping
  is read-only and shared by reference.
* ``cyclic_add`` / ``cyclic_sub`` -- addition and subtraction modulo 26
  over ``A``=0 .. ``Z``=25.  Any character that is not an uppercase ASCII
  letter passes through unchanged, which is how punctuation and spaces
  survive encryption.
* ``encrypt_text`` / ``decrypt_text`` -- repeating-key application, with
  the key indexed by character position (non-letters still consume a key
  character).

References:
    - Letter frequencies, Project Gutenberg corpus.
      http://www3.nd.edu/~busiforc/handouts/cryptography/Letter%20Frequencies.html
    - Kahn, D. (1967). The Codebreakers. Macmillan. Ch. 6.
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import Callable, Mapping

import numpy as np
from numpy.typing import NDArray

LETTERS: str = string.ascii_uppercase
_ORD_A: int = ord("A")

LETTER_FREQUENCIES: Mapping[str, float] = MappingProxyType(
    {
        "A": 0.08000395,
        "B": 0.01535701,
        "C": 0.02575785,
        "D": 0.04317924,
        "E": 0.12575645,
        "F": 0.02350463,
        "G": 0.01982677,
        "H": 0.06236609,
        "I": 0.06920007,
        "J": 0.00145188,
        "K": 0.00739906,
        "L": 0.04057231,
        "M": 0.02560994,
        "N": 0.06903785,
        "O": 0.07591270,
        "P": 0.01795742,
        "Q": 0.00117571,
        "R": 0.05959034,
        "S": 0.06340880,
        "T": 0.09085226,
        "U": 0.02841783,
        "V": 0.00981717,
        "W": 0.02224893,
        "X": 0.00179556,
        "Y": 0.01900888,
        "Z": 0.00079130,
    }
)


def is_letter(ch: str) -> bool:
    """True if *ch* is exactly one uppercase ASCII letter."""
    return len(ch) == 1 and "A" <= ch <= "Z"


def cyclic_add(x: str, c: str) -> str:
    """Return ``x + c`` modulo 26, or *x* unchanged if either is not a letter.

    >>> cyclic_add("A", "L")
    'L'
    >>> cyclic_add(" ", "L")
    ' '
    """
    if is_letter(x) and is_letter(c):
        return chr((ord(x) + ord(c) - 2 * _ORD_A) % 26 + _ORD_A)
    return x


def cyclic_sub(x: str, c: str) -> str:
    """Return ``x - c`` modulo 26, or *x* unchanged if either is not a letter.

    >>> cyclic_sub("L", "L")
    'A'
    """
    if is_letter(x) and is_letter(c):
        return chr((ord(x) - ord(c)) % 26 + _ORD_A)
    return x


def _apply_key(text: str, key: str, op: Callable[[str, str], str]) -> str:
    if not key:
        return text
    period = len(key)
    return "".join(op(ch, key[i % period]) for i, ch in enumerate(text))


def encrypt_text(text: str, key: str) -> str:
    """Encrypt *text* with the repeating *key* (both already uppercase)."""
    return _apply_key(text, key, cyclic_add)


def decrypt_text(text: str, key: str) -> str:
    """Decrypt *text* with the repeating *key* (both already uppercase)."""
    return _apply_key(text, key, cyclic_sub)


def expected_vector(table: Mapping[str, float]) -> NDArray[np.float64]:
    """Return *table* as a length-26 array ordered ``A`` .. ``Z``."""
    return np.array([table[letter] for letter in LETTERS], dtype=np.float64)
