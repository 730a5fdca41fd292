from __future__ import annotations

import math

import pytest

from vigenere.core.alphabet import (
    LETTER_FREQUENCIES,
    LETTERS,
    cyclic_add,
    cyclic_sub,
    decrypt_text,
    encrypt_text,
    expected_vector,
)


def test_frequency_table_covers_alphabet():
    assert list(LETTER_FREQUENCIES) == list(LETTERS)
    assert all(0.0 < f < 1.0 for f in LETTER_FREQUENCIES.values())
    assert math.isclose(sum(LETTER_FREQUENCIES.values()), 1.0, abs_tol=1e-3)


def test_frequency_table_is_read_only():
    with pytest.raises(TypeError):
        LETTER_FREQUENCIES["E"] = 0.5  # type: ignore[index]


def test_expected_vector_order():
    vec = expected_vector(LETTER_FREQUENCIES)
    assert vec.shape == (26,)
    assert vec[4] == LETTER_FREQUENCIES["E"]


@pytest.mark.parametrize(
    "x, c, added, subtracted",
    [
        ("A", "A", "A", "A"),
        ("A", "L", "L", "P"),
        ("Z", "B", "A", "Y"),
        ("M", "N", "Z", "Z"),
    ],
)
def test_cyclic_arithmetic(x, c, added, subtracted):
    assert cyclic_add(x, c) == added
    assert cyclic_sub(x, c) == subtracted


@pytest.mark.parametrize("x, c", [(" ", "K"), ("!", "A"), ("a", "B"), ("Q", " "), ("Q", "b")])
def test_cyclic_arithmetic_passes_non_letters_through(x, c):
    assert cyclic_add(x, c) == x
    assert cyclic_sub(x, c) == x


def test_sub_inverts_add_for_every_pair():
    for x in LETTERS:
        for c in LETTERS:
            assert cyclic_sub(cyclic_add(x, c), c) == x


def test_key_advances_over_non_letters():
    assert encrypt_text("ATTACK AT DAWN!", "LEMON") == "LXFOPV MH OEIB!"
    assert decrypt_text("LXFOPV MH OEIB!", "LEMON") == "ATTACK AT DAWN!"


def test_empty_key_is_identity():
    assert encrypt_text("HELLO", "") == "HELLO"
