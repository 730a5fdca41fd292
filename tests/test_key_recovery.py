from __future__ import annotations

import math

import pytest

from vigenere.analyzers.key_recovery import KeyRecovery, smash_key
from vigenere.core.alphabet import LETTERS, encrypt_text
from vigenere.core.errors import (
    InvalidColumnCountError,
    InvalidCombinationError,
    InvalidParameterError,
)
from vigenere.core.models import AssembledKeyResult


@pytest.fixture
def recovery(quiet_logger) -> KeyRecovery:
    return KeyRecovery(logger=quiet_logger)


@pytest.fixture
def lemon_ciphertext(english_text) -> str:
    return encrypt_text(english_text.upper(), "LEMON")


class TestSmash:
    def test_recovers_lemon(self, recovery, lemon_ciphertext):
        result = recovery.smash(lemon_ciphertext, 5)
        assert result.first_key == "LEMON"
        assert result.key_length == 5
        assert result.options == 3

    def test_recovers_caesar_shift(self, recovery, english_text):
        ciphertext = encrypt_text(english_text.upper(), "K")
        assert recovery.smash(ciphertext, 1).first_key == "K"

    def test_columns_sorted_best_first(self, recovery, lemon_ciphertext):
        result = recovery.smash(lemon_ciphertext, 5, options=26)
        for candidates in result.candidate_table:
            scores = [c.score for c in candidates]
            assert scores == sorted(scores)
            assert sorted(c.letter for c in candidates) == list(LETTERS)

    def test_options_capped_at_alphabet(self, recovery, lemon_ciphertext):
        result = recovery.smash(lemon_ciphertext, 2, options=100)
        assert result.options == 26
        assert all(len(c) == 26 for c in result.candidate_table)

    def test_invalid_arguments(self, recovery):
        with pytest.raises(InvalidColumnCountError):
            recovery.smash("ABC", 0)
        with pytest.raises(InvalidParameterError):
            recovery.smash("ABC", 1, options=0)

    def test_degenerate_columns_rank_alphabetically(self, recovery):
        # Key longer than the text: the trailing columns have no letters
        result = recovery.smash("AB", 4)
        assert math.isinf(result.candidate_table[3][0].score)
        assert result.first_key[2:] == "AA"

    def test_functional_shortcut(self, lemon_ciphertext):
        assert smash_key(lemon_ciphertext, 5).first_key == "LEMON"


class TestAssemble:
    def test_all_zero_combination_is_first_key(self, recovery, lemon_ciphertext):
        result = recovery.smash(lemon_ciphertext, 5)
        assert result.assemble([0] * 5) == result.first_key

    def test_alternate_ranks(self, recovery, lemon_ciphertext):
        result = recovery.smash(lemon_ciphertext, 5)
        key = result.assemble([1, 0, 0, 0, 2])
        assert key[0] == result.candidate_table[0][1].letter
        assert key[1:4] == "EMO"
        assert key[4] == result.candidate_table[4][2].letter

    @pytest.mark.parametrize("combination", [[0, 0], [0, 0, 0, 0, 0, 0], [0, 0, 3, 0, 0], [0, -1, 0, 0, 0]])
    def test_invalid_combination(self, recovery, lemon_ciphertext, combination):
        result = recovery.smash(lemon_ciphertext, 5)
        with pytest.raises(InvalidCombinationError):
            result.assemble(combination)

    def test_alternatives_start_with_first_key(self, recovery, lemon_ciphertext):
        result = recovery.smash(lemon_ciphertext, 5, options=2)
        keys = result.alternatives(limit=4)
        assert len(keys) == 4
        assert keys[0] == "LEMON"
        assert keys[1] == "LEMO" + result.candidate_table[4][1].letter
        assert len(set(keys)) == 4

    def test_alternatives_exhaust_small_tables(self, recovery):
        result = recovery.smash(encrypt_text("ATTACKATDAWN", "LE"), 2, options=2)
        assert len(result.alternatives(limit=100)) == 4

    def test_assembled_result_keeps_table_and_choice(self, recovery, lemon_ciphertext):
        result = recovery.smash(lemon_ciphertext, 5)
        assembled = AssembledKeyResult.from_smash(result, [0, 0, 0, 0, 1])
        assert assembled.first_key == "LEMON"
        assert assembled.candidate_table == result.candidate_table
        assert assembled.assembled_key == result.assemble([0, 0, 0, 0, 1])
        with pytest.raises(InvalidCombinationError):
            AssembledKeyResult.from_smash(result, [0])
