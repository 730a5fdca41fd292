from __future__ import annotations

import pytest

from smashcore.config import SmashConfig, VigenereConfig


def test_defaults():
    config = SmashConfig()
    assert config.vigenere == VigenereConfig()
    assert config.vigenere.minimum_key_length == 4
    assert config.vigenere.candidate_options == 3
    assert config.vigenere.kasiski_enabled is True
    assert config.global_settings.log_level == "WARNING"


def test_load_toml(tmp_path):
    path = tmp_path / "smash.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "\n"
        "[vigenere]\n"
        "minimum_key_length = 2\n"
        "candidate_options = 5\n"
        "kasiski_enabled = false\n"
        "unknown_future_key = 1\n",
        encoding="utf-8",
    )
    config = SmashConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.vigenere.minimum_key_length == 2
    assert config.vigenere.candidate_options == 5
    assert config.vigenere.kasiski_enabled is False
    assert config.vigenere.max_text_length == VigenereConfig().max_text_length


def test_missing_sections_fall_back_to_defaults(tmp_path):
    path = tmp_path / "empty.toml"
    path.write_text("", encoding="utf-8")
    assert SmashConfig.load(path).to_dict() == SmashConfig().to_dict()


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SmashConfig.load(tmp_path / "nope.toml")


def test_to_dict_sections():
    data = SmashConfig().to_dict()
    assert set(data) == {"global_settings", "vigenere"}
    assert data["vigenere"]["max_substring_length"] == 0
    assert set(data["global_settings"]) == {"log_level", "log_file", "log_json", "debug"}
