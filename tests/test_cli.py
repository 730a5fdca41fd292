from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from vigenere.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _reject_constant(token: str) -> None:
    raise ValueError(f"non-standard JSON constant {token}")


def _json(result) -> dict:
    assert result.exit_code == 0, result.output
    return json.loads(result.output, parse_constant=_reject_constant)


def test_encrypt_json(runner):
    result = runner.invoke(cli, ["-q", "-o", "json", "encrypt", "attack at dawn", "-k", "lemon"])
    report = _json(result)
    assert report["report_metadata"]["kind"] == "encrypt"
    assert report["result"]["output_text"] == "LXFOPV MH OEIB"


def test_decrypt_reads_stdin(runner):
    result = runner.invoke(
        cli,
        ["-q", "-o", "json", "decrypt", "-", "--key", "LEMON"],
        input="LXFOPVEFRNHR\n",
    )
    assert _json(result)["result"]["output_text"] == "ATTACKATDAWN"


def test_encrypt_console(runner):
    result = runner.invoke(cli, ["-q", "encrypt", "ATTACKATDAWN", "-k", "LEMON"])
    assert result.exit_code == 0
    assert "LXFOPVEFRNHR" in result.output


def test_frequencies_json(runner):
    result = runner.invoke(cli, ["-q", "-o", "json", "frequencies", "AABB", "-n", "2"])
    report = _json(result)["result"]
    assert report["columns"] == 2
    assert len(report["column_frequencies"]) == 2


def test_kasiski_json(runner):
    result = runner.invoke(cli, ["-q", "-o", "json", "kasiski", "ABCDE" * 12])
    assert _json(result)["result"]["first_key_length"] == 5


def test_smash_recovers_key(runner, english_text):
    encrypted = _json(runner.invoke(cli, ["-q", "-o", "json", "encrypt", english_text, "-k", "LEMON"]))
    ciphertext = encrypted["result"]["output_text"]
    result = runner.invoke(cli, ["-q", "-o", "json", "smash", ciphertext, "-l", "5"])
    assert _json(result)["result"]["first_key"] == "LEMON"


def test_crack_writes_report_file(runner, tmp_path, english_text):
    encrypted = _json(runner.invoke(cli, ["-q", "-o", "json", "encrypt", english_text, "-k", "LEMON"]))
    target = tmp_path / "reports" / "crack.json"
    result = runner.invoke(
        cli,
        ["-q", "-o", "json", "-f", str(target), "crack", encrypted["result"]["output_text"], "-l", "5"],
    )
    assert result.exit_code == 0
    report = json.loads(target.read_text(encoding="utf-8"))
    assert report["report_metadata"]["kind"] == "crack"
    assert report["result"]["key"] == "LEMON"


def test_invalid_length_exits_with_error(runner):
    result = runner.invoke(cli, ["-q", "smash", "ABCDEF", "--length", "0"])
    assert result.exit_code == 1


def test_kasiski_without_repeats_exits_with_error(runner):
    result = runner.invoke(cli, ["-q", "kasiski", "ABCDEFGHIJ"])
    assert result.exit_code == 1


def test_bad_combination_is_usage_error(runner):
    result = runner.invoke(cli, ["-q", "smash", "ABCDEF", "-l", "2", "--combination", "x,y"])
    assert result.exit_code == 2


def test_config_file_option(runner, tmp_path):
    config = tmp_path / "smash.toml"
    config.write_text("[vigenere]\nminimum_key_length = 1\n", encoding="utf-8")
    result = runner.invoke(cli, ["-q", "-c", str(config), "-o", "json", "kasiski", "ABABAB"])
    assert _json(result)["result"]["first_key_length"] == 2


def test_frequencies_degenerate_columns_are_strict_json(runner):
    result = runner.invoke(cli, ["-q", "-o", "json", "frequencies", "A!!", "-n", "3"])
    columns = _json(result)["result"]["column_frequencies"]
    assert [c["degenerate"] for c in columns] == [False, True, True]
    assert columns[0]["score"] is not None
    assert columns[1]["score"] is None
    assert columns[2]["total"] == 0


def test_smash_combination_in_json(runner):
    result = runner.invoke(
        cli, ["-q", "-o", "json", "smash", "ABCDEFGHIJ", "-l", "2", "--combination", "1,0"]
    )
    report = _json(result)["result"]
    table = report["candidate_table"]
    assert report["combination"] == [1, 0]
    assert report["assembled_key"] == table[0][1]["letter"] + table[1][0]["letter"]
    assert report["first_key"] == table[0][0]["letter"] + table[1][0]["letter"]


def test_smash_combination_in_console(runner):
    result = runner.invoke(cli, ["-q", "smash", "ABCDEFGHIJ", "-l", "2", "--combination", "0,0"])
    assert result.exit_code == 0
    assert "Assembled key" in result.output


def test_smash_combination_out_of_range(runner):
    result = runner.invoke(cli, ["-q", "smash", "ABCDEFGHIJ", "-l", "2", "--combination", "5,0"])
    assert result.exit_code == 1
