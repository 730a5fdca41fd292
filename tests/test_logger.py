from __future__ import annotations

import json

from smashcore.config import SmashConfig
from smashcore.logger import SmashLogger


def test_json_file_records_operation_and_extra(tmp_path):
    log_file = tmp_path / "logs" / "smash.log"
    log = SmashLogger(
        "tests.json",
        log_level="DEBUG",
        log_file=log_file,
        json_logs=True,
        console_output=False,
    )
    with log.operation("kasiski_examination"):
        log.info("Repeated substring found", gap=5)
    log.info("Done")

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert lines[0]["message"] == "Repeated substring found"
    assert lines[0]["operation"] == "kasiski_examination"
    assert lines[0]["tool_name"] == "tests.json"
    assert lines[0]["extra"] == {"gap": 5}
    assert "operation" not in lines[1]


def test_level_filters_records(tmp_path):
    log_file = tmp_path / "plain.log"
    log = SmashLogger("tests.plain", log_file=log_file, console_output=False)
    log.info("hidden")
    log.warning("shown")
    content = log_file.read_text(encoding="utf-8")
    assert "shown" in content
    assert "hidden" not in content


def test_from_config_debug_overrides_level():
    config = SmashConfig()
    config.global_settings.debug = True
    log = SmashLogger.from_config("tests.config", config)
    assert log.underlying.level == 10
    assert log.tool_name == "tests.config"


def test_timed_reports_elapsed(quiet_logger):
    with quiet_logger.timed("noop") as timer:
        pass
    assert timer.elapsed >= 0.0
