from __future__ import annotations

import json
import logging
from pathlib import Path

from financial_jargon.utils.logging import get_logger


def test_json_log_file(tmp_path: Path) -> None:
    log = get_logger("financial_jargon.test_json", logs_root=tmp_path, run_id="run1", console_level=logging.ERROR)
    log.info("converted", extra={"value": "z", "result": "December"})
    for h in log.handlers:
        h.flush()

    files = list(tmp_path.rglob("run1.log"))
    assert len(files) == 1
    lines = [json.loads(x) for x in files[0].read_text(encoding="utf-8").splitlines()]
    assert lines[0]["msg"] == "logger_initialized"
    rec = lines[-1]
    assert rec["msg"] == "converted"
    assert rec["level"] == "INFO"
    assert rec["value"] == "z" and rec["result"] == "December"


def test_logger_configured_once(tmp_path: Path) -> None:
    a = get_logger("financial_jargon.test_once", logs_root=tmp_path, run_id="r")
    n = len(a.handlers)
    b = get_logger("financial_jargon.test_once", logs_root=tmp_path, run_id="r")
    assert a is b
    assert len(b.handlers) == n == 2


def test_logger_follows_new_logs_root(tmp_path: Path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    a = get_logger("financial_jargon.test_roots", logs_root=first, run_id="r", console_level=logging.ERROR)
    b = get_logger("financial_jargon.test_roots", logs_root=second, run_id="r", console_level=logging.ERROR)
    assert a is b
    assert len(b.handlers) == 2

    b.info("after_switch")
    for h in b.handlers:
        h.flush()

    first_text = next(first.rglob("r.log")).read_text(encoding="utf-8")
    second_text = next(second.rglob("r.log")).read_text(encoding="utf-8")
    assert "after_switch" not in first_text
    assert "after_switch" in second_text
