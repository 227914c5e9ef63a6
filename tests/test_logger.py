# tests/test_logger.py
import dataclasses
import logging

from thumbnail_studio import logger as logger_mod
from thumbnail_studio.logger import get_logger, log_prompt


def test_prompts_are_silent_by_default(caplog):
    caplog.set_level(logging.DEBUG, logger="tests.prompts")
    log_prompt(get_logger("tests.prompts"), "thumbnail", "Gato astronauta")
    assert caplog.records == []


def test_prompts_are_logged_and_cut_when_enabled(caplog, monkeypatch):
    monkeypatch.setattr(logger_mod, "config", dataclasses.replace(logger_mod.config, log_prompts=True))
    caplog.set_level(logging.DEBUG, logger="tests.prompts")
    log = get_logger("tests.prompts")

    log_prompt(log, "variation", "Create a creative variation")
    log_prompt(log, "variation", "x" * 5000)

    first, second = (r.getMessage() for r in caplog.records)
    assert first == "variation prompt (27 chars): Create a creative variation"
    assert second.startswith("variation prompt (5000 chars): xxx")
    assert second.endswith("...")
    assert len(second) < 2100


def test_sdk_transport_logs_stay_quiet_at_info():
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("openai").level == logging.WARNING
