import json

from lingo.core.logging import (
    LoggerRegistry,
    bind_context,
    clear_context,
    configure_logging,
    engine_logger,
    get_logger,
)


def last_event(err: str) -> dict:
    return json.loads(err.strip().splitlines()[-1])


def test_json_logs_go_to_stderr(capsys, restore_logging):
    configure_logging(level="INFO", json_logs=True)
    get_logger("lingo.test").info("rule_added", direction="plural")

    captured = capsys.readouterr()
    assert captured.out == ""
    event = last_event(captured.err)
    assert event["event"] == "rule_added"
    assert event["direction"] == "plural"
    assert event["level"] == "info"
    assert event["service"] == "lingo"


def test_bound_context_is_attached(capsys, restore_logging):
    configure_logging(level="INFO", json_logs=True)
    bind_context(command="pluralize")
    try:
        get_logger("lingo.test").info("word_inflected")
    finally:
        clear_context()
    assert last_event(capsys.readouterr().err)["command"] == "pluralize"


def test_level_filters_events(capsys, restore_logging):
    configure_logging(level="WARNING", json_logs=True)
    get_logger("lingo.test").info("hidden")
    assert "hidden" not in capsys.readouterr().err


def test_domain_loggers_are_reused():
    assert engine_logger() is engine_logger()
    assert LoggerRegistry.get("engine") is engine_logger()
