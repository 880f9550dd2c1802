"""Tests for logging utilities."""

import logging

from colmajor.logging import get_configured_level, get_logger, reset_logger
from colmajor.logging.config import save_log_level


def test_reset_logger_allows_reconfiguration(tmp_path):
    log1 = tmp_path / "first.log"
    log2 = tmp_path / "second.log"

    # Initial configuration writes to the first file
    logger = get_logger("test", log_file=log1, console=False)
    logger.info("first message")
    for handler in logger.handlers:
        handler.flush()

    assert "first message" in log1.read_text()

    reset_logger("test")
    assert logging.getLogger("test").handlers == []

    logger2 = get_logger("test", log_file=log2, console=False)
    logger2.info("second message")
    for handler in logger2.handlers:
        handler.flush()

    assert "second message" in log2.read_text()
    assert "second message" not in log1.read_text()
    reset_logger("test")


def test_get_logger_uses_log_dir(tmp_path):
    logger = get_logger("test.dir", log_dir=tmp_path / "logs", console=False)
    logger.warning("into the dir")
    for handler in logger.handlers:
        handler.flush()

    assert "into the dir" in (tmp_path / "logs" / "colmajor.log").read_text()
    reset_logger("test.dir")


def test_get_logger_applies_persisted_level(tmp_path, monkeypatch):
    config_path = tmp_path / "logging.json"
    monkeypatch.setenv("COLMAJOR_LOG_CONFIG", str(config_path))
    save_log_level("WARNING")

    get_logger("test.persisted", log_dir=tmp_path, console=False)
    assert get_configured_level("test.persisted") == "WARNING"
    reset_logger("test.persisted")


def test_explicit_level_wins_over_persisted(tmp_path, monkeypatch):
    monkeypatch.setenv("COLMAJOR_LOG_CONFIG", str(tmp_path / "logging.json"))
    save_log_level("ERROR")

    get_logger("test.explicit", level=logging.DEBUG, log_dir=tmp_path, console=False)
    assert get_configured_level("test.explicit") == "DEBUG"
    reset_logger("test.explicit")


def test_flattener_logs_shape_at_debug(tmp_path):
    from colmajor import serialize

    logger = logging.getLogger("colmajor.serialize")
    handler = logging.FileHandler(tmp_path / "debug.log", encoding="utf-8")
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        serialize([[1, 2, 3], [4, 5]])
        handler.flush()
    finally:
        logger.removeHandler(handler)
        handler.close()
        logger.setLevel(previous)

    text = (tmp_path / "debug.log").read_text()
    assert "ragged" in text
    assert "dropped=1" in text
