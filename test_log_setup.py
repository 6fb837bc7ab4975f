import logging

import pytest

import log_setup


@pytest.fixture
def fresh_logging(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(log_setup, "_handler", None)
    level = root.level
    yield root
    if log_setup._handler is not None:
        root.removeHandler(log_setup._handler)
        log_setup._handler.close()
    root.setLevel(level)


def test_setup_logging_writes_to_file(tmp_path, fresh_logging):
    path = tmp_path / "tiview.log"
    handler = log_setup.setup_logging("info", path=str(path))
    logging.getLogger("terminfo_decoder").info("decoded %s", "xterm")
    handler.flush()
    text = path.read_text(encoding="utf-8")
    assert "terminfo_decoder - INFO - decoded xterm" in text


def test_setup_logging_is_idempotent(tmp_path, fresh_logging):
    path = tmp_path / "tiview.log"
    first = log_setup.setup_logging("warning", path=str(path))
    second = log_setup.setup_logging("debug", path=str(path))
    assert first is second
    assert fresh_logging.handlers.count(first) == 1
    assert fresh_logging.level == logging.DEBUG


def test_unwritable_log_path_falls_back(tmp_path, fresh_logging):
    handler = log_setup.setup_logging(path=str(tmp_path / "missing" / "x.log"))
    assert isinstance(handler, logging.NullHandler)
