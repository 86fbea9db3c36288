import io
import logging

import colorlog

from chromalogo import log_manager


def test_get_logger_returns_same_instance():
    logger1 = log_manager.get_logger("chromalogo.test.same", stream=io.StringIO())
    logger2 = log_manager.get_logger("chromalogo.test.same", stream=io.StringIO())
    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_get_logger_file_handler(tmp_path):
    log_file = tmp_path / "test.log"
    logger = log_manager.get_logger(
        "chromalogo.test.file", level=logging.INFO, log_to_file=str(log_file), stream=io.StringIO()
    )
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_same_file_attached_once(tmp_path):
    log_file = tmp_path / "log1.log"
    logger = log_manager.get_logger("chromalogo.test.multi", log_to_file=str(log_file), stream=io.StringIO())
    log_manager.get_logger("chromalogo.test.multi", log_to_file=str(log_file), stream=io.StringIO())
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1


def test_logger_propagate_false_and_level():
    logger = log_manager.get_logger("chromalogo.test.level", level=logging.ERROR, stream=io.StringIO())
    assert logger.propagate is False
    assert logger.level == logging.ERROR


def test_default_stream_is_stderr(capsys):
    logger = log_manager.get_logger("chromalogo.test.stderr")
    logger.warning("to-stderr")
    out, err = capsys.readouterr()
    assert "to-stderr" in err
    assert "to-stderr" not in out


def test_plain_formatter_on_non_tty():
    stream = io.StringIO()
    logger = log_manager.get_logger("chromalogo.test.plain", stream=stream)
    logger.warning("plain")
    assert "[WARNING]" in stream.getvalue()
    assert "\x1b[" not in stream.getvalue()


def test_forced_color_uses_colorlog(monkeypatch):
    monkeypatch.setenv("CHROMALOGO_FORCE_COLOR", "true")
    logger = log_manager.get_logger("chromalogo.test.color", stream=io.StringIO())
    assert isinstance(logger.handlers[0].formatter, colorlog.ColoredFormatter)


def test_level_from_env(monkeypatch):
    assert log_manager.level_from_env() == logging.WARNING
    monkeypatch.setenv("CHROMALOGO_LOG_LEVEL", "debug")
    assert log_manager.level_from_env() == logging.DEBUG
    monkeypatch.setenv("CHROMALOGO_LOG_LEVEL", "chatty")
    assert log_manager.level_from_env(logging.INFO) == logging.INFO
