# tests/test_config.py

import logging
from alexandria.config import load_settings, DEFAULT_LOG_LEVEL
from alexandria.logger import get_logger


def test_defaults_from_empty_environment():
    s = load_settings({})
    assert s.log_level == DEFAULT_LOG_LEVEL
    assert s.log_file is None


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ALEX_LOG_LEVEL", "debug")
    monkeypatch.setenv("ALEX_LOG_FILE", str(tmp_path / "alex.log"))
    s = load_settings()
    assert s.log_level == logging.DEBUG
    assert s.log_file.endswith("alex.log")


def test_unknown_level_falls_back():
    assert load_settings({"ALEX_LOG_LEVEL": "chatty"}).log_level == DEFAULT_LOG_LEVEL


def test_logger_writes_json_lines_to_file(tmp_path):
    path = tmp_path / "logs" / "alex.log"
    log = get_logger("alexandria.test_file", level=logging.INFO, to_file=str(path))
    log.info("hello")
    for h in log.handlers:
        h.flush()

    line = path.read_text().strip()
    assert '"msg": "hello"' in line
    assert '"level": "INFO"' in line
    assert len(get_logger("alexandria.test_file").handlers) == 2


def test_logger_uses_given_stream(tmp_path):
    import io
    buf = io.StringIO()
    log = get_logger("alexandria.test_stream", level=logging.INFO, stream=buf)
    log.warning("careful")
    assert '"level": "WARNING"' in buf.getvalue()
    assert '"msg": "careful"' in buf.getvalue()


def test_cli_logger_debug_overrides_settings():
    from alexandria.config import Settings
    from alexandria.logger import cli_logger
    assert cli_logger(Settings(log_level=logging.ERROR), debug=True).level == logging.DEBUG
    assert cli_logger(Settings(log_level=logging.ERROR)).level == logging.ERROR
