import logging
from pathlib import Path

from libhyprscroll import log_utils


def test_default_log_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert log_utils.get_default_log() == tmp_path / "hyprscroll" / "hyprscroll.log"


def test_default_log_without_xdg(monkeypatch):
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    expected = Path("~/.local/share/hyprscroll/hyprscroll.log").expanduser()
    assert log_utils.get_default_log() == expected


def test_init_log_replaces_handlers(tmp_path):
    test_logger = logging.getLogger("libhyprscroll.test")
    log_utils.init_log(logging.INFO, logger=test_logger)
    log_utils.init_log(logging.INFO, log_path=tmp_path / "a" / "b.log", logger=test_logger)
    try:
        assert len(test_logger.handlers) == 1
        test_logger.info("hello")
        assert "hello" in (tmp_path / "a" / "b.log").read_text()
    finally:
        for handler in list(test_logger.handlers):
            test_logger.removeHandler(handler)
            handler.close()


def test_color_formatter_colors_each_level():
    formatter = log_utils.ColorFormatter("$COLOR%(message)s")
    expected = {
        logging.DEBUG: "\033[34m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[33m",
    }
    for level, color in expected.items():
        record = logging.LogRecord("libhyprscroll", level, __file__, 1, "hi", None, None)
        assert formatter.format(record) == f"{color}hi\033[0m"
