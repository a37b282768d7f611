import logging
from contextlib import contextmanager

from feature_flag_api.app.core.logging_config import setup_logging


@contextmanager
def bare_root_logger():
    """Run with no handlers on the root logger, restoring it afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers, root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_console_only_by_default():
    with bare_root_logger() as root:
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [logging.StreamHandler]


def test_log_file_adds_file_handler(tmp_path):
    logfile = tmp_path / "flags.log"
    with bare_root_logger() as root:
        setup_logging("INFO", str(logfile))
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

        logging.getLogger("feature_flag_api.test").info("Feature flag beta created")
        for handler in root.handlers:
            handler.flush()
    assert "Feature flag beta created" in logfile.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info():
    with bare_root_logger() as root:
        setup_logging("chatty")
        assert root.level == logging.INFO


def test_second_call_keeps_existing_handlers():
    with bare_root_logger() as root:
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(root.handlers) == 1
