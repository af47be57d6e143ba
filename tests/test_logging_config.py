import logging
from logging.handlers import RotatingFileHandler

import pytest

from codeython_api.app.core.logging_config import _HANDLER_TAG, setup_logging


def installed_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG, False)]


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in installed_handlers():
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


def test_repeated_setup_does_not_stack_handlers(tmp_path):
    setup_logging("INFO")
    setup_logging("DEBUG", str(tmp_path / "logs" / "api.log"))

    handlers = installed_handlers()
    assert len(handlers) == 2
    assert any(isinstance(h, RotatingFileHandler) for h in handlers)
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG


def test_file_handler_writes_service_logs(tmp_path):
    logfile = tmp_path / "api.log"
    setup_logging("INFO", str(logfile), max_bytes=1024, backup_count=1)

    logging.getLogger("codeython_api.test").info("problem created")
    for handler in installed_handlers():
        handler.flush()

    assert "[INFO] codeython_api.test: problem created" in logfile.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO
