"""Tests for logging setup and request logging."""
import json
import logging

from web.logging_config import JSONFormatter, setup_logging


def test_json_formatter_includes_request_fields():
    """Test extra request fields end up in the JSON record."""
    record = logging.LogRecord(
        name="web.handlers.expenses",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Received GET on %s",
        args=("/api/expenses",),
        exc_info=None,
    )
    record.expense_id = 5
    record.duration = 0.01
    
    data = json.loads(JSONFormatter().format(record))
    
    assert data["level"] == "INFO"
    assert data["message"] == "Received GET on /api/expenses"
    assert data["expense_id"] == 5
    assert data["duration"] == 0.01
    assert "method" not in data


def test_json_formatter_exception():
    """Test exception text is serialized."""
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        import sys
        exc_info = sys.exc_info()
    
    record = logging.LogRecord(
        name="test", level=logging.ERROR, pathname=__file__, lineno=1,
        msg="failed", args=(), exc_info=exc_info,
    )
    data = json.loads(JSONFormatter().format(record))
    
    assert "RuntimeError: boom" in data["exception"]


def test_setup_logging_creates_files(tmp_path):
    """Test setup creates the log directory and rotating files."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    log_dir = tmp_path / "logs"
    try:
        setup_logging(log_dir)
        logging.getLogger("test").error("written")
        for handler in root.handlers:
            handler.flush()
        
        assert (log_dir / "expense_tracker.log").exists()
        assert "written" in (log_dir / "errors.log").read_text(encoding="utf-8")
    finally:
        for handler in root.handlers[:]:
            handler.close()
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
