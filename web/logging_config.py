"""
Logging configuration with rotation and structured JSON logging.

This module sets up logging for the API with:
- Console output (human-readable)
- File output (JSON structured, with rotation)
- Error file (JSON, only errors, with rotation)
- Suppression of noisy third-party loggers
"""

import logging
import logging.handlers
import json
from datetime import datetime, timezone
from pathlib import Path
from web.config import settings


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""
    
    EXTRA_FIELDS = ("method", "path", "status", "duration", "expense_id")
    
    def format(self, record):
        """
        Format log record as JSON.
        
        Args:
            record: LogRecord instance
        
        Returns:
            JSON string with log data
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        
        # Request fields attached via `extra=`
        for name in self.EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(log_dir: str | Path | None = None):
    """
    Setup application logging with multiple handlers.
    
    Creates:
    - Console handler with INFO level (human-readable format)
    - File handler with DEBUG level (JSON format, rotating)
    - Error file handler with ERROR level (JSON format, rotating)
    
    Args:
        log_dir: Directory for log files, defaults to ``settings.log_dir``
    """
    log_dir = Path(log_dir or settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    
    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    # === Console Handler (human-readable) ===
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root_logger.addHandler(console_handler)
    
    # === File Handler (JSON, with rotation) ===
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / "expense_tracker.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(file_handler)
    
    # === Error File Handler (JSON, with rotation) ===
    error_handler = logging.handlers.RotatingFileHandler(
        log_dir / "errors.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(error_handler)
    
    # === Suppress noisy loggers ===
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
    logging.getLogger("aiohttp.server").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    
    logging.info("Logging configured successfully")
    logging.info(f"Log level: {settings.log_level}")
    logging.info(f"Log directory: {log_dir.absolute()}")
