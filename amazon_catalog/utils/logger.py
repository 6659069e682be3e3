"""
Logging configuration for applications using the client
"""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit

from amazon_catalog.config.settings import settings

# Request context attached by CatalogClient through logger.x(..., extra={...})
CONTEXT_FIELDS = ('operation', 'locale', 'error_type')

class StructuredFormatter(logging.Formatter):
    """JSON formatter that carries catalog request context"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        return json.dumps(log_data)

def setup_logging(level: Optional[str] = None, structured: Optional[bool] = None):
    """
    Configure root logging for an application embedding the client

    Args:
        level: Log level name; defaults to settings.log_level
        structured: JSON output; defaults to settings.structured_logging
    """
    if level is None:
        level = settings.log_level
    if structured is None:
        structured = settings.structured_logging

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)

    logging.info(f"Logging configured: level={level}, structured={structured}")

def redact_url(url: str) -> str:
    """Drop the query string so keys and signatures never reach the logs"""
    parts = urlsplit(url)
    if not parts.netloc:
        return parts.path
    return f"{parts.scheme}://{parts.netloc}{parts.path}"
